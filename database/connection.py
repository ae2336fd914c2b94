import os
import logging
from typing import Optional
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, scoped_session
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import URL
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger("database.connection")

def get_connection_url():
    """
    Synthesizes the database URL based on environment variables.
    Handles the directory creation for SQLite.
    """
    engine_type = os.getenv("DB_ENGINE", "sqlite").lower()

    if engine_type == "sqlite":
        db_name = os.getenv("DB_NAME", "panel.db")

        # This file is in /project/database/connection.py
        # We want /project/database/instance/
        current_dir = os.path.dirname(os.path.abspath(__file__))
        instance_dir = os.path.join(current_dir, "instance")

        if not os.path.exists(instance_dir):
            try:
                os.makedirs(instance_dir, exist_ok=True)
                logger.info(f"Created SQLite instance directory: {instance_dir}")
            except OSError as e:
                logger.error(f"Could not create database directory: {e}")
                raise

        db_path = os.path.join(instance_dir, db_name)
        return f"sqlite:///{db_path}"

    else:
        # RDBMS: Construct URL generically
        driver_map = {
            'postgresql': 'postgresql+psycopg2',
            'mysql': 'mysql+pymysql',
        }
        driver = driver_map.get(engine_type, engine_type)

        return URL.create(
            drivername=driver,
            username=os.getenv("DB_USER"),
            password=os.getenv("DB_PASSWORD"),
            host=os.getenv("DB_HOST"),
            port=int(os.getenv("DB_PORT")) if os.getenv("DB_PORT") else None,
            database=os.getenv("DB_NAME")
        )

def create_app_engine():
    """
    Configures the SQLAlchemy Engine with dialect-specific options.
    """
    url = get_connection_url()
    str_url = str(url)
    is_sqlite = str_url.startswith("sqlite")
    is_mysql = "mysql" in str_url
    is_postgres = "postgres" in str_url

    kwargs = {
        'echo': os.getenv("DB_ECHO", "False").lower() == 'true',
        'future': True
    }

    if is_sqlite:
        # Allow multi-threaded access for web servers
        kwargs['connect_args'] = {'check_same_thread': False, 'timeout': 60}

    elif is_mysql:
        kwargs['pool_recycle'] = 3600
        kwargs['pool_pre_ping'] = True
        kwargs['pool_size'] = int(os.getenv("DB_POOL_SIZE", 5))
        kwargs['max_overflow'] = int(os.getenv("DB_MAX_OVERFLOW", 10))

    elif is_postgres:
        kwargs['pool_pre_ping'] = True
        kwargs['pool_size'] = int(os.getenv("DB_POOL_SIZE", 5))
        kwargs['max_overflow'] = int(os.getenv("DB_MAX_OVERFLOW", 10))

    engine = create_engine(url, **kwargs)

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=DELETE")
            cursor.close()

    return engine

_engine: Optional[Engine] = None
_session_registry = None

def get_engine() -> Engine:
    # Created on first use so the in-memory backend never touches the disk
    global _engine
    if _engine is None:
        _engine = create_app_engine()
    return _engine

def get_session_factory():
    """Thread-local Session Registry (Scoped Session)"""
    global _session_registry
    if _session_registry is None:
        _session_registry = scoped_session(sessionmaker(autocommit=False, autoflush=False, bind=get_engine()))
    return _session_registry
