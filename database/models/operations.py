from sqlalchemy import Column, String
from database.models.base import Base


class ManagedDatabase(Base):
    __tablename__ = "databases"

    id = Column(String, primary_key=True, index=True)
    name = Column(String)
    type = Column(String)  # MySQL, MariaDB, ...


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String, primary_key=True, index=True)
    name = Column(String)
    schedule = Column(String)  # cron expression, informational only
