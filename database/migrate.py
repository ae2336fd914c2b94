"""
Migration Runner
Thin wrapper over the Alembic CLI for the panel's SQL backend
"""
import sys
import os
import subprocess

# Add the project root to the Python path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)


def _alembic(*args, label="MIGRATE"):
    """Run an alembic subcommand from the project root. Returns True on success."""
    try:
        result = subprocess.run(
            [sys.executable, "-m", "alembic", *args],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True
        )
    except OSError as e:
        print(f"[{label}] Could not run alembic: {e}")
        return False

    if result.stdout:
        print(result.stdout)
    if result.returncode != 0:
        print(f"[{label}] alembic {' '.join(args)} failed ✗")
        print(result.stderr)
        return False
    return True


def create_database():
    """Create the panel tables if they don't exist and stamp alembic head"""
    print("=" * 50)
    print("Initializing Database...")
    print("=" * 50)

    # Import here so the in-memory backend never builds an engine
    from database.connection import get_engine
    from database.models import Base

    print("[INIT] Creating tables via SQLAlchemy...")
    Base.metadata.create_all(bind=get_engine())
    print(f"[INIT] Tables created: {', '.join(sorted(Base.metadata.tables))}")

    print("[INIT] Stamping Alembic head...")
    if not _alembic("stamp", "head", label="INIT"):
        return False
    print("\n[INIT] Database initialized and stamped successfully ✓")
    return True


def run_migrations():
    """Run all pending migrations"""
    print("=" * 50)
    print("Running Database Migrations...")
    print("=" * 50)
    return _alembic("upgrade", "head")


def rollback_migration():
    """Rollback the last migration"""
    print("Rolling back last migration...")
    return _alembic("downgrade", "-1")


def reset_database():
    """Drop everything back to base, then migrate to head"""
    print("=" * 50)
    print("Resetting Database...")
    print("=" * 50)
    return _alembic("downgrade", "base") and _alembic("upgrade", "head")


def show_current():
    print("Current migration status:")
    _alembic("current")


def show_history():
    print("Migration history:")
    _alembic("history")


if __name__ == "__main__":
    command = sys.argv[1] if len(sys.argv) > 1 else "run"

    commands = {
        "init": create_database,
        "run": run_migrations,
        "rollback": rollback_migration,
        "reset": reset_database,
        "status": show_current,
        "history": show_history,
    }

    if command in commands:
        ok = commands[command]()
        sys.exit(0 if ok is not False else 1)
    print(f"Unknown command: {command}. Available: {', '.join(commands)}")
    sys.exit(2)
