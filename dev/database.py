import typer
import sys
import os

# Add parent directory to sys.path to allow imports from project root when running standalone
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from database.migrate import run_migrations, rollback_migration, reset_database, create_database, show_current, show_history
from database.seeder import run_all_seeders, run_specific_seeder
from dev.utils import print_header, print_success, print_error, open_sql_store

app = typer.Typer(help="Database management commands")

@app.command("migrate")
def migrate_cmd():
    """Apply pending migrations"""
    print_header("Applying Migrations")
    if run_migrations():
        print_success("Done.")
    else:
        print_error("Failed.")
        raise typer.Exit(code=1)

@app.command("rollback")
def rollback_cmd():
    """Rollback the last migration"""
    print_header("Rolling Back")
    if rollback_migration():
        print_success("Done.")
    else:
        print_error("Failed.")
        raise typer.Exit(code=1)

@app.command("status")
def status_cmd():
    """Show migration status"""
    print_header("Migration Status")
    show_current()

@app.command("init-db")
def init_db_cmd():
    """Initialize database (Create tables + Stamp Head). Use this if DB is empty/broken."""
    print_header("Initializing Database")
    if create_database():
        print_success("Database initialized.")
    else:
        print_error("Initialization failed.")
        raise typer.Exit(code=1)

@app.command("seed")
def seed_cmd(name: str = typer.Argument("all", help="Seeder to run (users, servers, players, catalog, operations, bitacora) or 'all'")):
    """Seed the database with the sample panel data"""
    print_header(f"Running Seeder: {name}")
    store = open_sql_store()
    try:
        if name == "all":
            run_all_seeders(store)
        else:
            run_specific_seeder(store, name)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_success("Seeding completed.")

@app.command("reset")
def reset_cmd(force: bool = typer.Option(False, "--force", help="Skip confirmation")):
    """Downgrade to base and migrate back to head (wipes data)"""
    if not force and not typer.confirm("This drops every panel table. Continue?"):
        raise typer.Abort()
    print_header("Resetting Database")
    if reset_database():
        print_success("Done.")
    else:
        print_error("Failed.")
        raise typer.Exit(code=1)

@app.command("history")
def history_cmd():
    """Show migration history"""
    print_header("Migration History")
    show_history()
