import typer
import sys
import os
import importlib.util
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

# Initialize Typer and Console
app = typer.Typer(help="Lonely Control Panel CLI Tool")
console = Console()

# --- Dynamic Loader ---
def load_commands():
    """
    Load every dev/<name>.py exposing a Typer `app` as the `<name>` command group.
    """
    dev_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "dev")
    if not os.path.isdir(dev_dir):
        return

    for filename in sorted(os.listdir(dev_dir)):
        if not filename.endswith(".py") or filename in ("__init__.py", "utils.py"):
            continue
        module_name = filename[:-3]
        file_path = os.path.join(dev_dir, filename)

        try:
            spec = importlib.util.spec_from_file_location(f"dev.{module_name}", file_path)
            if spec and spec.loader:
                module = importlib.util.module_from_spec(spec)
                sys.modules[f"dev.{module_name}"] = module
                spec.loader.exec_module(module)

                if hasattr(module, "app"):
                    app.add_typer(module.app, name=module_name)
        except Exception as e:
            console.print(f"[red]Failed to load module {module_name}: {e}[/red]")

load_commands()

# --- Interactive Menu ---

@app.callback(invoke_without_command=True)
def main_interactive(ctx: typer.Context):
    """
    Main entry point. Launches interactive menu if no command is provided.
    """
    if ctx.invoked_subcommand is None:
        show_menu()

def show_menu():
    while True:
        console.clear()

        console.print(Panel.fit(
            "[bold white]Lonely Control Panel CLI[/bold white]\n[cyan]Serve the panel, open the console, manage the database.[/cyan]",
            title="Welcome",
            border_style="blue"
        ))

        table = Table(show_header=True, header_style="bold magenta", expand=True)
        table.add_column("No.", style="dim", width=4, justify="center")
        table.add_column("Category", style="cyan", width=12)
        table.add_column("Action", style="white")
        table.add_column("Description", style="dim")

        table.add_row("1", "Server", "Run (Dev)", "Start the web panel with auto-reload")
        table.add_row("2", "Console", "Open", "Web panel + interactive console")
        table.add_row("3", "Database", "Initialize", "Create tables and stamp head")
        table.add_row("4", "Database", "Seed", "Load the sample servers, players, catalog...")
        table.add_row("5", "Database", "Create User", "Interactive user creation")
        table.add_row("0", "Exit", "Quit", "Close the CLI")

        console.print(table)
        console.print("\n")

        choice = Prompt.ask("Select an option", choices=["1", "2", "3", "4", "5", "0"], default="2")

        cmd_prefix = f"{sys.executable} mine.py"

        if choice == "1":
            os.system(f"{cmd_prefix} server run")
        elif choice == "2":
            os.system(f"{cmd_prefix} console")
        elif choice == "3":
            os.system(f"{cmd_prefix} database init-db")
        elif choice == "4":
            os.system(f"{cmd_prefix} database seed")
        elif choice == "5":
            os.system(f"{cmd_prefix} users create")
        elif choice == "0":
            console.print("[bold]Goodbye![/bold]")
            sys.exit(0)

        input("\nPress Enter to continue...")

if __name__ == "__main__":
    app()
