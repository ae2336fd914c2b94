import typer
from rich.prompt import Prompt
from dev.utils import console, print_header, print_success, print_error, create_user_service, open_sql_store

app = typer.Typer(help="User management commands")

@app.command("create")
def create(
    username: str = typer.Option(None, help="Username (prompted when omitted)"),
    balance: int = typer.Option(0, help="Starting balance"),
):
    """Create a panel user in the database"""
    print_header("Create User")
    store = open_sql_store()

    username = username or Prompt.ask("[bold cyan]Enter username[/bold cyan]")
    password = Prompt.ask("[bold cyan]Enter password[/bold cyan]", password=True)

    console.print(f"\n[yellow]Creating user: {username}[/yellow]")
    success, message = create_user_service(store, username, password, balance=balance)
    if success:
        print_success(message)
    else:
        print_error(message)
        raise typer.Exit(code=1)
