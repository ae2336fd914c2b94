from rich.console import Console
from rich.panel import Panel
from rich.theme import Theme

# Custom theme for the CLI
custom_theme = Theme({
    "info": "dim cyan",
    "warning": "magenta",
    "error": "bold red",
    "success": "bold green",
    "header": "bold white on blue",
})

from app.config import Settings
from app.services.store import EntityKind
from app.services.auth_service import get_password_hash, verify_password
from database.models.user import User

console = Console(theme=custom_theme)

def print_header(text: str):
    """Prints a styled header panel."""
    console.print(Panel(f"[bold white]{text}[/bold white]", style="blue", expand=False))

def print_success(text: str):
    """Prints a success message."""
    console.print(f"[success]✔ {text}[/success]")

def print_error(text: str):
    """Prints an error message."""
    console.print(f"[error]✖ {text}[/error]")

def print_info(text: str):
    """Prints an info message."""
    console.print(f"[info]ℹ {text}[/info]")

def open_sql_store():
    """The persistent store, whatever STORE_BACKEND says; CLI maintenance always targets the database."""
    from app.context import build_store
    return build_store(Settings(store_backend="sql"))

def create_user_service(store, username: str, password: str, balance: int = 0, role: str = "admin"):
    existing = [u for u in store.list(EntityKind.USER) if u.username == username]
    if existing:
        return False, f"User '{username}' already exists."

    new_user = User(
        id=store.next_id(EntityKind.USER, "user"),
        username=username,
        hashed_password=get_password_hash(password),
        balance=balance,
        role=role,
        two_factor_enabled=False,
        purchased_addons=[],
        purchased_themes=[],
    )
    new_user = store.upsert(new_user)

    if not verify_password(password, new_user.hashed_password):
        return True, f"User '{username}' created, BUT immediate password verification FAILED. Please report this."

    return True, f"User '{username}' created successfully as {new_user.id}."
