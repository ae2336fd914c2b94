import threading
import typer
import uvicorn
from rich.prompt import Prompt
from dev.utils import console, print_header, print_info

app = typer.Typer(help="Interactive console sharing the web panel's store")

@app.callback(invoke_without_command=True)
def run_console(
    ctx: typer.Context,
    host: str = typer.Option("127.0.0.1", help="Host to bind"),
    port: int = typer.Option(3000, help="Port to bind"),
    serve: bool = typer.Option(True, help="Also serve the web panel in the background"),
):
    """
    start <id> | stop <id> | balance [userId] | rename <name> | exit
    """
    if ctx.invoked_subcommand is not None:
        return

    from main import app as web_app
    from app.controllers.console_controller import ConsoleController, HELP

    controller = ConsoleController(web_app.state.panel)

    if serve:
        server = uvicorn.Server(uvicorn.Config(web_app, host=host, port=port, log_level="warning"))
        threading.Thread(target=server.run, name="panel-http", daemon=True).start()
        print_info(f"Panel running at http://{host}:{port}")

    print_header(web_app.state.panel.title)
    console.print(HELP, markup=False)
    while True:
        try:
            line = Prompt.ask(">")
        except (EOFError, KeyboardInterrupt):
            break
        if line.strip() in ("exit", "quit"):
            break
        if line.strip():
            console.print(controller.handle(line), markup=False)
    console.print("[bold]Goodbye![/bold]")
