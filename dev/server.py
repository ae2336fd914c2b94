from typing import Optional

import typer
import uvicorn

from app.config import Settings
from dev.utils import print_header, print_info

app = typer.Typer(help="Web panel commands")


def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Start uvicorn on ``main:app``; unset host/port fall back to HOST/PORT."""
    settings = Settings()
    host = host or settings.host
    port = port or settings.port
    print_info(f"{settings.panel_name} Control Panel on http://{host}:{port} ({settings.store_backend} store)")
    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower()
    )


@app.command("run")
def run_server(
    host: Optional[str] = typer.Option(None, help="Host to bind (default: HOST)"),
    port: Optional[int] = typer.Option(None, help="Port to bind (default: PORT)"),
    reload: bool = typer.Option(True, help="Reload on source changes"),
):
    """Start the panel for development"""
    print_header("Starting Panel in DEVELOPMENT mode")
    serve(host, port, reload)


@app.command("prod")
def run_prod():
    """Start the panel on the configured HOST and PORT without reload"""
    print_header("Starting Panel in PRODUCTION mode")
    serve(None, None, reload=False)
