"""API server CLI commands."""

import typer
import uvicorn
from rich.console import Console

from storefront.runtime.context import get_config

console = Console()


def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
) -> None:
    """Run the storefront API with uvicorn."""
    app_config = get_config().app
    host = host or app_config.host
    port = port or app_config.port

    console.print(f"[blue]🚀 Serving storefront API on {host}:{port}[/blue]")
    uvicorn.run(
        "storefront.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,
    )
