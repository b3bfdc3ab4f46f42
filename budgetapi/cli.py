"""Personal Budget API CLI.

Commands:
- serve: Run the HTTP API with uvicorn
- routes: Show the API route table
"""

from __future__ import annotations

import structlog
import typer
from fastapi.routing import APIRoute
from rich.console import Console
from rich.table import Table

from budgetapi.config import get_config, parse_port
from budgetapi.core.logging import configure_logging

app = typer.Typer(
    name="budgetapi",
    help="Personal Budget API - in-memory food prices over HTTP",
    no_args_is_help=True,
)

console = Console()
logger = structlog.get_logger()


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind (default: $HOST or 0.0.0.0)"),
    port: int | None = typer.Option(None, help="Port to bind (default: $PORT or 3000)"),
    reload: bool = typer.Option(False, help="Enable autoreload (dev only)"),
):
    """Run the price API."""
    import uvicorn

    config = get_config()
    host = host or config.server.host
    port = parse_port(str(port)) if port is not None else config.server.port

    configure_logging(config.log_level, config.json_logs)
    logger.info("server_starting", host=host, port=port)
    typer.echo(f"API server at http://{host}:{port}")
    uvicorn.run(
        "budgetapi.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        workers=1,
    )


@app.command()
def routes():
    """List the API routes."""
    from budgetapi.web.app import create_app

    api = create_app()
    table = Table(title="Routes")
    table.add_column("Method", style="cyan")
    table.add_column("Path")
    table.add_column("Summary", style="dim")

    for route in api.routes:
        if not isinstance(route, APIRoute):
            continue
        for method in sorted(route.methods):
            table.add_row(method, route.path, route.summary or route.name)

    console.print(table)


if __name__ == "__main__":
    app()
