"""Mini README: Entry point CLI for the pocketledger tool service.

Commands:
    * run - serve the ledger tools over HTTP with uvicorn.
    * tools - print the registered tools and their descriptions.

Options left unset fall back to ``POCKETLEDGER_*`` settings. Auto-reload is
on by default except when the configured environment is ``production``.
"""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from pocketledger.configuration import get_settings
from pocketledger.ledger import LedgerService
from pocketledger.logging_utils import configure_root_logger
from pocketledger.tools import build_registry

cli = typer.Typer(help="Launch and inspect the pocketledger tool service.")


@cli.command()
def run(
    host: Optional[str] = typer.Option(None, help="Host interface to bind."),
    port: Optional[int] = typer.Option(None, help="Port to listen on."),
    log_level: Optional[str] = typer.Option(None, help="Override the configured log level."),
    reload: Optional[bool] = typer.Option(
        None, "--reload/--no-reload", help="Restart the server when source files change."
    ),
) -> None:
    """Serve the ledger tools using uvicorn."""

    settings = get_settings()
    level = (log_level or settings.log_level).upper()
    configure_root_logger(level)
    auto_reload = reload if reload is not None else settings.environment != "production"
    bind_host = host or settings.interface_host
    bind_port = port or settings.interface_port

    tool_names = build_registry(LedgerService.from_settings(settings)).available_tools()
    typer.echo(
        f"Serving {len(tool_names)} ledger tools on {bind_host}:{bind_port}"
        f" (environment={settings.environment}, reload={'on' if auto_reload else 'off'})."
    )
    uvicorn.run(
        "pocketledger.interface.web_app:create_application",
        host=bind_host,
        port=bind_port,
        factory=True,
        reload=auto_reload,
        log_level=level.lower(),
    )


@cli.command()
def tools() -> None:
    """List the registered tools and what they do."""

    registry = build_registry(LedgerService.from_settings(get_settings()))
    for schema in registry.describe():
        typer.echo(f"{schema['name']}: {schema['description']}")


if __name__ == "__main__":
    cli()
