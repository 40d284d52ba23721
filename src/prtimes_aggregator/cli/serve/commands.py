"""Serve CLI command - runs the HTTP endpoint with uvicorn."""

from __future__ import annotations

import typer
import uvicorn

from ..core.console import console


def serve(
    host: str = typer.Option("0.0.0.0", "--host", help="Interface to bind"),
    port: int = typer.Option(8080, "--port", "-p", help="Port to listen on"),
) -> None:
    """Serve GET /prtimes_posts over HTTP."""
    from ...api.app import create_app

    console.print(f"[green]Server is running on port {port}[/green]")
    uvicorn.run(create_app(), host=host, port=port)
