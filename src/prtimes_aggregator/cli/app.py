"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from ..config import get_settings

# Create Typer app
app = typer.Typer(
    name="prtimes",
    help="Aggregate PR TIMES press releases ranked by likes",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands from feature modules."""
    from .search.commands import search

    app.command(name="search")(search)

    from .serve.commands import serve

    app.command(name="serve")(serve)


def setup_logging(log_dir: Path) -> None:
    """Configure logging for CLI.

    - Suppresses console output from libraries
    - Writes the prtimes logger to <log_dir>/prtimes.log
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    # Suppress loggers that might print to console
    for logger_name in ["httpx", "httpcore", "asyncio"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    prtimes_logger = logging.getLogger("prtimes")
    prtimes_logger.setLevel(logging.DEBUG)
    prtimes_logger.propagate = False
    prtimes_logger.handlers = []  # Clear any existing handlers
    file_handler = logging.FileHandler(log_dir / "prtimes.log", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
    )
    prtimes_logger.addHandler(file_handler)


@app.callback()
def _configure() -> None:
    setup_logging(get_settings().log_dir)


# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    app()
