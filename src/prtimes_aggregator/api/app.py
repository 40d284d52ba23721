"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from .. import __version__
from ..config import AggregatorSettings, get_settings
from .routes import router


def create_app(settings: AggregatorSettings | None = None) -> FastAPI:
    """Build the HTTP application.

    Args:
        settings: Optional settings (defaults to environment settings).
    """
    app = FastAPI(title="PR TIMES Aggregator", version=__version__)
    app.state.settings = settings or get_settings()
    app.include_router(router)
    return app
