"""HTTP surface for the aggregator."""

from .app import create_app

__all__ = ["create_app"]
