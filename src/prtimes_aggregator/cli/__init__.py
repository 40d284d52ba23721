"""CLI package - feature-based, stateless architecture.

This package provides a clean separation of concerns:
- core/: Shared console output
- search/: Keyword search and ranking
- serve/: HTTP endpoint

Usage:
    prtimes --help
    prtimes search <keyword> --limit 20
    prtimes serve --port 8080
"""

from .app import app, main

__all__ = ["app", "main"]
