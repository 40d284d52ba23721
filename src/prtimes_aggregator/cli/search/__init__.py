"""Search feature - keyword search and ranking command."""

from .commands import search

__all__ = [
    "search",
]
