"""Serve feature - HTTP endpoint command."""

from .commands import serve

__all__ = ["serve"]
