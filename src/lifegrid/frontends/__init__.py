"""Command-line front end."""

from .cli import main

__all__ = ["main"]
