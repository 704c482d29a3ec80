"""Command-line interface."""

from envscope.cli.main import main

__all__ = ["main"]
