"""Command line interface for accessible-colors."""

from .main import cli, main

__all__ = ["cli", "main"]
