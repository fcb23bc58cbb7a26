"""Command line interface for irsource."""

from .main import cli, main

__all__ = ["cli", "main"]
