"""Command-line interface for Appraiser."""

from appraiser.cli.main import cli, main

__all__ = ["cli", "main"]
