"""Command line interface for deps-report."""

from .main import cli, main

__all__ = ["cli", "main"]
