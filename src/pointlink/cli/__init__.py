"""Command-line interface."""

from pointlink.cli.main import cli

__all__ = ["cli"]
