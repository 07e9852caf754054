"""Command-line interface for sitepercolation."""

from sitepercolation.cli.main import cli

__all__ = ["cli"]
