"""CLI package for linkcheck.

This package contains the Typer application and all subcommands.
"""

from linkcheck.cli.main import app

__all__ = ["app"]
