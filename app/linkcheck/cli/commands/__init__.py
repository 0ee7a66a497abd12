"""CLI commands for linkcheck.

This package contains all subcommand implementations.
"""

from linkcheck.cli.commands import config

__all__ = ["config"]
