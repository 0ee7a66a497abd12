"""linkcheck - configuration for a Markdown book link checker."""

__version__ = "0.5.1"

APP_NAME = "linkcheck"
