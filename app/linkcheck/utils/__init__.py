"""Utility modules for linkcheck."""
