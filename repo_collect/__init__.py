"""Collect GitHub repositories into grouped Markdown lists and publish them."""

__version__ = "1.0.0"
