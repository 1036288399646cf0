"""Grouping and Markdown rendering of collected repositories."""
