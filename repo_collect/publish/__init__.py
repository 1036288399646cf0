"""Publish rendered documents as a commit through the git data API."""
