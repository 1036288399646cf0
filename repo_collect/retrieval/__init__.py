"""Paged retrieval of repository listings from the GitHub REST API."""
