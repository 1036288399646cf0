"""Central configuration constants for the repository retrieval workflow."""

from __future__ import annotations

import os
from typing import Optional

from repo_collect.secrets import resolve_github_token

GITHUB_TOKEN: Optional[str] = resolve_github_token()
USER_AGENT = "repo-collect/1.0"
BASE_URL = "https://api.github.com"
PER_PAGE = int(os.getenv("PER_PAGE", "100"))
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "90"))

__all__ = [
    "GITHUB_TOKEN",
    "USER_AGENT",
    "BASE_URL",
    "PER_PAGE",
    "REQUEST_TIMEOUT",
]
