"""Locate the GitHub token from a gitignored secrets file or the environment."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_SECRETS_FILENAME = "local_secrets.json"
TOKEN_KEY = "github_token"
TOKEN_ENV = "GITHUB_TOKEN"


def secrets_path(path: Optional[str | Path] = None) -> Path:
    """Explicit path, then $LOCAL_SECRETS_FILE, then the checkout root."""
    if path:
        return Path(path).expanduser()
    env_path = os.getenv("LOCAL_SECRETS_FILE")
    if env_path:
        return Path(env_path).expanduser()
    return Path(__file__).resolve().parents[1] / DEFAULT_SECRETS_FILENAME


def load_local_secrets(path: Optional[str | Path] = None) -> Dict[str, Any]:
    location = secrets_path(path)
    if not location.is_file():
        return {}
    try:
        data = json.loads(location.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"[warn] ignoring unreadable secrets file {location}: {exc}", file=sys.stderr)
        return {}
    return data if isinstance(data, dict) else {}


def resolve_github_token(secrets: Optional[Dict[str, Any]] = None) -> Optional[str]:
    """Token from the secrets file, falling back to $GITHUB_TOKEN; None when unset."""
    if secrets is None:
        secrets = load_local_secrets()
    token = secrets.get(TOKEN_KEY) or os.getenv(TOKEN_ENV) or ""
    return token.strip() or None


__all__ = [
    "DEFAULT_SECRETS_FILENAME",
    "secrets_path",
    "load_local_secrets",
    "resolve_github_token",
]
