"""Minimal client for the GitHub git data API (refs, trees, commits)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from repo_collect.retrieval.config import BASE_URL
from repo_collect.retrieval.http_client import api_json


class GitObjectStore:
    """Thin wrapper around the ref/tree/commit endpoints of one repository."""

    def __init__(self, owner: str, repository: str, base_url: str = BASE_URL) -> None:
        self.owner = owner
        self.repository = repository
        self.base_url = base_url.rstrip("/")

    def _url(self, path: str) -> str:
        path = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}/repos/{quote(self.owner)}/{quote(self.repository)}{path}"

    def get_ref(self, ref: str) -> str:
        """Return the commit SHA a ref such as "heads/main" points at."""
        payload = api_json("GET", self._url(f"git/ref/{quote(ref, safe='/')}"))
        return payload["object"]["sha"]

    def create_tree(self, entries: List[Dict[str, Any]], base_tree: Optional[str] = None) -> str:
        body: Dict[str, Any] = {"tree": entries}
        if base_tree:
            body["base_tree"] = base_tree
        payload = api_json("POST", self._url("git/trees"), json=body)
        return payload["sha"]

    def get_commit(self, sha: str) -> str:
        payload = api_json("GET", self._url(f"commits/{sha}"))
        return payload["sha"]

    def create_commit(self, message: str, tree: str, parents: List[str], author: Dict[str, str]) -> str:
        body = {
            "message": message,
            "tree": tree,
            "parents": parents,
            "author": author,
        }
        payload = api_json("POST", self._url("git/commits"), json=body)
        return payload["sha"]

    def update_ref(self, ref: str, sha: str, force: bool = False) -> str:
        url = self._url(f"git/refs/{quote(ref, safe='/')}")
        payload = api_json("PATCH", url, json={"sha": sha, "force": force})
        return payload["object"]["sha"]


__all__ = ["GitObjectStore"]
