"""Paged repository listings: stars of a user and repositories of an org."""

from __future__ import annotations

from typing import List, Optional, Tuple
from urllib.parse import quote

from repo_collect.models import Record, TargetConfig, TargetKind

from .config import BASE_URL, PER_PAGE
from .http_client import api_request, next_page_from_response, paged_params


class RepositorySource:
    """Base class for one paged listing endpoint.

    Subclasses set `description` and implement `url()`; `fetch_page` is the
    callable handed to the paginator.
    """

    description = "repositories"

    def __init__(self, name: str, per_page: int = PER_PAGE) -> None:
        self.name = name
        self.per_page = per_page

    def url(self) -> str:
        raise NotImplementedError

    def fetch_page(self, page: int) -> Tuple[List[Record], Optional[int]]:
        resp = api_request("GET", self.url(), params=paged_params(page, self.per_page))
        batch = resp.json()
        if not isinstance(batch, list):
            raise RuntimeError(f"unexpected payload for {self.url()}: {type(batch).__name__}")
        records = [Record.from_payload(entry) for entry in batch if isinstance(entry, dict)]
        return records, next_page_from_response(resp)


class StarredReposSource(RepositorySource):
    description = "starred repos"

    def url(self) -> str:
        return f"{BASE_URL}/users/{quote(self.name)}/starred"


class OrgReposSource(RepositorySource):
    description = "org repos"

    def url(self) -> str:
        return f"{BASE_URL}/orgs/{quote(self.name)}/repos"


SOURCES_BY_KIND = {
    TargetKind.USER: StarredReposSource,
    TargetKind.ORG: OrgReposSource,
}


def source_for(target: TargetConfig) -> Optional[RepositorySource]:
    """Return the listing source for a target, or None for an unknown kind."""
    source_cls = SOURCES_BY_KIND.get(target.kind)
    if source_cls is None:
        return None
    return source_cls(target.name)


__all__ = [
    "RepositorySource",
    "StarredReposSource",
    "OrgReposSource",
    "SOURCES_BY_KIND",
    "source_for",
]
