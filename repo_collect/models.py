"""Data structures shared across retrieval, rendering and publishing."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


def parse_timestamp(value: Optional[str]) -> Optional[dt.datetime]:
    """Parse GitHub's ISO-8601 timestamps ("2024-01-01T00:00:00Z")."""
    if not value:
        return None
    return dt.datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass(frozen=True)
class Record:
    """One repository as returned by a listing endpoint."""

    full_name: str
    name: str
    owner: str
    language: str
    description: str
    html_url: str
    stargazers_count: int = 0
    forks_count: int = 0
    pushed_at: Optional[dt.datetime] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Record":
        owner = payload.get("owner") or {}
        return cls(
            full_name=payload.get("full_name") or "",
            name=payload.get("name") or "",
            owner=owner.get("login") or "",
            language=payload.get("language") or "",
            description=payload.get("description") or "",
            html_url=payload.get("html_url") or "",
            stargazers_count=int(payload.get("stargazers_count") or 0),
            forks_count=int(payload.get("forks_count") or 0),
            pushed_at=parse_timestamp(payload.get("pushed_at")),
        )


@dataclass
class Group:
    """Records sharing a primary language (or the Others bucket)."""

    name: str
    records: List[Record] = field(default_factory=list)


class TargetKind(str, Enum):
    USER = "user"
    ORG = "org"


@dataclass(frozen=True)
class TargetConfig:
    """One configured user or organization; empty output_file means print."""

    name: str
    kind: TargetKind
    output_file: str = ""


@dataclass(frozen=True)
class CommitRequest:
    """Everything needed to publish one multi-file commit."""

    contents: Dict[str, str]
    owner: str
    repository: str
    branch: str
    author_name: str
    author_email: str


__all__ = [
    "parse_timestamp",
    "Record",
    "Group",
    "TargetKind",
    "TargetConfig",
    "CommitRequest",
]
