"""Partition records into language groups with a deterministic order."""

from __future__ import annotations

from typing import Dict, Iterable, List

from repo_collect.models import Group, Record

OTHERS_GROUP = "Others"


def group_key(record: Record) -> str:
    return record.language or OTHERS_GROUP


def group_records(records: Iterable[Record]) -> List[Group]:
    """Group records by language.

    Postcondition relied on by the renderer: groups come back sorted by raw
    name (case-sensitive, so "Others" sorts among the languages), and records
    within a group are sorted by lower-cased display name. Every input record
    lands in exactly one group.
    """
    ordered = sorted(records, key=lambda record: record.name.lower())
    groups: Dict[str, Group] = {}
    for record in ordered:
        key = group_key(record)
        if key not in groups:
            groups[key] = Group(name=key)
        groups[key].records.append(record)
    return sorted(groups.values(), key=lambda group: group.name)


__all__ = ["OTHERS_GROUP", "group_key", "group_records"]
