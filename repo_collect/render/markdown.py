"""Render grouped repositories into the published Markdown document.

The layout is consumed by existing readers of the generated files, so every
line format below is byte-exact:

    - [Go](#go) (2)
    - [Others](#others) (1)

    ## Go

    - [a/A-repo](https://github.com/a/A-repo) pushed_at:2024-01 star:0.1k fork:0.0k desc
    ...
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from repo_collect.models import Group, Record, TargetKind

from .grouping import group_records

STARS_HEADER = (
    "# Starred Repositories\n"
    "\n"
    "A list of %d starred repositories, grouped by primary language.\n"
    "\n"
)

REPOS_HEADER = (
    "# %s\n"
    "\n"
    "All %d repositories of the organization, grouped by primary language.\n"
    "\n"
)

LICENSE_FOOTER = (
    "## License\n"
    "\n"
    "[![CC0](https://licensebuttons.net/p/zero/1.0/88x31.png)]"
    "(https://creativecommons.org/publicdomain/zero/1.0/)\n"
    "\n"
    "To the extent possible under law, [%s](https://github.com/%s) "
    "has waived all copyright and related or neighboring rights to this work.\n"
)


def anchor_for(name: str) -> str:
    return name.lower().replace(" ", "-")


def format_thousands(count: int) -> str:
    """Format a counter in thousands with one decimal: 1500 -> "1.5k"."""
    return "%.1fk" % (count / 1000)


def format_pushed_at(record: Record) -> str:
    if record.pushed_at is None:
        return ""
    return record.pushed_at.strftime("%Y-%m")


def format_extend(record: Record) -> str:
    return "pushed_at:%s star:%s fork:%s" % (
        format_pushed_at(record),
        format_thousands(record.stargazers_count),
        format_thousands(record.forks_count),
    )


def format_record(record: Record) -> str:
    description = record.description.replace("\n", " ")
    return f"- [{record.full_name}]({record.html_url}) {format_extend(record)} {description}\n"


def render_groups(groups: Sequence[Group]) -> str:
    """Render an index of groups followed by one section per group.

    Groups and records are emitted in the order given; `group_records`
    already returns them sorted.
    """
    lines: List[str] = []
    for group in groups:
        lines.append(f"- [{group.name}](#{anchor_for(group.name)}) ({len(group.records)})\n")
    lines.append("\n")
    for group in groups:
        lines.append(f"## {group.name}\n\n")
        lines.extend(format_record(record) for record in group.records)
        lines.append("\n")
    return "".join(lines)


def build_user_document(records: Sequence[Record], license_user: str) -> str:
    body = render_groups(group_records(records))
    return STARS_HEADER % len(records) + body + LICENSE_FOOTER % (license_user, license_user)


def build_org_document(records: Sequence[Record], org_name: str, license_user: str) -> str:
    body = render_groups(group_records(records))
    return REPOS_HEADER % (org_name, len(records)) + body + LICENSE_FOOTER % (license_user, license_user)


def build_document(kind: str, records: Sequence[Record], target_name: str, license_user: str) -> Optional[str]:
    """Dispatch to the user or organization template; None for unknown kinds."""
    if kind == TargetKind.USER:
        return build_user_document(records, license_user)
    if kind == TargetKind.ORG:
        return build_org_document(records, target_name, license_user)
    return None


__all__ = [
    "STARS_HEADER",
    "REPOS_HEADER",
    "LICENSE_FOOTER",
    "anchor_for",
    "format_thousands",
    "format_pushed_at",
    "format_extend",
    "format_record",
    "render_groups",
    "build_user_document",
    "build_org_document",
    "build_document",
]
