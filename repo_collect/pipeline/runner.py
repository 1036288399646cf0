"""Entry points for collecting every configured target and publishing the results."""

from __future__ import annotations

import sys
from typing import Dict, List, Optional, Sequence, Tuple

from repo_collect.models import CommitRequest, TargetConfig
from repo_collect.publish.composer import compose_commit
from repo_collect.publish.git_objects import GitObjectStore
from repo_collect.render.markdown import build_document
from repo_collect.retrieval.http_client import set_auth_token
from repo_collect.retrieval.paginator import fetch_all
from repo_collect.retrieval.sources import source_for

from .config import ConfigError, RunSettings, load_targets, parse_args, resolve_settings


def collect_target(target: TargetConfig, license_user: str) -> str:
    """Fetch, group and render one target; return "" when nothing usable came back."""
    source = source_for(target)
    if source is None:
        print(f"[warn] skipping {target.name}: unknown target kind {target.kind!r}", file=sys.stderr)
        return ""

    print(f"  fetching {source.description} for {target.name}...", file=sys.stderr)
    records, error = fetch_all(source.fetch_page)
    if error is not None:
        # partial pages are dropped rather than rendered
        print(f"[warn] {target.name}: fetch stopped after {len(records)} records -> {error}", file=sys.stderr)
        return ""
    return build_document(target.kind, records, target.name, license_user) or ""


def collect_all(targets: Sequence[TargetConfig], license_user: str) -> Tuple[Dict[str, str], List[str]]:
    """Split rendered documents into the publish set and the print queue."""
    publish_set: Dict[str, str] = {}
    unfiled: List[str] = []
    for target in targets:
        content = collect_target(target, license_user)
        if target.output_file and content:
            publish_set[target.output_file] = content
        else:
            unfiled.append(content)
    return publish_set, unfiled


def write_local(publish_set: Dict[str, str]) -> int:
    """Write every document to disk; return how many writes failed."""
    failures = 0
    for path, content in publish_set.items():
        try:
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(content)
        except OSError as exc:
            print(f"[error] write file {path}: {exc}", file=sys.stderr)
            failures += 1
            continue
        print(f"[info] wrote {path}", file=sys.stderr)
    return failures


def publish_remote(publish_set: Dict[str, str], settings: RunSettings) -> bool:
    request = CommitRequest(
        contents=publish_set,
        owner=settings.username,
        repository=settings.repository,
        branch=settings.branch,
        author_name=settings.commit_author,
        author_email=settings.commit_email,
    )
    store = GitObjectStore(settings.username, settings.repository)
    try:
        sha = compose_commit(store, request)
    except Exception as exc:
        print(f"[error] commit failed: {exc}", file=sys.stderr)
        return False
    target = f"{settings.username}/{settings.repository}@{settings.branch}"
    print(f"[info] committed {len(publish_set)} file(s) to {target} ({sha})", file=sys.stderr)
    return True


def run(settings: RunSettings, targets: Sequence[TargetConfig]) -> int:
    """Collect all targets, then commit or write them; return the exit status."""
    print(f"Collecting {len(targets)} target(s)...", file=sys.stderr)
    publish_set, unfiled = collect_all(targets, settings.username)

    status = 0
    if publish_set and settings.publish_remote:
        if not publish_remote(publish_set, settings):
            status = 1
    else:
        write_local(publish_set)

    for content in unfiled:
        print(content)
    return status


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point; exits non-zero on configuration or publish errors."""
    settings = resolve_settings(parse_args(argv))
    if not settings.username:
        print("no username", file=sys.stderr)
        sys.exit(1)

    try:
        targets = load_targets(settings)
    except ConfigError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        sys.exit(1)

    if settings.token:
        set_auth_token(settings.token)

    status = run(settings, targets)
    if status:
        sys.exit(status)


__all__ = ["collect_target", "collect_all", "write_local", "publish_remote", "run", "main"]
