"""CLI parsing, run settings and YAML target loading for the collector."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

import yaml

from repo_collect.models import TargetConfig, TargetKind

DEFAULT_COMMIT_AUTHOR = "github-actions[bot]"
DEFAULT_COMMIT_EMAIL = "41898282+github-actions[bot]@users.noreply.github.com"


class ConfigError(RuntimeError):
    """Raised when the targets file cannot be read or parsed."""


@dataclass(frozen=True)
class RunSettings:
    """Resolved runtime settings for one collection run."""

    token: Optional[str]
    username: str
    repository: str
    output_file: str
    branch: str
    config_path: Optional[Path]
    commit_author: str
    commit_email: str

    @property
    def publish_remote(self) -> bool:
        return bool(self.username and self.repository and self.branch)


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the collector entry point."""

    parser = argparse.ArgumentParser(
        description="Collect starred or organization repositories into grouped Markdown lists.",
    )
    parser.add_argument("--token", default="", help="GitHub token")
    parser.add_argument("--username", default="", help="GitHub username (also the license holder)")
    parser.add_argument("--repository", default="", help="repository to commit the documents to")
    parser.add_argument("--file", dest="output_file", default="", help="output file when no --config is given")
    parser.add_argument("--branch", default="", help="branch to commit to")
    parser.add_argument("--config", default="", help="YAML file listing targets")
    parser.add_argument("--commit-author", default=DEFAULT_COMMIT_AUTHOR)
    parser.add_argument("--commit-email", default=DEFAULT_COMMIT_EMAIL)
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    parser = build_arg_parser()
    return parser.parse_args(argv)


def resolve_settings(args: Optional[argparse.Namespace] = None) -> RunSettings:
    args = args or parse_args()
    return RunSettings(
        token=args.token or None,
        username=args.username,
        repository=args.repository,
        output_file=args.output_file,
        branch=args.branch,
        config_path=Path(args.config) if args.config else None,
        commit_author=args.commit_author,
        commit_email=args.commit_email,
    )


def _target_from_entry(entry: Any) -> Optional[TargetConfig]:
    if not isinstance(entry, dict):
        return None
    try:
        kind = TargetKind(entry.get("userType"))
    except ValueError:
        return None
    return TargetConfig(
        name=str(entry.get("name") or ""),
        kind=kind,
        output_file=str(entry.get("file") or ""),
    )


def parse_targets(text: str) -> List[TargetConfig]:
    """Parse a YAML list of {name, userType, file}; unknown userTypes are dropped."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid targets file: {exc}") from exc
    if data is None:
        return []
    if not isinstance(data, list):
        raise ConfigError(f"targets file must hold a list, got {type(data).__name__}")
    targets = [_target_from_entry(entry) for entry in data]
    return [target for target in targets if target is not None]


def load_targets(settings: RunSettings) -> List[TargetConfig]:
    """Return the configured targets, defaulting to the user's own stars."""
    if settings.config_path is None:
        return [TargetConfig(name=settings.username, kind=TargetKind.USER, output_file=settings.output_file)]
    try:
        text = settings.config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {settings.config_path}: {exc}") from exc
    return parse_targets(text)


__all__ = [
    "DEFAULT_COMMIT_AUTHOR",
    "DEFAULT_COMMIT_EMAIL",
    "ConfigError",
    "RunSettings",
    "build_arg_parser",
    "parse_args",
    "resolve_settings",
    "parse_targets",
    "load_targets",
]
