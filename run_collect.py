"""Convenience shim to run the collector from a checkout."""

from __future__ import annotations

from repo_collect.pipeline.runner import main


if __name__ == "__main__":
    main()
