"""Repository collection pipeline wiring sources, rendering and publishing."""

from .runner import collect_all, collect_target, main, run

__all__ = ["collect_all", "collect_target", "main", "run"]
