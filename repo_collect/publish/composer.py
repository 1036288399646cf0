"""Compose a multi-file commit on a branch without a local checkout."""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional

from repo_collect.models import CommitRequest

COMMIT_MESSAGE = "update collected repositories"
FILE_MODE = "100644"
BLOB_TYPE = "blob"


def tree_entries(contents: Dict[str, str]) -> List[Dict[str, Any]]:
    return [
        {"path": path, "mode": FILE_MODE, "type": BLOB_TYPE, "content": content}
        for path, content in contents.items()
    ]


def _utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc).replace(microsecond=0)


def compose_commit(store, request: CommitRequest, now: Optional[dt.datetime] = None) -> str:
    """Commit `request.contents` on top of the branch tip and move the branch.

    Steps run strictly in order: resolve the ref, build the tree, resolve the
    parent commit, create the commit, update the ref (non-force). Any failure
    propagates before the ref is touched; trees or commits created up to that
    point are left unreferenced.
    """
    ref = f"heads/{request.branch}"
    tip = store.get_ref(ref)
    tree = store.create_tree(tree_entries(request.contents), base_tree=tip)
    parent = store.get_commit(tip)
    date = (now or _utc_now()).isoformat().replace("+00:00", "Z")
    author = {"name": request.author_name, "email": request.author_email, "date": date}
    new_commit = store.create_commit(COMMIT_MESSAGE, tree, [parent], author)
    store.update_ref(ref, new_commit, force=False)
    return new_commit


__all__ = ["COMMIT_MESSAGE", "FILE_MODE", "BLOB_TYPE", "tree_entries", "compose_commit"]
