"""localesync – Merge/Prune pipeline for one subordinate locale."""

from __future__ import annotations

from localesync.core.merge import merge
from localesync.core.nodes import Branch
from localesync.core.prune import prune


def synchronize(subordinate: Branch, master: Branch) -> Branch:
    """Reshape ``subordinate`` to the master's exact key shape.

    Merge fills in what the subordinate lacks, prune removes what the master
    lacks. The trailing merge puts master values back at positions prune
    dropped because of a leaf/branch mismatch; for shape-compatible input it
    changes nothing.
    """
    return merge(prune(merge(subordinate, master), master), master)
