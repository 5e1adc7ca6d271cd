"""localesync – Dot-Path Flattener.

Turns a tree into ``(dotted.path, value)`` pairs, one per leaf, for tabular
export.
"""

from __future__ import annotations

from typing import Any

from localesync.core.nodes import Branch, TreeNode, from_json

SEPARATOR = "."


def flatten(prefix: str | None, tree: TreeNode) -> list[tuple[str, Any]]:
    """Flatten ``tree`` depth-first in insertion order.

    Empty branches contribute nothing. A scalar root yields a single entry
    whose path is the prefix itself (``""`` when no prefix is given).

    Args:
        prefix: Path of ``tree`` inside a larger tree, ``None`` at the root.
        tree: Tree to walk.

    Returns:
        List of (path, leaf value) pairs.
    """
    return _flatten(prefix or None, tree)


def _flatten(path: str | None, tree: TreeNode) -> list[tuple[str, Any]]:
    # None marks the root; "" is a real (empty) key
    if not isinstance(tree, Branch):
        return [(path or "", tree.value)]

    entries: list[tuple[str, Any]] = []
    for key, child in tree.items():
        child_path = key if path is None else f"{path}{SEPARATOR}{key}"
        entries.extend(_flatten(child_path, child))
    return entries


def extract_dotnested_keys(prefix: str | None, data: Any) -> dict[str, Any]:
    """:func:`flatten` over plain data, returned as an ordered mapping."""
    return dict(flatten(prefix, from_json(data)))
