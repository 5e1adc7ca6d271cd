"""localesync – Deep Merge.

Combines a subordinate locale tree with the master tree. The master supplies
the key shape and default values; the subordinate's leaves override them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from localesync.core.nodes import Branch, TreeNode, from_json, to_json


def merge(subordinate: Branch, master: Branch) -> Branch:
    """Deep-merge ``subordinate`` over ``master``.

    Precedence per key:
    - present in both and both branches: recurse
    - present in subordinate otherwise (leaf, or shape mismatch): subordinate wins
    - only in master: master's subtree is copied in
    - only in subordinate: carried over unchanged

    Master key order comes first, subordinate-only keys follow in their own
    order. Neither input is mutated.

    Args:
        subordinate: Tree providing override values.
        master: Tree providing default structure and values.

    Returns:
        A new merged tree.
    """
    children: dict[str, TreeNode] = {}

    for key, master_child in master.items():
        sub_child = subordinate.get(key)
        if sub_child is None:
            children[key] = master_child
        elif isinstance(sub_child, Branch) and isinstance(master_child, Branch):
            children[key] = merge(sub_child, master_child)
        else:
            children[key] = sub_child

    for key, sub_child in subordinate.items():
        if key not in children:
            children[key] = sub_child

    return Branch(children)


def merge_deep(subordinate: Mapping[str, Any], master: Mapping[str, Any]) -> dict[str, Any]:
    """:func:`merge` over plain ``json.load`` mappings."""
    return to_json(merge(from_json(subordinate), from_json(master)))
