"""localesync – Key Pruner.

Strips keys that do not exist at the same path in a reference tree.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from localesync.core.nodes import Branch, Leaf, TreeNode, from_json, to_json


def prune(tree: Branch, reference: Branch) -> Branch:
    """Keep only the keys of ``tree`` that also exist in ``reference``.

    A key missing from the reference is dropped together with its subtree.
    Branches are pruned recursively before being kept, even when they end up
    empty. Where the node kinds differ (leaf vs branch) the node is dropped:
    the reference decides the shape.

    Args:
        tree: Tree to filter, typically the output of ``merge``.
        reference: Authoritative key shape (the master locale).

    Returns:
        A new pruned tree.
    """
    children: dict[str, TreeNode] = {}

    for key, child in tree.items():
        ref_child = reference.get(key)
        if ref_child is None:
            continue
        if isinstance(child, Branch) and isinstance(ref_child, Branch):
            children[key] = prune(child, ref_child)
        elif isinstance(child, Leaf) and isinstance(ref_child, Leaf):
            children[key] = child

    return Branch(children)


def prune_keys(data: Mapping[str, Any], reference: Mapping[str, Any]) -> dict[str, Any]:
    """:func:`prune` over plain ``json.load`` mappings."""
    return to_json(prune(from_json(data), from_json(reference)))
