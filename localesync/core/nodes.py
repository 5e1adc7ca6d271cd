"""localesync – Translation Tree Nodes.

A translation tree is either a ``Branch`` (ordered mapping of key → child)
or a ``Leaf`` (JSON scalar or array, never recursed into).
"""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class Leaf:
    """Terminal value: str, int, float, bool, None or an opaque list."""

    value: Any


@dataclass(frozen=True)
class Branch:
    """Internal node. Child order is insertion order."""

    children: dict[str, TreeNode] = field(default_factory=dict)

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def get(self, key: str) -> TreeNode | None:
        return self.children.get(key)

    def items(self):
        return self.children.items()


TreeNode = Union[Branch, Leaf]


def from_json(value: Any) -> TreeNode:
    """Build a tree from ``json.load`` output. Only mappings become branches."""
    if isinstance(value, Mapping):
        return Branch({str(key): from_json(child) for key, child in value.items()})
    return Leaf(value)


def to_json(node: TreeNode) -> Any:
    """Inverse of :func:`from_json`."""
    if isinstance(node, Branch):
        return {key: to_json(child) for key, child in node.items()}
    if isinstance(node.value, list):
        return copy.deepcopy(node.value)
    return node.value
