"""localesync – keep locale translation trees in step with a master locale."""

from localesync.core.flatten import extract_dotnested_keys, flatten
from localesync.core.merge import merge, merge_deep
from localesync.core.nodes import Branch, Leaf, TreeNode, from_json, to_json
from localesync.core.pipeline import synchronize
from localesync.core.prune import prune, prune_keys

__version__ = "1.0.0"

__all__ = [
    "Branch",
    "Leaf",
    "TreeNode",
    "extract_dotnested_keys",
    "flatten",
    "from_json",
    "merge",
    "merge_deep",
    "prune",
    "prune_keys",
    "synchronize",
    "to_json",
]
