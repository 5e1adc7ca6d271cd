"""localesync – Side-by-side CSV export.

One row per dotted key, one column per locale, for spreadsheet review.
"""

from __future__ import annotations

import csv
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from localesync.core.flatten import flatten
from localesync.core.nodes import Branch

logger = structlog.get_logger()

KEY_COLUMN = "key"


def build_rows(trees: Mapping[str, Branch]) -> list[dict[str, Any]]:
    """Pivot flattened locales into rows.

    Rows follow the order in which keys are first seen, walking the locales in
    mapping order. A locale lacking a key simply has no entry in that row.

    Args:
        trees: Locale identifier → tree.

    Returns:
        List of ``{"key": path, <locale>: value, ...}`` dicts.
    """
    rows: dict[str, dict[str, Any]] = {}
    for locale, tree in trees.items():
        for path, value in flatten(None, tree):
            rows.setdefault(path, {KEY_COLUMN: path})[locale] = value
    return list(rows.values())


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def write_csv(trees: Mapping[str, Branch], out_path: str | Path) -> Path:
    """Write the comparison table to ``out_path``.

    Args:
        trees: Locale identifier → tree; column order follows mapping order.
        out_path: Target file, parent directories are created.

    Returns:
        The path written.
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    header = [KEY_COLUMN, *trees.keys()]
    rows = build_rows(trees)

    with out_path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=header, restval="")
        writer.writeheader()
        for row in rows:
            writer.writerow({column: _cell(value) for column, value in row.items()})

    logger.info("csv_export.written", path=str(out_path), rows=len(rows), locales=len(trees))
    return out_path
