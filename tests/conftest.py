"""localesync – Pytest Configuration.

Shared fixtures for all tests.
"""

import json
import os
from pathlib import Path

# Keep a developer's .env / shell settings out of the test run
for _name in list(os.environ):
    if _name.startswith("LOCALE_SYNC_"):
        del os.environ[_name]

import pytest


MASTER = {
    "common": {"ok": "OK", "cancel": "Cancel"},
    "navbar": {"home": "Home", "settings": {"title": "Settings", "logout": "Log out"}},
    "count": 3,
}

GERMAN = {
    "common": {"ok": "Okay"},
    "navbar": {"home": "Startseite", "legacy": "Alt"},
    "stray": "weg damit",
}


def write_locale(root: Path, locale: str, data, filename: str = "translation.json") -> Path:
    path = root / locale / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent="\t", ensure_ascii=False), encoding="utf-8")
    return path


def read_locale(root: Path, locale: str, filename: str = "translation.json"):
    return json.loads((root / locale / filename).read_text(encoding="utf-8"))


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    """public/locales with an English master and a partial German translation."""
    root = tmp_path / "public" / "locales"
    write_locale(root, "en", MASTER)
    write_locale(root, "de", GERMAN)
    return root
