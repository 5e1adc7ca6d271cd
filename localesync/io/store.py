"""localesync – Locale Store.

Reads and writes the per-locale translation documents laid out as
``<locales_dir>/<locale>/<translation_filename>``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import structlog

from localesync.core.exceptions import LocaleDirectoryNotFoundError, LocaleLoadError
from localesync.core.nodes import Branch, from_json, to_json

logger = structlog.get_logger()

DEFAULT_TRANSLATION_FILENAME = "translation.json"


@dataclass
class LocaleDocument:
    """One loaded locale: identifier, source path, parsed tree and raw text."""

    locale: str
    path: Path
    tree: Branch
    text: str = ""


class LocaleStore:
    """File-system access to a directory of locale documents.

    Usage:
        store = LocaleStore("public/locales")
        documents = store.load_all()
        store.write(documents["de"], new_tree)
    """

    def __init__(
        self,
        locales_dir: str | Path,
        translation_filename: str = DEFAULT_TRANSLATION_FILENAME,
        indent: str | int = "\t",
    ) -> None:
        self._root = Path(locales_dir)
        self._filename = translation_filename
        self._indent = indent

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, locale: str) -> Path:
        return self._root / locale / self._filename

    def discover(self) -> list[str]:
        """List locales that have a translation document, sorted by name.

        Raises:
            LocaleDirectoryNotFoundError: If the locales directory is missing.
        """
        if not self._root.is_dir():
            raise LocaleDirectoryNotFoundError(self._root)

        locales = sorted(
            entry.name
            for entry in self._root.iterdir()
            if entry.is_dir() and (entry / self._filename).is_file()
        )
        logger.debug("locale_store.discovered", root=str(self._root), locales=locales)
        return locales

    def load(self, locale: str) -> LocaleDocument:
        """Parse one locale document.

        Raises:
            LocaleLoadError: If the file is unreadable, not JSON, or not an object.
        """
        path = self.path_for(locale)
        try:
            text = path.read_text(encoding="utf-8")
            raw = json.loads(text)
        except (OSError, UnicodeDecodeError) as e:
            raise LocaleLoadError(path, str(e)) from e
        except json.JSONDecodeError as e:
            raise LocaleLoadError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e

        if not isinstance(raw, dict):
            raise LocaleLoadError(path, f"expected a JSON object, got {type(raw).__name__}")

        tree = from_json(raw)
        logger.debug("locale_store.loaded", locale=locale, path=str(path), keys=len(tree))
        return LocaleDocument(locale=locale, path=path, tree=tree, text=text)

    def load_all(self) -> dict[str, LocaleDocument]:
        """Load every discovered locale, keyed by locale identifier."""
        return {locale: self.load(locale) for locale in self.discover()}

    def dumps(self, tree: Branch) -> str:
        """Serialize a tree the way :meth:`write` stores it."""
        return json.dumps(to_json(tree), indent=self._indent, ensure_ascii=False) + "\n"

    def write(self, document: LocaleDocument, tree: Branch) -> None:
        """Overwrite the document's file with ``tree``."""
        text = self.dumps(tree)
        document.path.write_text(text, encoding="utf-8")
        document.tree = tree
        document.text = text
        logger.debug("locale_store.written", locale=document.locale, path=str(document.path))
