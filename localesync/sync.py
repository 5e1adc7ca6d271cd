"""localesync – Sync Orchestrator.

Loads every locale under a directory, reshapes each subordinate locale to the
master's key shape, writes the results back and optionally produces the CSV
comparison. All paths are explicit; the working directory is never changed.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from localesync.core.flatten import flatten
from localesync.core.nodes import Branch
from localesync.core.pipeline import synchronize
from localesync.export.csv_export import write_csv
from localesync.io.store import DEFAULT_TRANSLATION_FILENAME, LocaleStore
from localesync.schemas import LocaleSyncResult, SyncReport

if TYPE_CHECKING:
    from config.settings import Settings

logger = structlog.get_logger()


def _leaf_paths(tree: Branch) -> list[str]:
    return [path for path, _ in flatten(None, tree)]


def _diff_paths(before: Branch, after: Branch) -> tuple[list[str], list[str]]:
    old = _leaf_paths(before)
    new = _leaf_paths(after)
    old_set, new_set = set(old), set(new)
    added = [p for p in new if p not in old_set]
    removed = [p for p in old if p not in new_set]
    return added, removed


def sync_locales(
    locales_dir: str | Path,
    master_locale: str,
    *,
    translation_filename: str = DEFAULT_TRANSLATION_FILENAME,
    produce_csv: bool = False,
    csv_out_path: str | Path | None = None,
    indent: str | int = "\t",
    dry_run: bool = False,
) -> SyncReport:
    """Synchronize all subordinate locales against ``master_locale``.

    Args:
        locales_dir: Directory holding ``<locale>/<translation_filename>``.
        master_locale: Identifier of the locale whose key shape is canonical.
        translation_filename: Document name inside each locale directory.
        produce_csv: Write the side-by-side CSV after syncing.
        csv_out_path: CSV target; required when ``produce_csv`` is set.
        indent: JSON indent for written documents.
        dry_run: Compute the report without touching any file.

    Returns:
        SyncReport describing every locale.

    Raises:
        LocaleDirectoryNotFoundError: If ``locales_dir`` does not exist.
        LocaleLoadError: If a locale document cannot be parsed.
        ValueError: If ``produce_csv`` is set without ``csv_out_path``.
    """
    if produce_csv and csv_out_path is None:
        raise ValueError("csv_out_path is required when produce_csv is set")

    store = LocaleStore(locales_dir, translation_filename, indent=indent)
    log = logger.bind(locales_dir=str(store.root), master=master_locale)
    log.info("locale_sync.started", dry_run=dry_run)

    documents = store.load_all()
    report = SyncReport(
        master_locale=master_locale,
        locales=list(documents),
        dry_run=dry_run,
    )

    master = documents.get(master_locale)
    if master is None:
        # Non-fatal: subordinates stay untouched.
        log.warning("locale_sync.master_not_found", available=list(documents))
        report.master_found = False
    else:
        for locale, document in documents.items():
            if locale == master_locale:
                continue

            synced = synchronize(document.tree, master.tree)
            added, removed = _diff_paths(document.tree, synced)
            result = LocaleSyncResult(
                locale=locale,
                path=document.path,
                added_keys=added,
                removed_keys=removed,
                changed=store.dumps(synced) != document.text,
            )

            if result.changed and not dry_run:
                store.write(document, synced)
                result.written = True

            report.results.append(result)
            log.info(
                "locale_sync.locale_updated" if result.written else "locale_sync.locale_checked",
                locale=locale,
                added=len(added),
                removed=len(removed),
                changed=result.changed,
            )

    if produce_csv and not dry_run:
        trees = {locale: document.tree for locale, document in documents.items()}
        report.csv_path = write_csv(trees, csv_out_path)

    log.info(
        "locale_sync.completed",
        synced=len(report.results),
        drifted=report.drifted,
    )
    return report


def resolve_csv_path(settings: Settings) -> Path:
    """CSV target from settings; a relative ``csv_out_dir`` is taken from ``locales_dir``."""
    out_dir = Path(settings.csv_out_dir)
    if not out_dir.is_absolute():
        out_dir = Path(settings.locales_dir) / out_dir
    return out_dir / f"{settings.csv_out_file}.csv"


def run_from_settings(settings: Settings, dry_run: bool = False) -> SyncReport:
    """Run :func:`sync_locales` with values taken from ``settings``."""
    return sync_locales(
        settings.locales_dir,
        settings.master_locale,
        translation_filename=settings.translation_filename,
        produce_csv=settings.produce_csv,
        csv_out_path=resolve_csv_path(settings) if settings.produce_csv else None,
        indent=settings.json_indent,
        dry_run=dry_run,
    )
