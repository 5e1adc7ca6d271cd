"""localesync – Command Line Interface.

Usage:
    locale-sync --master en --locales-dir public/locales
    locale-sync --master en --csv --csv-out-dir exports --csv-out-file translations
    locale-sync --check     # dry run, exit 1 when any locale is out of sync
"""

from __future__ import annotations

import argparse
import sys

import structlog

from config.settings import Settings, get_settings
from localesync.core.exceptions import LocaleSyncError
from localesync.core.logging_setup import setup_logging
from localesync.sync import run_from_settings

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_DRIFT = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locale-sync",
        description="Synchronize locale translation files against a master locale.",
    )
    parser.add_argument("--locales-dir", help="Directory containing <locale>/<filename>")
    parser.add_argument("--master", dest="master_locale", help="Master locale identifier")
    parser.add_argument("--filename", dest="translation_filename", help="Translation file name per locale")
    parser.add_argument("--indent", dest="json_indent", help="JSON indent, e.g. '2' or a tab")
    parser.add_argument("--csv", dest="produce_csv", action="store_true", default=None, help="Write the CSV comparison")
    parser.add_argument("--csv-out-dir", help="CSV directory (relative to the locales dir)")
    parser.add_argument("--csv-out-file", help="CSV file name without extension")
    parser.add_argument("--check", action="store_true", help="Report drift without writing files")
    parser.add_argument("--verbose", "-v", action="store_true", default=None, help="Debug logging")
    parser.add_argument("--json-logs", action="store_true", help="Render logs as JSON lines")
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return a copy of ``settings`` with every flag given on the command line applied."""
    fields = (
        "locales_dir",
        "master_locale",
        "translation_filename",
        "json_indent",
        "produce_csv",
        "csv_out_dir",
        "csv_out_file",
        "verbose",
    )
    overrides = {name: getattr(args, name) for name in fields if getattr(args, name) is not None}
    if args.json_logs:
        overrides["log_format"] = "json"
    return Settings(**{**settings.model_dump(), **overrides})


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = apply_overrides(get_settings(), args)
    setup_logging(verbose=settings.verbose, json_logs=settings.json_logs)

    try:
        report = run_from_settings(settings, dry_run=args.check)
    except LocaleSyncError as e:
        logger.error("locale_sync.failed", error=str(e))
        return EXIT_ERROR

    if not report.master_found:
        return EXIT_ERROR
    if args.check and report.drifted:
        logger.warning("locale_sync.drift_detected", locales=report.drifted)
        return EXIT_DRIFT
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
