"""Tests for the sync orchestrator."""

import os

import pytest

from conftest import GERMAN, read_locale, write_locale
from config.settings import Settings
from localesync.core.exceptions import LocaleDirectoryNotFoundError, LocaleLoadError
from localesync.sync import resolve_csv_path, run_from_settings, sync_locales

EXPECTED_DE = {
    "common": {"ok": "Okay", "cancel": "Cancel"},
    "navbar": {"home": "Startseite", "settings": {"title": "Settings", "logout": "Log out"}},
    "count": 3,
}


class TestSyncLocales:
    def test_subordinate_reshaped_to_master(self, locales_dir):
        report = sync_locales(locales_dir, "en")

        assert read_locale(locales_dir, "de") == EXPECTED_DE
        assert report.master_found
        assert report.locales == ["de", "en"]
        assert [r.locale for r in report.results] == ["de"]

    def test_master_is_not_rewritten(self, locales_dir):
        master_path = locales_dir / "en" / "translation.json"
        before = master_path.read_text(encoding="utf-8")
        sync_locales(locales_dir, "en")
        assert master_path.read_text(encoding="utf-8") == before

    def test_report_lists_added_and_removed_paths(self, locales_dir):
        result = sync_locales(locales_dir, "en").results[0]
        assert result.added_keys == [
            "common.cancel",
            "navbar.settings.title",
            "navbar.settings.logout",
            "count",
        ]
        assert result.removed_keys == ["navbar.legacy", "stray"]
        assert result.changed and result.written

    def test_second_run_is_a_no_op(self, locales_dir):
        sync_locales(locales_dir, "en")
        result = sync_locales(locales_dir, "en").results[0]
        assert not result.changed
        assert not result.written
        assert result.added_keys == [] and result.removed_keys == []

    def test_master_not_found_leaves_files_untouched(self, locales_dir):
        de_path = locales_dir / "de" / "translation.json"
        before = de_path.read_text(encoding="utf-8")

        report = sync_locales(locales_dir, "fr")

        assert not report.master_found
        assert report.results == []
        assert de_path.read_text(encoding="utf-8") == before

    def test_csv_still_written_without_master(self, locales_dir, tmp_path):
        out = tmp_path / "review.csv"
        report = sync_locales(locales_dir, "fr", produce_csv=True, csv_out_path=out)

        assert not report.master_found
        assert report.csv_path == out
        lines = out.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "key,de,en"
        assert any(line.startswith("stray,") for line in lines)
        assert read_locale(locales_dir, "de") == GERMAN

    def test_dry_run_writes_nothing(self, locales_dir):
        report = sync_locales(locales_dir, "en", dry_run=True)

        assert read_locale(locales_dir, "de") == GERMAN
        assert report.drifted == ["de"]
        assert not report.results[0].written

    def test_multiple_subordinates(self, locales_dir):
        write_locale(locales_dir, "pl", {"common": {"ok": "Dobrze"}})
        sync_locales(locales_dir, "en")

        pl = read_locale(locales_dir, "pl")
        assert pl["common"] == {"ok": "Dobrze", "cancel": "Cancel"}
        assert pl["count"] == 3

    def test_does_not_change_working_directory(self, locales_dir):
        cwd = os.getcwd()
        sync_locales(locales_dir, "en", produce_csv=True, csv_out_path=locales_dir / "out.csv")
        assert os.getcwd() == cwd

    def test_csv_contains_synced_values(self, locales_dir, tmp_path):
        out = tmp_path / "review.csv"
        report = sync_locales(locales_dir, "en", produce_csv=True, csv_out_path=out)

        assert report.csv_path == out
        lines = out.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "key,de,en"
        assert "common.cancel,Cancel,Cancel" in lines
        assert not any(line.startswith("stray") for line in lines)

    def test_csv_requires_output_path(self, locales_dir):
        with pytest.raises(ValueError):
            sync_locales(locales_dir, "en", produce_csv=True)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(LocaleDirectoryNotFoundError):
            sync_locales(tmp_path / "missing", "en")

    def test_broken_document_aborts_before_writing(self, locales_dir):
        write_locale(locales_dir, "pl", {"common": {}})
        (locales_dir / "pl" / "translation.json").write_text("{", encoding="utf-8")

        with pytest.raises(LocaleLoadError):
            sync_locales(locales_dir, "en")
        assert read_locale(locales_dir, "de") == GERMAN


class TestRunFromSettings:
    def test_uses_settings_values(self, locales_dir):
        settings = Settings(locales_dir=str(locales_dir), master_locale="en", json_indent="2")
        run_from_settings(settings)

        text = (locales_dir / "de" / "translation.json").read_text(encoding="utf-8")
        assert text.startswith('{\n  "common"')
        assert read_locale(locales_dir, "de") == EXPECTED_DE

    def test_csv_path_relative_to_locales_dir(self, locales_dir, tmp_path):
        settings = Settings(locales_dir=str(locales_dir), produce_csv=True)
        report = run_from_settings(settings)

        assert report.csv_path == resolve_csv_path(settings)
        assert (tmp_path / "output.csv").is_file()

    def test_absolute_csv_dir(self, locales_dir, tmp_path):
        settings = Settings(
            locales_dir=str(locales_dir),
            csv_out_dir=str(tmp_path / "exports"),
            csv_out_file="translations",
        )
        assert resolve_csv_path(settings) == tmp_path / "exports" / "translations.csv"

    def test_master_default_is_en(self):
        assert Settings().master_locale == "en"
