"""Tests for configuration loading."""

from config.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self):
        settings = get_settings()
        assert settings.master_locale == "en"
        assert settings.locales_dir == "public/locales"
        assert settings.translation_filename == "translation.json"
        assert settings.produce_csv is False
        assert settings.csv_out_dir == "../.."
        assert settings.csv_out_file == "output"
        assert settings.json_indent == "\t"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("LOCALE_SYNC_MASTER_LOCALE", "de")
        monkeypatch.setenv("LOCALE_SYNC_PRODUCE_CSV", "true")
        monkeypatch.setenv("LOCALE_SYNC_JSON_INDENT", "2")

        settings = get_settings()
        assert settings.master_locale == "de"
        assert settings.produce_csv is True
        assert settings.json_indent == 2

    def test_log_format(self):
        assert Settings(log_format="json").json_logs
        assert not Settings().json_logs
