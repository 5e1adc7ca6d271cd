"""localesync – Configuration.

Pydantic Settings, loaded from a .env file or LOCALE_SYNC_* environment variables.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central sync configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOCALE_SYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Locales ---
    master_locale: str = "en"
    locales_dir: str = "public/locales"
    translation_filename: str = "translation.json"
    json_indent: str | int = "\t"

    # --- CSV export ---
    produce_csv: bool = False
    csv_out_dir: str = "../.."  # relative to locales_dir
    csv_out_file: str = "output"  # ".csv" is appended

    # --- Logging ---
    verbose: bool = False
    log_format: str = "console"  # 'console' | 'json'

    @field_validator("json_indent", mode="before")
    @classmethod
    def _numeric_indent(cls, value: str | int) -> str | int:
        # "2" from env or CLI means two spaces, not the literal string
        if isinstance(value, str) and value.isdigit():
            return int(value)
        return value

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"


def get_settings() -> Settings:
    """Factory function for settings."""
    return Settings()
