"""localesync – Run Report Schemas.

Pydantic models describing the outcome of one sync run.
"""

from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field


class LocaleSyncResult(BaseModel):
    """Outcome for one subordinate locale."""

    locale: str = Field(..., description="Locale identifier, e.g. 'de'")
    path: Path = Field(..., description="Translation document of the locale")
    added_keys: list[str] = Field(default_factory=list, description="Dot-paths filled from the master")
    removed_keys: list[str] = Field(default_factory=list, description="Dot-paths pruned as stray")
    changed: bool = Field(default=False, description="Serialized document differs from the file on disk")
    written: bool = Field(default=False, description="Document was overwritten")


class SyncReport(BaseModel):
    """Outcome of a full sync run."""

    master_locale: str
    master_found: bool = True
    locales: list[str] = Field(default_factory=list, description="All locales discovered")
    results: list[LocaleSyncResult] = Field(default_factory=list)
    csv_path: Path | None = None
    dry_run: bool = False
    finished_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def drifted(self) -> list[str]:
        """Locales whose document is (or was) out of sync."""
        return [r.locale for r in self.results if r.changed]
