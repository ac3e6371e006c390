from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

ALL = "all"
CDX_HEADER = ("timestamp", "original", "statuscode", "mimetype")


class SortMode(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    STATUS = "status"
    UNSPECIFIED = ""

    @classmethod
    def parse(cls, value: str | None) -> SortMode:
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.UNSPECIFIED


@dataclass(frozen=True)
class Snapshot:
    timestamp: str              # YYYYMMDDhhmmss
    original_url: str
    status_code: str
    mime_type: str
    captured_at: datetime       # UTC
    archive_view_url: str

    @property
    def year(self) -> str:
        return self.timestamp[:4]


def parse_timestamp(timestamp: str) -> datetime:
    """Parse a CDX ``YYYYMMDDhhmmss`` timestamp as UTC."""
    if len(timestamp) != 14 or not timestamp.isdigit():
        raise ValueError(f"bad CDX timestamp: {timestamp!r}")
    return datetime.strptime(timestamp, "%Y%m%d%H%M%S").replace(tzinfo=UTC)


@dataclass
class SnapshotFilter:
    status: str | None = None
    year: str | None = None
    query: str | None = None    # case-insensitive substring of original_url

    @staticmethod
    def _active(value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return None if value in ("", ALL) else value

    def matches(self, snapshot: Snapshot) -> bool:
        status = self._active(self.status)
        if status is not None and snapshot.status_code != status:
            return False
        year = self._active(self.year)
        if year is not None and snapshot.year != year:
            return False
        query = (self.query or "").strip().lower()
        if query and query not in snapshot.original_url.lower():
            return False
        return True


@dataclass(frozen=True)
class DisplayRow:
    rank: int = 0
    captured: str = ""
    original_url: str = ""
    status_code: str = ""
    mime_type: str = ""
    archive_view_url: str = ""
    placeholder: bool = False
    message: str = ""


@dataclass(frozen=True)
class CatalogStats:
    total: int
    showing: int
    date_range: str
