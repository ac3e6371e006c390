"""
Snapshot catalog — turns CDX rows into ``Snapshot`` records and keeps the
filtered/sorted view that the browse page renders.

One catalog per search: ``process_snapshots`` replaces everything, while
``apply_filters`` and ``apply_sorting`` recompute the view from the full set.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from wayback_finder.config import settings
from wayback_finder.errors import EmptyResult, MalformedResponse
from wayback_finder.models import (
    ALL,
    CatalogStats,
    DisplayRow,
    Snapshot,
    SnapshotFilter,
    SortMode,
    parse_timestamp,
)

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "No snapshots match your filters"

_SORT_KEYS = {
    SortMode.NEWEST: (lambda s: s.timestamp, True),
    SortMode.OLDEST: (lambda s: s.timestamp, False),
    SortMode.STATUS: (lambda s: s.status_code, False),
}


def snapshot_from_row(row: Sequence[str], view_prefix: str) -> Snapshot:
    if not isinstance(row, (list, tuple)) or len(row) < 4:
        raise MalformedResponse(f"Unexpected CDX row: {row!r}")
    timestamp, original, status, mime = (str(v) for v in row[:4])
    try:
        captured_at = parse_timestamp(timestamp)
    except ValueError as exc:
        raise MalformedResponse(f"Unexpected CDX timestamp: {timestamp!r}") from exc
    return Snapshot(
        timestamp=timestamp,
        original_url=original,
        status_code=status,
        mime_type=mime,
        captured_at=captured_at,
        archive_view_url=f"{view_prefix}{timestamp}/{original}",
    )


def format_capture(snapshot: Snapshot) -> str:
    """en-US style, minute precision: ``Jun 1, 2021, 12:00 PM``."""
    dt = snapshot.captured_at
    return f"{dt:%b} {dt.day}, {dt.year}, {dt:%I:%M %p}"


class SnapshotCatalog:
    def __init__(
        self,
        sort_mode: SortMode | str = settings.default_sort,
        criteria: SnapshotFilter | None = None,
        view_prefix: str = settings.archive_view_prefix,
    ):
        self.sort_mode = SortMode.parse(sort_mode) if isinstance(sort_mode, str) else sort_mode
        self.criteria = criteria or SnapshotFilter()
        self.view_prefix = view_prefix
        self.snapshots: list[Snapshot] = []
        self.view: list[Snapshot] = []
        self.years: list[str] = []

    @property
    def year_options(self) -> list[str]:
        return [ALL, *self.years]

    def process_snapshots(self, raw) -> list[Snapshot]:
        if not isinstance(raw, list) or len(raw) < 2:
            raise EmptyResult()

        self.snapshots = [snapshot_from_row(row, self.view_prefix) for row in raw[1:]]
        self.years = sorted({s.year for s in self.snapshots}, reverse=True)
        logger.debug("Catalogued %d snapshots across %d years", len(self.snapshots), len(self.years))

        self.view = list(self.snapshots)
        self.apply_sorting()
        return self.snapshots

    def apply_filters(self, criteria: SnapshotFilter | None = None) -> list[Snapshot]:
        if criteria is not None:
            self.criteria = criteria
        self.view = [s for s in self.snapshots if self.criteria.matches(s)]
        return self.apply_sorting()

    def apply_sorting(self, mode: SortMode | str | None = None) -> list[Snapshot]:
        if mode is not None:
            self.sort_mode = SortMode.parse(mode) if isinstance(mode, str) else mode
        if self.sort_mode in _SORT_KEYS:
            key, reverse = _SORT_KEYS[self.sort_mode]
            # list.sort stays stable with reverse=True
            self.view.sort(key=key, reverse=reverse)
        return self.view

    def date_range(self) -> str:
        if not self.snapshots:
            return ""
        earliest = min(s.captured_at for s in self.snapshots)
        latest = max(s.captured_at for s in self.snapshots)
        return f"{earliest.year} - {latest.year}"

    def stats(self) -> CatalogStats:
        return CatalogStats(total=len(self.snapshots), showing=len(self.view), date_range=self.date_range())

    def render(self) -> tuple[list[DisplayRow], CatalogStats]:
        if not self.view:
            return [DisplayRow(placeholder=True, message=NO_MATCHES_MESSAGE)], self.stats()

        rows = [
            DisplayRow(
                rank=rank,
                captured=format_capture(s),
                original_url=s.original_url,
                status_code=s.status_code,
                mime_type=s.mime_type,
                archive_view_url=s.archive_view_url,
            )
            for rank, s in enumerate(self.view, start=1)
        ]
        return rows, self.stats()
