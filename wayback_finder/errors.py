"""Errors raised while looking up and cataloguing Wayback snapshots.

Hierarchy::

    SnapshotFinderError
    ├── InvalidInput
    ├── UpstreamUnreachable
    ├── UpstreamError          (status_code)
    ├── MalformedResponse      (no_snapshots)
    └── EmptyResult

Every error ends the current search; none of them is retried.
"""
from __future__ import annotations

NO_SNAPSHOTS_MESSAGE = "No snapshots found for this URL"


class SnapshotFinderError(Exception):
    """Base class; ``str(exc)`` is the message shown to the user."""


class InvalidInput(SnapshotFinderError):
    """The caller did not supply a usable target address."""


class UpstreamUnreachable(SnapshotFinderError):
    """The CDX server could not be reached (DNS, connect, timeout)."""


class UpstreamError(SnapshotFinderError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"API returned status {status_code}")
        self.status_code = status_code


class MalformedResponse(SnapshotFinderError):
    """The CDX server answered 200 with a body we cannot use.

    ``no_snapshots`` is set when the body parsed but held no data rows, as
    opposed to a body that is not JSON at all.
    """

    def __init__(self, message: str, no_snapshots: bool = False) -> None:
        super().__init__(message)
        self.no_snapshots = no_snapshots


class EmptyResult(SnapshotFinderError):
    def __init__(self, message: str = NO_SNAPSHOTS_MESSAGE) -> None:
        super().__init__(message)
