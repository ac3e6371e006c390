"""
CDX client — asks the Wayback Machine which captures exist for a page.

Returns the CDX server's tabular JSON untouched (header row + data rows)
once it has checked the shape; every failure is raised as a
``SnapshotFinderError`` subclass.
"""
from __future__ import annotations

import json
import logging

import httpx

from wayback_finder.config import settings
from wayback_finder.errors import (
    NO_SNAPSHOTS_MESSAGE,
    InvalidInput,
    MalformedResponse,
    UpstreamError,
    UpstreamUnreachable,
)
from wayback_finder.utils import normalize_target

logger = logging.getLogger(__name__)

RawRecord = list[list[str]]


def build_query(target: str) -> dict[str, str | int]:
    return {
        "url": target,
        "output": "json",
        "fl": settings.cdx_fields,
        "limit": settings.record_limit,
    }


def parse_cdx_body(text: str) -> RawRecord:
    try:
        data = json.loads(text)
    except ValueError as exc:
        logger.warning("CDX JSON parse error: %s", exc)
        logger.info("First 500 chars of response: %s", text[:500])
        raise MalformedResponse("Invalid API response") from exc

    if not isinstance(data, list) or len(data) < 2 or not all(isinstance(row, list) for row in data):
        raise MalformedResponse(NO_SNAPSHOTS_MESSAGE, no_snapshots=True)
    return data


class CdxClient:
    """Stateless: each ``fetch`` is an independent round trip, nothing is cached."""

    def __init__(self, client: httpx.AsyncClient | None = None):
        self._client = client

    async def fetch(self, target: str | None) -> RawRecord:
        target = (target or "").strip()
        if not target:
            raise InvalidInput("Missing URL parameter")

        params = build_query(normalize_target(target))
        logger.info("Requesting CDX: %s %s", settings.cdx_url, params)

        if self._client is not None:
            response = await self._get(self._client, params)
        else:
            async with httpx.AsyncClient(
                timeout=settings.request_timeout,
                follow_redirects=True,
                headers={"User-Agent": settings.user_agent},
            ) as client:
                response = await self._get(client, params)

        logger.info("CDX status %s, %d bytes", response.status_code, len(response.content))
        if response.status_code != 200:
            raise UpstreamError(response.status_code)

        rows = parse_cdx_body(response.text)
        logger.info("Found %d snapshots for %s", len(rows) - 1, params["url"])
        return rows

    async def _get(self, client: httpx.AsyncClient, params: dict) -> httpx.Response:
        try:
            return await client.get(settings.cdx_url, params=params)
        except httpx.RequestError as exc:
            logger.error("CDX request failed: %s", exc)
            raise UpstreamUnreachable(str(exc) or exc.__class__.__name__) from exc
