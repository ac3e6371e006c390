from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from wayback_finder.config import settings
from wayback_finder.errors import InvalidInput, SnapshotFinderError
from wayback_finder.models import SnapshotFilter, SortMode
from wayback_finder.services.catalog import SnapshotCatalog
from wayback_finder.services.cdx import CdxClient

BASE_DIR = Path(__file__).resolve().parent
STATUS_OPTIONS = ["all", "200", "301", "302", "404", "500"]
SORT_OPTIONS = [(SortMode.NEWEST, "Newest first"), (SortMode.OLDEST, "Oldest first"), (SortMode.STATUS, "Status code")]

logger = logging.getLogger(__name__)
app = FastAPI(title=settings.app_name)
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")
templates = Jinja2Templates(directory=BASE_DIR / "templates")
templates.env.filters["thousands"] = lambda n: f"{n:,}"


@app.on_event("startup")
async def startup():
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("%s ready, CDX server %s", settings.app_name, settings.cdx_url)


def get_cdx_client() -> CdxClient:
    return CdxClient()


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


@app.get("/api/snapshots")
async def api_snapshots(url: str | None = None):
    try:
        rows = await get_cdx_client().fetch(url)
    except InvalidInput as exc:
        return JSONResponse({"error": str(exc)}, status_code=400)
    except SnapshotFinderError as exc:
        logger.warning("Snapshot lookup failed for %r: %s", url, exc)
        return JSONResponse({"error": str(exc)}, status_code=500)

    return JSONResponse(rows, headers={"Access-Control-Allow-Origin": "*"})


@app.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    url: str | None = None,
    status: str = "all",
    year: str = "all",
    q: str = "",
    sort: str = settings.default_sort,
):
    criteria = SnapshotFilter(status=status, year=year, query=q)
    context = {
        "request": request,
        "url": url or "",
        "criteria": criteria,
        "sort": SortMode.parse(sort),
        "status_options": STATUS_OPTIONS,
        "sort_options": SORT_OPTIONS,
        "error": None,
        "result": None,
    }
    if url is None:
        return templates.TemplateResponse(request, "index.html", context)

    catalog = SnapshotCatalog(sort_mode=sort, criteria=criteria)
    try:
        catalog.process_snapshots(await get_cdx_client().fetch(url))
    except SnapshotFinderError as exc:
        logger.warning("Search failed for %r: %s", url, exc)
        context["error"] = f"Error: {exc}"
        return templates.TemplateResponse(
            request, "index.html", context, status_code=400 if isinstance(exc, InvalidInput) else 502
        )

    catalog.apply_filters()
    rows, stats = catalog.render()
    context["result"] = {"rows": rows, "stats": stats, "year_options": catalog.year_options}
    return templates.TemplateResponse(request, "index.html", context)
