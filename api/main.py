from __future__ import annotations

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, Query
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from api.schemas import DirectoryFiltersModel, FacultyListResponse, PositionsResponse
from faculty.config import get_config
from faculty.data import FacultyLoader, records_to_frame
from faculty.filters import DirectoryFilters, apply_filters, normalize_filters, position_options
from faculty.profile import find_record
from faculty.render import render_error, render_index, render_not_found, render_page, render_profile


app = FastAPI(title="Faculty Directory", version="0.1.0")
logger = logging.getLogger(__name__)

_photos_dir = get_config().photos_dir
if Path(_photos_dir).is_dir():
    app.mount("/" + _photos_dir.strip("/"), StaticFiles(directory=_photos_dir), name="photos")


def get_loader() -> FacultyLoader:
    return FacultyLoader(get_config())


def _filters_from_query(q: str, position: str) -> DirectoryFilters:
    raw = DirectoryFiltersModel(q=q, position=position).model_dump()
    return normalize_filters(raw)


def _error(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc), "type": type(exc).__name__})


@app.get("/health")
def health():
    return {"status": "ok"}


# ---------- HTML pages ----------
@app.get("/", response_class=HTMLResponse)
@app.get("/index.html", response_class=HTMLResponse)
async def index_page(
    q: str = Query(default=""),
    position: str = Query(default=""),
    loader: FacultyLoader = Depends(get_loader),
):
    try:
        records = await loader.load()
        f = _filters_from_query(q, position)
        body = render_index(records, position_options(records), f)
    except Exception as exc:
        logger.exception("index page failed")
        return HTMLResponse(render_page("Faculty Directory", render_error(exc, "grid")), status_code=500)
    return HTMLResponse(render_page("Faculty Directory", body))


@app.get("/profile", response_class=HTMLResponse)
@app.get("/profile.html", response_class=HTMLResponse)
async def profile_page(
    faculty_id: str = Query(default="", alias="id"),
    loader: FacultyLoader = Depends(get_loader),
):
    try:
        records = await loader.load()
        record = find_record(records, faculty_id)
        if record is None:
            return HTMLResponse(render_page("Faculty Directory", render_not_found()))
        body = render_profile(record)
    except Exception as exc:
        logger.exception("profile page failed")
        return HTMLResponse(render_page("Faculty Directory", render_error(exc, "profile")), status_code=500)
    return HTMLResponse(render_page(record.name, body))


# ---------- JSON ----------
@app.get("/api/faculty", response_model=FacultyListResponse)
async def list_faculty(
    q: str = Query(default=""),
    position: str = Query(default=""),
    loader: FacultyLoader = Depends(get_loader),
):
    try:
        records = await loader.load()
        filtered = apply_filters(records, _filters_from_query(q, position))
        return FacultyListResponse(count=len(filtered), faculty=[r.to_dict() for r in filtered])
    except Exception as exc:
        logger.exception("list_faculty failed")
        return _error(exc)


@app.get("/api/faculty/{faculty_id}")
async def get_faculty(faculty_id: str, loader: FacultyLoader = Depends(get_loader)):
    try:
        record = find_record(await loader.load(), faculty_id)
    except Exception as exc:
        logger.exception("get_faculty failed")
        return _error(exc)
    if record is None:
        return JSONResponse(status_code=404, content={"error": f"Faculty member not found: {faculty_id}"})
    return record.to_dict()


@app.get("/api/positions", response_model=PositionsResponse)
async def positions(loader: FacultyLoader = Depends(get_loader)):
    try:
        return PositionsResponse(positions=position_options(await loader.load()))
    except Exception as exc:
        logger.exception("positions failed")
        return _error(exc)


@app.get("/export.csv")
async def export_csv(
    q: str = Query(default=""),
    position: str = Query(default=""),
    loader: FacultyLoader = Depends(get_loader),
):
    records = await loader.load()
    export_df = records_to_frame(apply_filters(records, _filters_from_query(q, position)))
    csv_bytes = export_df.to_csv(index=False).encode("utf-8")
    return Response(
        content=csv_bytes,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=faculty.csv"},
    )
