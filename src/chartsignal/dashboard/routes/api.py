"""JSON API endpoints: analyze an uploaded CSV, fetch or clear the latest result."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse

from chartsignal.analysis import analyze_csv
from chartsignal.data.loader import generate_sample_csv
from chartsignal.exceptions import IngestionError

log = structlog.get_logger(__name__)

router = APIRouter()


@router.post("/analyze")
async def analyze_upload(request: Request) -> JSONResponse:
    """Analyze the CSV sent as the raw request body.

    Returns the analysis JSON, or 400 with ``{"error", "detail"}`` when the
    file cannot be ingested. The result is saved when a store is configured.
    """
    body = await request.body()
    text = body.decode("utf-8", errors="replace")

    try:
        analysis = await run_in_threadpool(
            analyze_csv,
            text,
            indicator_settings=request.app.state.indicator_settings,
            signal_settings=request.app.state.signal_settings,
        )
    except IngestionError as e:
        log.warning("upload_rejected", kind=e.kind, detail=str(e))
        return JSONResponse(
            status_code=400,
            content={"error": e.kind, "detail": str(e)},
        )

    store = request.app.state.store
    if store is not None:
        await store.save_analysis(analysis)

    return JSONResponse(content=analysis.to_dict())


@router.get("/analysis")
async def get_latest_analysis(request: Request) -> JSONResponse:
    """Latest saved analysis, or 404 when nothing has been saved."""
    store = request.app.state.store
    analysis = await store.get_latest_analysis() if store is not None else None
    if analysis is None:
        return JSONResponse(status_code=404, content={"error": "not_found"})
    return JSONResponse(content=analysis.to_dict())


@router.delete("/analysis")
async def clear_analysis(request: Request) -> JSONResponse:
    """Forget saved analyses so the dashboard starts over."""
    store = request.app.state.store
    deleted = await store.clear() if store is not None else 0
    return JSONResponse(content={"deleted": deleted})


@router.get("/sample.csv")
async def download_sample() -> PlainTextResponse:
    """Example CSV in the expected column layout."""
    return PlainTextResponse(
        generate_sample_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="sample.csv"'},
    )
