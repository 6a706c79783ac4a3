"""Page route serving the dashboard HTML template."""

from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from chartsignal.analysis import Analysis

router = APIRouter()


def _latest_values(analysis: Analysis) -> dict:
    """Indicator values at the last record, for the summary cards."""
    last = len(analysis.records) - 1
    indicators = analysis.indicators
    volumes = [r.volume for r in analysis.records]
    return {
        "rsi": indicators.rsi[last],
        "sma": indicators.sma[last],
        "ema": indicators.ema[last],
        "macd": indicators.macd.macd[last],
        "macd_signal": indicators.macd.signal[last],
        "histogram": indicators.macd.histogram[last],
        "average_volume": sum(volumes, Decimal("0")) / len(volumes),
        "records": len(analysis.records),
        "first_time": analysis.records[0].time,
        "last_time": analysis.records[-1].time,
    }


@router.get("/", response_class=HTMLResponse)
async def dashboard_index(request: Request) -> HTMLResponse:
    """Upload form, or the latest saved analysis when there is one."""
    templates: Jinja2Templates = request.app.state.templates
    store = request.app.state.store

    analysis = await store.get_latest_analysis() if store is not None else None
    context: dict = {"analysis": analysis}
    if analysis is not None:
        context["latest"] = _latest_values(analysis)

    return templates.TemplateResponse(request, "index.html", context)
