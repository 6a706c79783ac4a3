"""FastAPI dashboard application factory with Jinja2 templates."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from chartsignal.config import IndicatorSettings, SignalSettings
from chartsignal.dashboard.routes import api, pages

if TYPE_CHECKING:
    from chartsignal.data.store import AnalysisStore

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _format_decimal(value: Any, places: int = 2) -> str:
    """Format a Decimal with fixed places; undefined values render as "n/a"."""
    if value is None:
        return "n/a"
    return f"{Decimal(value):.{places}f}"


def create_dashboard_app(
    lifespan: Any = None,
    store: AnalysisStore | None = None,
    indicator_settings: IndicatorSettings | None = None,
    signal_settings: SignalSettings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI dashboard application.

    Args:
        lifespan: Optional async context manager for application lifespan events.
            Used by main.py to open the analysis database and set
            ``app.state.store``.
        store: Analysis store to read and write results. None disables
            persistence (results are returned but not kept).
        indicator_settings: Indicator periods for uploaded files.
        signal_settings: Signal rule thresholds and weights.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="Chart Signal Dashboard",
        lifespan=lifespan,
    )

    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.filters["format_decimal"] = _format_decimal
    app.state.templates = templates

    app.state.store = store
    app.state.indicator_settings = indicator_settings or IndicatorSettings()
    app.state.signal_settings = signal_settings or SignalSettings()

    app.include_router(pages.router)
    app.include_router(api.router, prefix="/api")

    return app
