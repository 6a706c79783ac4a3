"""Command-line entry point.

Subcommands:
    analyze <csv>   Analyze a CSV file and print the signal (or --json).
    serve           Run the web dashboard under uvicorn.
"""

import argparse
import asyncio
import json
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from chartsignal.analysis import Analysis, analyze
from chartsignal.config import AppSettings
from chartsignal.data.database import AnalysisDatabase
from chartsignal.data.loader import load_csv
from chartsignal.data.store import AnalysisStore
from chartsignal.exceptions import IngestionError
from chartsignal.logging import get_logger, setup_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chartsignal",
        description="Technical indicators and CALL/PUT signals from OHLC price data.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a CSV file")
    analyze_parser.add_argument("csv", help="Path to a CSV with time,open,high,low,close,volume")
    analyze_parser.add_argument(
        "--json", action="store_true", help="Print the full analysis as JSON"
    )

    serve_parser = subparsers.add_parser("serve", help="Run the web dashboard")
    serve_parser.add_argument("--host", default=None, help="Override DASHBOARD_HOST")
    serve_parser.add_argument("--port", type=int, default=None, help="Override DASHBOARD_PORT")

    return parser


def _format_summary(analysis: Analysis) -> str:
    signal = analysis.signal
    lines = [
        f"{signal.verdict.value} ({signal.confidence}% confidence)",
        f"Price {signal.price:.2f} at {signal.time}",
    ]
    lines.extend(f"  - {reason}" for reason in signal.reasons)
    return "\n".join(lines)


def run_analyze(settings: AppSettings, path: str, as_json: bool) -> int:
    """Analyze one CSV file and print the result. Returns the exit code."""
    logger = get_logger("chartsignal.main")
    try:
        records = load_csv(path)
    except IngestionError as e:
        logger.error("csv_rejected", path=path, kind=e.kind, detail=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: cannot read {path}: {e.strerror}", file=sys.stderr)
        return 1

    analysis = analyze(records, settings.indicators, settings.signal)
    if as_json:
        print(json.dumps(analysis.to_dict(), indent=2))
    else:
        print(_format_summary(analysis))
    return 0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the analysis database for the lifetime of the dashboard."""
    logger = get_logger("chartsignal.main")
    settings: AppSettings = app.state.settings

    if not settings.storage.enabled:
        logger.info("storage_disabled")
        yield
        return

    async with AnalysisDatabase(settings.storage.db_path) as database:
        app.state.store = AnalysisStore(database)
        logger.info("dashboard_started", db_path=settings.storage.db_path)
        yield
        app.state.store = None

    logger.info("dashboard_stopped")


async def run_serve(settings: AppSettings, host: str | None, port: int | None) -> None:
    """Run the dashboard until interrupted."""
    from chartsignal.dashboard.app import create_dashboard_app

    logger = get_logger("chartsignal.main")

    app = create_dashboard_app(
        lifespan=lifespan,
        indicator_settings=settings.indicators,
        signal_settings=settings.signal,
    )
    app.state.settings = settings

    host = host or settings.dashboard.host
    port = port or settings.dashboard.port
    logger.info("starting_dashboard", host=host, port=port)

    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level="warning",  # Suppress uvicorn access logs
    )
    server = uvicorn.Server(config)
    await server.serve()


def main(argv: list[str] | None = None) -> int:
    """Synchronous entry point."""
    args = _build_parser().parse_args(argv)

    settings = AppSettings()
    setup_logging(settings.log_level)

    if args.command == "analyze":
        return run_analyze(settings, args.csv, args.json)

    asyncio.run(run_serve(settings, args.host, args.port))
    return 0


if __name__ == "__main__":
    sys.exit(main())
