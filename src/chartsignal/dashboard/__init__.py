"""Web dashboard for uploading price data and viewing the resulting signal."""

from chartsignal.dashboard.app import create_dashboard_app

__all__ = ["create_dashboard_app"]
