"""Callbacks for the spotlight metric cards, error panel and header status."""
from datetime import datetime

from dash import Input, Output, no_update

from core.models import DashboardState

SHOW = {}
HIDE = {"display": "none"}


def format_last_updated(iso_timestamp):
    """Render the fetch time as a calendar date, e.g. '19 Oct 2026'."""
    if not iso_timestamp:
        return "Unknown"
    try:
        return datetime.fromisoformat(iso_timestamp).strftime("%d %b %Y")
    except (ValueError, TypeError):
        return "Unknown"


def spotlight_values(data):
    """Return (active, recovered, deaths, vaccinations) display strings from stored state."""
    stats = DashboardState.from_dict(data).global_stats
    return stats.active_cases, stats.recovered, stats.deaths, stats.vaccinations


def status_outputs(data):
    """Return the error panel style, message, spotlight style and header badge text.

    The spotlight is replaced by the error panel when the last cycle failed;
    the charts below still render the fallback sample data.
    """
    state = DashboardState.from_dict(data)
    if state.has_error:
        return SHOW, state.error, HIDE, "Sample Data"
    return HIDE, "", SHOW, "Live Data"


def register_kpi_callbacks(app):
    """Register spotlight, error panel and header status callbacks."""

    @app.callback(
        Output("kpi-active-cases", "children"),
        Output("kpi-recovered", "children"),
        Output("kpi-deaths", "children"),
        Output("kpi-vaccinations", "children"),
        Input("dashboard-data", "data"),
    )
    def update_spotlight(data):
        """Update the four spotlight cards from the published state."""
        if not data:
            return (no_update,) * 4
        return spotlight_values(data)

    @app.callback(
        Output("error-panel", "style"),
        Output("error-message", "children"),
        Output("spotlight", "style"),
        Output("header-status-badge", "children"),
        Output("header-last-updated", "children"),
        Input("dashboard-data", "data"),
    )
    def update_status_panel(data):
        """Show the error panel or the spotlight, and refresh the header status."""
        if not data:
            return (no_update,) * 5
        return (*status_outputs(data), format_last_updated(data.get("fetched_at")))
