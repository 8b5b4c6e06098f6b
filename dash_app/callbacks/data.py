"""Callback that runs a fetch cycle whenever the time period changes."""
from dash import Input, Output, State, no_update

from core.logging_config import get_logger

log = get_logger(__name__)

# The only control that triggers network traffic
DATA_TRIGGER = ("filter-date-range", "value")

# Controls disabled while a fetch cycle is in flight
FILTER_CONTROL_IDS = ("filter-disease", "filter-region", "filter-date-range")


def register_data_callbacks(app):
    """Register the dashboard data loading callback."""

    running = [
        (Output(control_id, "disabled"), True, False)
        for control_id in FILTER_CONTROL_IDS
    ]
    running.append(
        (Output("header-loading", "style"), {"display": "inline-block"}, {"display": "none"})
    )

    @app.callback(
        Output("dashboard-data", "data"),
        Input(*DATA_TRIGGER),
        State("client-id", "data"),
        running=running,
    )
    def load_dashboard_data(date_range, client_id):
        """Fetch and publish dashboard data on page load and on time period change."""
        from dash_app.data.queries import load_dashboard_data as run_fetch_cycle

        data = run_fetch_cycle(date_range, client_id)
        if data is None:
            # This session started a newer cycle while this one was running
            log.debug("Dropping superseded fetch cycle result")
            return no_update
        return data
