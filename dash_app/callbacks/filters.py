"""Callbacks for filter state management."""
from dash import Input, Output

from core.models import FilterSelection


def build_app_state(disease, region, date_range) -> dict:
    """Combine the three filter control values into the app-state store payload."""
    return FilterSelection.from_dict({
        "disease": disease,
        "region": region,
        "date_range": date_range,
    }).to_dict()


def register_filter_callbacks(app):
    """Register filter state callbacks."""

    @app.callback(
        Output("app-state", "data"),
        Input("filter-disease", "value"),
        Input("filter-region", "value"),
        Input("filter-date-range", "value"),
    )
    def update_app_state(disease, region, date_range):
        """Mirror the filter controls into app-state."""
        return build_app_state(disease, region, date_range)
