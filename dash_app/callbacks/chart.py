"""Callbacks for rendering the four dashboard charts."""
from dash import Input, Output, no_update

from core.models import DATE_RANGE_LABELS
from dash_app.data.queries import filtered_state
from data_processing.display_filter import DISEASE_OPTIONS, REGION_OPTIONS, disease_has_data
from visualization.plotly_generator import (
    create_continent_figure,
    create_country_figure,
    create_trend_figure,
    create_vaccine_figure,
    empty_figure,
)

_DISEASE_LABELS = {option["value"]: option["label"] for option in DISEASE_OPTIONS}
_REGION_LABELS = {option["value"]: option["label"] for option in REGION_OPTIONS}


def generate_chart_subtitle(disease, region, date_range=None):
    """Describe the active display filters, e.g. 'COVID-19 | Europe | Last 30 Days'."""
    parts = [
        _DISEASE_LABELS.get(disease or "all", "All Diseases"),
        _REGION_LABELS.get(region or "all", "All Regions"),
    ]
    if date_range in DATE_RANGE_LABELS:
        parts.append(DATE_RANGE_LABELS[date_range])
    return " | ".join(parts)


def build_figures(data, disease, region):
    """Return the trend, country, continent and vaccine figures for stored state.

    Disease and region are applied here, after acquisition, and never cause
    a fetch.
    """
    if not disease_has_data(disease):
        label = _DISEASE_LABELS.get(disease, disease)
        message = f"No {label} data available from disease.sh."
        return tuple(empty_figure(message) for _ in range(4))

    state = filtered_state(data, disease, region)
    return (
        create_trend_figure(state.trends),
        create_country_figure(state.countries),
        create_continent_figure(state.continents),
        create_vaccine_figure(state.vaccines),
    )


def register_chart_callbacks(app):
    """Register chart rendering callbacks."""

    @app.callback(
        Output("chart-trends", "figure"),
        Output("chart-countries", "figure"),
        Output("chart-continents", "figure"),
        Output("chart-vaccines", "figure"),
        Output("chart-subtitle", "children"),
        Input("dashboard-data", "data"),
        Input("filter-disease", "value"),
        Input("filter-region", "value"),
        Input("app-state", "data"),
    )
    def update_charts(data, disease, region, app_state):
        """Render every chart from the published state and the display filters."""
        date_range = (app_state or {}).get("date_range")
        subtitle = generate_chart_subtitle(disease, region, date_range)

        if not data:
            return no_update, no_update, no_update, no_update, subtitle

        return (*build_figures(data, disease, region), subtitle)
