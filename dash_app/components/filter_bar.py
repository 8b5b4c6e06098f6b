"""Filter bar component: disease and region dropdowns plus the time period toggle."""
from dash import html, dcc
import dash_mantine_components as dmc

from core.models import DATE_RANGE_LABELS, DEFAULT_DATE_RANGE
from data_processing.display_filter import DISEASE_OPTIONS, REGION_OPTIONS


def make_filter_bar():
    """Return a filter bar with disease, region and time period controls.

    Disease and region narrow the charts client-side. Only the time period
    triggers a new fetch from the API. All three are disabled while a fetch
    cycle is running.
    """
    return html.Section(
        className="filter-bar",
        **{"aria-label": "Filters"},
        children=[
            # Disease filter
            html.Div(
                className="filter-bar__group",
                children=[
                    html.Span("Disease", className="filter-bar__label"),
                    dcc.Dropdown(
                        id="filter-disease",
                        options=DISEASE_OPTIONS,
                        value="all",
                        clearable=False,
                        searchable=False,
                        className="filter-dropdown",
                    ),
                ],
            ),
            # Region filter
            html.Div(
                className="filter-bar__group",
                children=[
                    html.Span("Region", className="filter-bar__label"),
                    dcc.Dropdown(
                        id="filter-region",
                        options=REGION_OPTIONS,
                        value="all",
                        clearable=False,
                        searchable=False,
                        className="filter-dropdown",
                    ),
                ],
            ),
            html.Div(className="filter-bar__divider"),
            # Time period toggle
            html.Div(
                className="filter-bar__group",
                children=[
                    html.Span("Time Period", className="filter-bar__label"),
                    dmc.SegmentedControl(
                        id="filter-date-range",
                        data=[
                            {"value": code, "label": label}
                            for code, label in DATE_RANGE_LABELS.items()
                        ],
                        value=DEFAULT_DATE_RANGE,
                        size="xs",
                    ),
                ],
            ),
        ],
    )
