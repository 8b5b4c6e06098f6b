"""Chart grid component: four chart cards, each a title, dcc.Graph and source line."""
from dash import html, dcc


# (chart id, title, source caption)
CHART_DEFINITIONS = [
    ("trends", "COVID-19 Trends", "Source: disease.sh COVID-19 API - Historical data"),
    ("countries", "Top Affected Countries", "Source: disease.sh API - Countries data"),
    ("continents", "Continent Distribution", "Source: disease.sh API - Cases by continent"),
    ("vaccines", "Vaccination Progress", "Source: disease.sh API - Vaccination data"),
]

GRAPH_CONFIG = {
    "displayModeBar": True,
    "displaylogo": False,
    "modeBarButtonsToRemove": [
        "lasso2d",
        "select2d",
    ],
}


def make_chart_grid():
    """Return the 2x2 chart grid wrapped in a loading spinner.

    A subtitle above the grid describes the active display filters.
    """
    return html.Section(
        className="chart-grid-section",
        **{"aria-label": "Dashboard charts"},
        children=[
            html.Div("All Diseases | All Regions", id="chart-subtitle", className="chart-grid__subtitle"),
            dcc.Loading(
                type="circle",
                color="#3B82F6",
                children=[
                    html.Div(
                        className="chart-grid",
                        children=[
                            make_chart_card(chart_id, title, source)
                            for chart_id, title, source in CHART_DEFINITIONS
                        ],
                    ),
                ],
            ),
        ],
    )


def make_chart_card(chart_id, title, source):
    """Return a single chart card with title, graph and source caption."""
    return html.Div(
        className="chart-card",
        children=[
            html.Div(title, className="chart-card__title"),
            dcc.Graph(
                id=f"chart-{chart_id}",
                responsive=True,
                style={"height": "300px"},
                config=GRAPH_CONFIG,
            ),
            html.Div(source, className="chart-card__source"),
        ],
    )
