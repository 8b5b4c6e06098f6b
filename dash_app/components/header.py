"""Top header bar component with dashboard title, data status and freshness."""
from dash import html


def make_header():
    """Return the top header with title, live/sample data badge and last-updated time."""
    return html.Header(
        className="top-header",
        children=[
            # Left: title and tagline
            html.Div(
                className="top-header__brand",
                children=[
                    html.H1("Public Health Statistics Dashboard", className="top-header__title"),
                    html.P(
                        "Real-time monitoring of disease spread and interventions",
                        className="top-header__subtitle",
                    ),
                ],
            ),

            # Right: data status (loading indicator + source badge + last updated)
            html.Div(
                className="top-header__right",
                children=[
                    html.Span(
                        "Loading...",
                        id="header-loading",
                        className="status-badge status-badge--loading",
                    ),
                    html.Span(
                        "...",
                        id="header-status-badge",
                        className="status-badge",
                    ),
                    html.Span(
                        children=[
                            "Last updated: ",
                            html.Span("...", id="header-last-updated"),
                        ],
                        className="top-header__updated",
                    ),
                ],
            ),
        ],
    )
