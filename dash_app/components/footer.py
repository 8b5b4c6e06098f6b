"""Page footer component."""
from dash import html


def make_footer():
    """Build the page footer with data source attribution."""
    return html.Footer(
        className="page-footer",
        children=[
            html.P("Data source: disease.sh Open API"),
            html.P([
                "Public Health Monitor • ",
                html.A(
                    "Using disease.sh API",
                    href="https://disease.sh/",
                    target="_blank",
                    rel="noopener noreferrer",
                ),
            ]),
        ],
    )
