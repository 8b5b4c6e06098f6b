"""Error panel shown when the last fetch cycle fell back to sample data."""
from dash import html


def make_status_panel():
    """Return the error panel, hidden until a fetch cycle fails."""
    return html.Section(
        id="error-panel",
        className="error-panel",
        style={"display": "none"},
        role="alert",
        children=[
            html.H2("Error Loading Data", className="error-panel__title"),
            html.P(id="error-message", className="error-panel__message"),
            html.P("Showing fallback sample data instead.", className="error-panel__note"),
        ],
    )
