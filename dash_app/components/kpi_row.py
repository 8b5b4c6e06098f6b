"""COVID-19 Spotlight component: 4 metric cards with callback-updatable values."""
from dash import html

from core.models import PLACEHOLDER_VALUE


def make_kpi_row():
    """Return the spotlight section with active cases, recovered, deaths and vaccinations."""
    return html.Section(
        id="spotlight",
        className="kpi-section",
        **{"aria-label": "COVID-19 Spotlight"},
        children=[
            html.H2("COVID-19 Spotlight", className="kpi-section__title"),
            html.Div(
                className="kpi-row",
                children=[
                    _kpi_card("Active Cases", "kpi-active-cases", modifier="kpi-card--blue"),
                    _kpi_card("Recovered", "kpi-recovered", modifier="kpi-card--green"),
                    _kpi_card("Deaths", "kpi-deaths", modifier="kpi-card--red"),
                    _kpi_card("Vaccinations", "kpi-vaccinations", modifier="kpi-card--purple"),
                ],
            ),
        ],
    )


def _kpi_card(label, value_id, modifier=None):
    """Build a single KPI card.

    Args:
        label: label text above the value
        value_id: HTML id for the value div (for callback Output)
        modifier: optional CSS modifier class (e.g. 'kpi-card--green')
    """
    card_class = "kpi-card"
    if modifier:
        card_class += f" {modifier}"

    return html.Div(
        className=card_class,
        children=[
            html.Div(label, className="kpi-card__label"),
            html.Div(PLACEHOLDER_VALUE, className="kpi-card__value", id=value_id),
        ],
    )
