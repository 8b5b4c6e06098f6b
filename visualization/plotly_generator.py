"""
Plotly chart generation for the public health dashboard.

One builder per dashboard panel: COVID-19 trends (line), top affected
countries (grouped bar), continent distribution (pie) and vaccination
progress (grouped bar). All builders take the records from core.models and
share the layout defined in _base_layout().
"""

from typing import Sequence

import plotly.graph_objects as go

from core.models import ContinentEntry, CountryEntry, TrendPoint, VaccinePoint

# ---------------------------------------------------------------------------
# Shared styling constants
# ---------------------------------------------------------------------------

CHART_FONT_FAMILY = "Inter, system-ui, sans-serif"
CHART_TITLE_SIZE = 16
CHART_TITLE_COLOR = "#1F2937"
GRID_COLOR = "#E5E7EB"
ANNOTATION_COLOR = "#6B7280"
CHART_HEIGHT = 300

CASES_COLOR = "#8884D8"
DEATHS_COLOR = "#FF7300"
RECOVERED_COLOR = "#82CA9D"

PIE_PALETTE = [
    "#8884D8", "#82CA9D", "#FFC658", "#FF7300",
    "#0088FE", "#00C49F", "#FFBB28", "#FF8042",
]


def _base_layout(title: str = "", **overrides) -> dict:
    """Return a dict of shared Plotly layout properties.

    Args:
        title: Display title for the chart (empty for none).
        **overrides: Any key accepted by ``fig.update_layout()``; merged on top
            of the base dict.

    Returns:
        Dict ready to be unpacked into ``fig.update_layout(**layout)``.
    """
    layout = dict(
        title=dict(
            text=title,
            font=dict(
                family=CHART_FONT_FAMILY,
                size=CHART_TITLE_SIZE,
                color=CHART_TITLE_COLOR,
            ),
            x=0.5,
            xanchor="center",
        ),
        hoverlabel=dict(
            bgcolor="#FFFFFF",
            bordercolor="#D1D5DB",
            font=dict(family=CHART_FONT_FAMILY, size=13, color=CHART_TITLE_COLOR),
        ),
        legend=dict(
            orientation="h",
            yanchor="top",
            y=-0.15,
            xanchor="center",
            x=0.5,
            font=dict(family=CHART_FONT_FAMILY, size=11),
        ),
        margin=dict(t=30 if title else 10, l=20, r=30, b=60),
        height=CHART_HEIGHT,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        autosize=True,
        font=dict(family=CHART_FONT_FAMILY),
    )
    layout.update(overrides)
    return layout


def _axes(x_title: str = "") -> dict:
    return dict(
        xaxis=dict(title=x_title, gridcolor=GRID_COLOR, type="category"),
        yaxis=dict(gridcolor=GRID_COLOR, zeroline=True, zerolinecolor=GRID_COLOR),
    )


def empty_figure(message: str) -> go.Figure:
    """Return a blank figure with a centered message annotation."""
    fig = go.Figure()
    layout = _base_layout(
        xaxis={"visible": False},
        yaxis={"visible": False},
        margin={"t": 0, "l": 0, "r": 0, "b": 0},
    )
    layout["annotations"] = [
        {
            "text": message,
            "xref": "paper",
            "yref": "paper",
            "x": 0.5,
            "y": 0.5,
            "showarrow": False,
            "font": {"size": 14, "color": ANNOTATION_COLOR, "family": CHART_FONT_FAMILY},
            "xanchor": "center",
            "yanchor": "middle",
        }
    ]
    fig.update_layout(**layout)
    return fig


def create_trend_figure(points: Sequence[TrendPoint], title: str = "") -> go.Figure:
    """
    Create a line chart of cumulative cases, deaths and recovered by date.

    Args:
        points: TrendPoints in date order
        title: Optional chart title

    Returns:
        Plotly Figure with three Scatter traces.
    """
    if not points:
        return empty_figure("No trend data available.")

    dates = [p.date for p in points]
    series = [
        ("Cases", [p.cases for p in points], CASES_COLOR),
        ("Deaths", [p.deaths for p in points], DEATHS_COLOR),
        ("Recovered", [p.recovered for p in points], RECOVERED_COLOR),
    ]

    fig = go.Figure()
    for name, values, colour in series:
        fig.add_trace(go.Scatter(
            x=dates,
            y=values,
            mode="lines+markers",
            name=name,
            line=dict(color=colour, width=2, shape="spline"),
            marker=dict(color=colour, size=5),
            hovertemplate=f"<b>{name}</b><br>%{{x}}<br>%{{y:,.0f}}<extra></extra>",
        ))

    layout = _base_layout(title, hovermode="x unified")
    layout.update(_axes())
    fig.update_layout(**layout)
    return fig


def create_country_figure(entries: Sequence[CountryEntry], title: str = "") -> go.Figure:
    """
    Create a grouped bar chart of total cases and deaths per country.

    Hover shows the country name with both counts; the flag URL travels in
    customdata for components that want to render it.
    """
    if not entries:
        return empty_figure("No country data available.")

    names = [e.name for e in entries]
    customdata = [[e.name, e.cases, e.deaths, e.flag_url] for e in entries]
    hovertemplate = (
        "<b>%{customdata[0]}</b><br>"
        "Cases: %{customdata[1]:,}<br>"
        "Deaths: %{customdata[2]:,}<extra></extra>"
    )

    fig = go.Figure(data=[
        go.Bar(
            name="Total Cases",
            x=names,
            y=[e.cases for e in entries],
            marker_color=CASES_COLOR,
            customdata=customdata,
            hovertemplate=hovertemplate,
        ),
        go.Bar(
            name="Total Deaths",
            x=names,
            y=[e.deaths for e in entries],
            marker_color=DEATHS_COLOR,
            customdata=customdata,
            hovertemplate=hovertemplate,
        ),
    ])

    layout = _base_layout(title, barmode="group")
    layout.update(_axes())
    fig.update_layout(**layout)
    return fig


def create_continent_figure(entries: Sequence[ContinentEntry], title: str = "") -> go.Figure:
    """Create a pie chart of cumulative cases per continent."""
    if not entries:
        return empty_figure("No continent data available.")

    fig = go.Figure(data=[
        go.Pie(
            labels=[e.name for e in entries],
            values=[e.value for e in entries],
            marker=dict(colors=[PIE_PALETTE[i % len(PIE_PALETTE)] for i in range(len(entries))]),
            textinfo="value",
            hovertemplate="<b>%{label}</b><br>Cases: %{value:,}<br>%{percent}<extra></extra>",
            sort=False,
        )
    ])

    fig.update_layout(**_base_layout(title))
    return fig


def create_vaccine_figure(points: Sequence[VaccinePoint], title: str = "") -> go.Figure:
    """Create a grouped bar chart of doses administered against target."""
    if not points:
        return empty_figure("No vaccination data available.")

    dates = [p.date for p in points]
    fig = go.Figure(data=[
        go.Bar(
            name="Vaccines Administered",
            x=dates,
            y=[p.administered for p in points],
            marker_color=RECOVERED_COLOR,
            hovertemplate="<b>Administered</b><br>%{x}<br>%{y:,}<extra></extra>",
        ),
        go.Bar(
            name="Target",
            x=dates,
            y=[p.target for p in points],
            marker_color=CASES_COLOR,
            hovertemplate="<b>Target</b><br>%{x}<br>%{y:,}<extra></extra>",
        ),
    ])

    layout = _base_layout(title, barmode="group")
    layout.update(_axes())
    fig.update_layout(**layout)
    return fig
