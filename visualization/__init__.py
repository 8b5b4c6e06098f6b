"""
Visualization package for dashboard charts.

This package contains functions for generating interactive Plotly visualizations:
- plotly_generator: Create the trend, country, continent and vaccine figures
"""

from visualization.plotly_generator import (
    create_continent_figure,
    create_country_figure,
    create_trend_figure,
    create_vaccine_figure,
    empty_figure,
)

__all__ = [
    "create_continent_figure",
    "create_country_figure",
    "create_trend_figure",
    "create_vaccine_figure",
    "empty_figure",
]
