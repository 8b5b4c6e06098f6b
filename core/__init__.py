"""
Core module for the Public Health Statistics Dashboard.

Contains the data models and shared utilities used across the application.
"""

from core.models import (
    DATE_RANGE_DAYS,
    ContinentEntry,
    CountryEntry,
    DashboardState,
    FilterSelection,
    GlobalStats,
    TrendPoint,
    VaccinePoint,
    days_for_range,
)
from core.logging_config import setup_logging, get_logger

__all__ = [
    "DATE_RANGE_DAYS",
    "ContinentEntry",
    "CountryEntry",
    "DashboardState",
    "FilterSelection",
    "GlobalStats",
    "TrendPoint",
    "VaccinePoint",
    "days_for_range",
    "setup_logging",
    "get_logger",
]
