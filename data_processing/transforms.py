"""
Response transforms for the dashboard fetch cycle.

Each function reshapes one disease.sh payload into the chart-ready records
defined in core.models. Malformed payloads raise DataAcquisitionError so that
a bad body is handled exactly like a failed request.
"""

import math
from typing import Any, Union

import pandas as pd

from core.models import ContinentEntry, CountryEntry, GlobalStats, TrendPoint, VaccinePoint
from data_processing.api_client import DataAcquisitionError

# Share of the world population assumed vaccinated (estimate, not sourced data)
VACCINATION_POPULATION_SHARE = 0.58

# Vaccine target is 10% above doses administered
VACCINE_TARGET_MULTIPLIER = 1.1

DEFAULT_TOP_COUNTRIES = 5


def format_count(value: Union[int, float]) -> str:
    """Format a count with thousands separators.

    Whole numbers print without decimals; fractional values keep up to three
    decimal places with trailing zeros stripped (1234.5 -> '1,234.5').
    """
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{int(value):,}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def to_global_stats(payload: Any) -> GlobalStats:
    """Build the spotlight figures from the /all payload."""
    try:
        return GlobalStats(
            active_cases=format_count(payload["active"]),
            recovered=format_count(payload["recovered"]),
            deaths=format_count(payload["deaths"]),
            vaccinations=format_count(payload["population"] * VACCINATION_POPULATION_SHARE),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DataAcquisitionError(f"Malformed global totals payload: {e!r}") from e


def to_country_entries(payload: Any, limit: int = DEFAULT_TOP_COUNTRIES) -> list[CountryEntry]:
    """Map the first ``limit`` country records (already sorted by cases)."""
    if not isinstance(payload, list):
        raise DataAcquisitionError("Malformed countries payload: expected a list")

    try:
        return [
            CountryEntry(
                name=record["country"],
                cases=int(record["cases"]),
                deaths=int(record["deaths"]),
                flag_url=(record.get("countryInfo") or {}).get("flag") or "",
                continent=record.get("continent") or "",
            )
            for record in payload[:limit]
        ]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DataAcquisitionError(f"Malformed countries payload: {e!r}") from e


def to_trend_points(payload: Any) -> list[TrendPoint]:
    """
    Build one TrendPoint per date key of the ``cases`` series.

    ``deaths`` and ``recovered`` are aligned onto the cases dates; a missing
    series or a missing date becomes 0. Output order follows the cases keys.
    """
    try:
        cases = payload["cases"]
        deaths = payload.get("deaths") or {}
        recovered = payload.get("recovered") or {}
    except (KeyError, TypeError, AttributeError) as e:
        raise DataAcquisitionError(f"Malformed historical payload: {e!r}") from e

    if not all(isinstance(series, dict) for series in (cases, deaths, recovered)):
        raise DataAcquisitionError("Malformed historical payload: series must be date mappings")

    try:
        frame = pd.DataFrame({
            "cases": pd.Series(cases, dtype="float64"),
            "deaths": pd.Series(deaths, dtype="float64"),
            "recovered": pd.Series(recovered, dtype="float64"),
        })
    except (TypeError, ValueError) as e:
        raise DataAcquisitionError(f"Malformed historical payload: {e!r}") from e

    # Building the frame unions (and may sort) the indexes; restore cases order
    frame = frame.reindex(list(cases.keys())).fillna(0)

    return [
        TrendPoint(
            date=str(row.Index),
            cases=int(row.cases),
            deaths=int(row.deaths),
            recovered=int(row.recovered),
        )
        for row in frame.itertuples()
    ]


def to_vaccine_points(payload: Any) -> list[VaccinePoint]:
    """Map each (date, doses) pair, deriving target = doses x 1.1 rounded."""
    if not isinstance(payload, dict):
        raise DataAcquisitionError("Malformed vaccine coverage payload: expected a date mapping")

    try:
        return [
            VaccinePoint(
                date=str(date),
                administered=int(doses),
                target=round_half_up(doses * VACCINE_TARGET_MULTIPLIER),
            )
            for date, doses in payload.items()
        ]
    except (TypeError, ValueError) as e:
        raise DataAcquisitionError(f"Malformed vaccine coverage payload: {e!r}") from e


def to_continent_entries(payload: Any) -> list[ContinentEntry]:
    """Map continent rollups to pie slices of cumulative cases."""
    if not isinstance(payload, list):
        raise DataAcquisitionError("Malformed continents payload: expected a list")

    try:
        return [
            ContinentEntry(name=record["continent"], value=int(record["cases"]))
            for record in payload
        ]
    except (KeyError, TypeError, ValueError) as e:
        raise DataAcquisitionError(f"Malformed continents payload: {e!r}") from e
