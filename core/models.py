"""
Data models for the Public Health Statistics Dashboard.

Contains dataclasses for the chart-ready records produced by each fetch cycle,
the user's filter selection, and the view state published to the Dash layer.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


# Date-range codes offered by the time period control, in display order
DATE_RANGE_DAYS = {
    "7d": 7,
    "30d": 30,
    "90d": 90,
    "1y": 365,
}

DATE_RANGE_LABELS = {
    "7d": "Last 7 Days",
    "30d": "Last 30 Days",
    "90d": "Last 90 Days",
    "1y": "Last Year",
}

DEFAULT_DATE_RANGE = "7d"

# Any code outside DATE_RANGE_DAYS falls through to a full year
FALLBACK_DAYS = 365

PLACEHOLDER_VALUE = "..."


def days_for_range(date_range: Optional[str]) -> int:
    """Return the number of days of history requested for a date-range code."""
    return DATE_RANGE_DAYS.get(date_range or "", FALLBACK_DAYS)


@dataclass
class GlobalStats:
    """Headline figures for the spotlight cards. All values are display strings."""

    active_cases: str = PLACEHOLDER_VALUE
    recovered: str = PLACEHOLDER_VALUE
    deaths: str = PLACEHOLDER_VALUE
    vaccinations: str = PLACEHOLDER_VALUE


@dataclass
class CountryEntry:
    """One bar in the top affected countries chart."""

    name: str
    cases: int
    deaths: int
    flag_url: str = ""
    continent: str = ""


@dataclass
class TrendPoint:
    """Cumulative counts for a single date of the historical series."""

    date: str
    cases: int
    deaths: int = 0
    recovered: int = 0


@dataclass
class ContinentEntry:
    """One slice of the continent distribution pie."""

    name: str
    value: int


@dataclass
class VaccinePoint:
    """Cumulative doses for a single date, with the derived target."""

    date: str
    administered: int
    target: int


@dataclass
class FilterSelection:
    """
    Current state of the three filter controls.

    Only date_range drives data loading. Disease and region are applied
    afterwards as a display-only projection over the fetched data.
    """

    disease: str = "all"
    region: str = "all"
    date_range: str = DEFAULT_DATE_RANGE

    @property
    def days(self) -> int:
        """Number of days of history the date range requests."""
        return days_for_range(self.date_range)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "FilterSelection":
        data = data or {}
        return cls(
            disease=data.get("disease") or "all",
            region=data.get("region") or "all",
            date_range=data.get("date_range") or DEFAULT_DATE_RANGE,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DashboardState:
    """
    Everything the rendering layer needs from one fetch cycle.

    Serialises to plain dicts/lists so it can live in a dcc.Store.

    Attributes:
        global_stats: Headline figures for the spotlight cards
        countries: Top affected countries (at most five)
        trends: Historical cases/deaths/recovered series
        continents: Cumulative cases per continent
        vaccines: Vaccine coverage series with derived target
        loading: True while a fetch cycle is in flight
        error: User-facing message when the last cycle failed, else None
        days: Day count requested for the historical series
        generation: Fetch cycle number that produced this state
        fetched_at: ISO timestamp of when the cycle finished
    """

    global_stats: GlobalStats = field(default_factory=GlobalStats)
    countries: list[CountryEntry] = field(default_factory=list)
    trends: list[TrendPoint] = field(default_factory=list)
    continents: list[ContinentEntry] = field(default_factory=list)
    vaccines: list[VaccinePoint] = field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    days: int = DATE_RANGE_DAYS[DEFAULT_DATE_RANGE]
    generation: int = 0
    fetched_at: Optional[str] = None

    @property
    def has_error(self) -> bool:
        return bool(self.error)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "DashboardState":
        """Rebuild a state from its to_dict() form (e.g. dcc.Store data)."""
        if not data:
            return cls()
        return cls(
            global_stats=GlobalStats(**(data.get("global_stats") or {})),
            countries=[CountryEntry(**row) for row in data.get("countries") or []],
            trends=[TrendPoint(**row) for row in data.get("trends") or []],
            continents=[ContinentEntry(**row) for row in data.get("continents") or []],
            vaccines=[VaccinePoint(**row) for row in data.get("vaccines") or []],
            loading=bool(data.get("loading", False)),
            error=data.get("error"),
            days=data.get("days", DATE_RANGE_DAYS[DEFAULT_DATE_RANGE]),
            generation=data.get("generation", 0),
            fetched_at=data.get("fetched_at"),
        )
