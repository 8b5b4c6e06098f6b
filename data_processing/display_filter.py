"""
Display-only projection of fetched dashboard data.

The disease and region selectors never reach the API. They narrow what is
already in a DashboardState, so changing them costs no network traffic.
"""

from dataclasses import replace
from typing import Optional

from core.models import DashboardState

DISEASE_OPTIONS = [
    {"label": "All Diseases", "value": "all"},
    {"label": "COVID-19", "value": "covid19"},
    {"label": "Influenza", "value": "influenza"},
]

REGION_OPTIONS = [
    {"label": "All Regions", "value": "all"},
    {"label": "North America", "value": "north"},
    {"label": "South America", "value": "south"},
    {"label": "Europe", "value": "europe"},
    {"label": "Asia", "value": "asia"},
    {"label": "Africa", "value": "africa"},
    {"label": "Oceania", "value": "oceania"},
]

# Region selector value -> continent name as disease.sh spells it
REGION_CONTINENTS = {
    "north": "North America",
    "south": "South America",
    "europe": "Europe",
    "asia": "Asia",
    "africa": "Africa",
    "oceania": "Australia-Oceania",
}

# The API only serves COVID-19 figures
DISEASES_WITH_DATA = {"all", "covid19"}


def disease_has_data(disease: Optional[str]) -> bool:
    return (disease or "all") in DISEASES_WITH_DATA


def region_continent(region: Optional[str]) -> Optional[str]:
    """Continent name for a region selector value, or None for all regions."""
    return REGION_CONTINENTS.get(region or "all")


def apply_display_filter(
    state: DashboardState,
    disease: Optional[str] = "all",
    region: Optional[str] = "all",
) -> DashboardState:
    """
    Return a copy of ``state`` narrowed to the selected disease and region.

    A disease without data empties every chart collection. A region keeps only
    the countries and continents on that continent; trend and vaccine series
    are global and stay as they are. Headline figures are never filtered, and
    a fallback state is shown whole whatever the region.
    """
    if not disease_has_data(disease):
        return replace(state, countries=[], trends=[], continents=[], vaccines=[])

    continent = region_continent(region)
    # Fallback sample rows carry no real geography
    if continent is None or state.has_error:
        return state

    return replace(
        state,
        countries=[c for c in state.countries if c.continent == continent],
        continents=[c for c in state.continents if c.name == continent],
    )
