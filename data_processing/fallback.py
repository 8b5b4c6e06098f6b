"""Static sample data shown in place of every chart when a fetch cycle fails."""

from core.models import ContinentEntry, CountryEntry, GlobalStats, TrendPoint, VaccinePoint

FALLBACK_ERROR_MESSAGE = "Failed to load data from disease.sh API. Please try again later."

_GLOBAL_STATS = {
    "active_cases": "14,392",
    "recovered": "1,245,876",
    "deaths": "8,723",
    "vaccinations": "4,523,156",
}

_TRENDS = [
    ("Jan", 2400, 240, 1800),
    ("Feb", 1398, 139, 1210),
    ("Mar", 9800, 980, 7290),
    ("Apr", 3908, 391, 3000),
    ("May", 4800, 480, 4181),
    ("Jun", 3800, 380, 3500),
    ("Jul", 4300, 430, 4100),
]

_COUNTRIES = [
    ("North", 4000, 240),
    ("South", 3000, 139),
    ("East", 2000, 98),
    ("West", 2780, 390),
    ("Central", 1890, 480),
]

_VACCINES = [
    ("Jan", 4000, 6000),
    ("Feb", 5000, 6000),
    ("Mar", 5800, 6000),
    ("Apr", 5900, 6000),
    ("May", 6100, 6000),
    ("Jun", 6300, 6000),
    ("Jul", 7000, 6000),
]

_CONTINENTS = [
    ("North America", 4000),
    ("South America", 3000),
    ("Europe", 2780),
    ("Asia", 2000),
    ("Africa", 1890),
    ("Australia-Oceania", 500),
]


def fallback_global_stats() -> GlobalStats:
    return GlobalStats(**_GLOBAL_STATS)


def fallback_trends() -> list[TrendPoint]:
    return [TrendPoint(date, cases, deaths, recovered) for date, cases, deaths, recovered in _TRENDS]


def fallback_countries() -> list[CountryEntry]:
    return [CountryEntry(name=name, cases=cases, deaths=deaths) for name, cases, deaths in _COUNTRIES]


def fallback_vaccines() -> list[VaccinePoint]:
    return [VaccinePoint(date, administered, target) for date, administered, target in _VACCINES]


def fallback_continents() -> list[ContinentEntry]:
    return [ContinentEntry(name, value) for name, value in _CONTINENTS]
