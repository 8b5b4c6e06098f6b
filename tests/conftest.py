"""
Pytest configuration and fixtures for the test suite.

This module provides shared fixtures used across multiple test modules,
including canned disease.sh payloads and a fake requests.Session that
serves them without touching the network.
"""

import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock

import pytest
import requests

from config import ApiConfig
from data_processing.api_client import (
    CONTINENTS_PATH,
    COUNTRIES_PATH,
    GLOBAL_PATH,
    HISTORICAL_PATH,
    VACCINE_COVERAGE_PATH,
    DiseaseApiClient,
)

BASE_URL = "https://disease.test"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def global_payload() -> dict:
    """Body of GET /v3/covid-19/all."""
    return {
        "cases": 704753890,
        "deaths": 7010681,
        "recovered": 675619811,
        "active": 22123398,
        "population": 8000000000,
    }


@pytest.fixture
def countries_payload() -> list[dict]:
    """Body of GET /v3/covid-19/countries?sort=cases (already sorted desc)."""
    rows = [
        ("USA", 111820082, 1219487, "North America", "us"),
        ("India", 45035393, 533570, "Asia", "in"),
        ("France", 40138560, 167642, "Europe", "fr"),
        ("Germany", 38828995, 183027, "Europe", "de"),
        ("Brazil", 38743918, 711380, "South America", "br"),
        ("S. Korea", 34571873, 35934, "Asia", "kr"),
        ("Japan", 33803572, 74694, "Asia", "jp"),
    ]
    return [
        {
            "country": name,
            "cases": cases,
            "deaths": deaths,
            "continent": continent,
            "countryInfo": {"flag": f"https://disease.sh/assets/img/flags/{code}.png"},
        }
        for name, cases, deaths, continent, code in rows
    ]


@pytest.fixture
def historical_payload() -> dict:
    """Body of GET /v3/covid-19/historical/all (no recovered series, as today)."""
    return {
        "cases": {"1/1/25": 100, "1/2/25": 150, "1/3/25": 175},
        "deaths": {"1/1/25": 1, "1/2/25": 2, "1/3/25": 3},
    }


@pytest.fixture
def vaccine_payload() -> dict:
    """Body of GET /v3/covid-19/vaccine/coverage."""
    return {"1/1/25": 1000, "1/2/25": 2005, "1/3/25": 3000}


@pytest.fixture
def continents_payload() -> list[dict]:
    """Body of GET /v3/covid-19/continents."""
    return [
        {"continent": "North America", "cases": 131889132, "deaths": 1695941},
        {"continent": "Asia", "cases": 221500265, "deaths": 1553662},
        {"continent": "Europe", "cases": 253406198, "deaths": 2101824},
        {"continent": "South America", "cases": 70200879, "deaths": 1367952},
        {"continent": "Australia-Oceania", "cases": 14895771, "deaths": 33015},
        {"continent": "Africa", "cases": 12862398, "deaths": 258892},
    ]


@pytest.fixture
def api_payloads(
    global_payload, countries_payload, historical_payload, vaccine_payload, continents_payload
) -> dict:
    """All five endpoint bodies keyed by path."""
    return {
        GLOBAL_PATH: global_payload,
        COUNTRIES_PATH: countries_payload,
        HISTORICAL_PATH: historical_payload,
        VACCINE_COVERAGE_PATH: vaccine_payload,
        CONTINENTS_PATH: continents_payload,
    }


def make_response(payload=None, status_code: int = 200) -> MagicMock:
    """Build a stand-in for requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = payload
    return response


@pytest.fixture
def make_session(api_payloads):
    """
    Factory for fake sessions serving api_payloads.

    ``failures`` maps an endpoint path to either an HTTP status code or an
    exception instance to raise for that path.
    """

    def factory(failures=None) -> MagicMock:
        failures = failures or {}
        session = MagicMock(spec=requests.Session)

        def get(url, params=None, timeout=None):
            path = url[len(BASE_URL):]
            failure = failures.get(path)
            if isinstance(failure, BaseException):
                raise failure
            if failure is not None:
                return make_response(None, status_code=failure)
            return make_response(api_payloads[path])

        session.get.side_effect = get
        return session

    return factory


@pytest.fixture
def api_config() -> ApiConfig:
    return ApiConfig(base_url=BASE_URL, timeout_seconds=5)


@pytest.fixture
def client(make_session, api_config) -> DiseaseApiClient:
    """Client wired to a healthy fake session."""
    return DiseaseApiClient(api_config, session=make_session())


def requested_paths(session: MagicMock) -> list[str]:
    """Endpoint paths a fake session was asked for, in call order."""
    return [call.args[0][len(BASE_URL):] for call in session.get.call_args_list]
