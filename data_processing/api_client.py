"""
disease.sh API client for the Public Health Statistics Dashboard.

Wraps the five public COVID-19 endpoints the dashboard reads. Every failure
(network error, non-2xx status, undecodable body) surfaces as a single
DataAcquisitionError so the pipeline can treat them uniformly.

Usage:
    from data_processing.api_client import DiseaseApiClient

    with DiseaseApiClient() as client:
        totals = client.get_global()
        history = client.get_historical(30)
"""

from typing import Any, Optional

import requests

from config import ApiConfig, get_dashboard_config
from core.logging_config import get_logger

logger = get_logger(__name__)

GLOBAL_PATH = "/v3/covid-19/all"
COUNTRIES_PATH = "/v3/covid-19/countries"
HISTORICAL_PATH = "/v3/covid-19/historical/all"
VACCINE_COVERAGE_PATH = "/v3/covid-19/vaccine/coverage"
CONTINENTS_PATH = "/v3/covid-19/continents"


class DataAcquisitionError(Exception):
    """Raised when any dashboard data could not be fetched or understood."""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        super().__init__(message)
        self.endpoint = endpoint


class DiseaseApiClient:
    """
    Thin HTTP client for the disease.sh COVID-19 API.

    No authentication and no retries. A timeout is applied only when one is
    configured.

    Attributes:
        base_url: Scheme and host of the API, without a trailing slash
        timeout: Seconds per request, or None to wait indefinitely
    """

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Optional ApiConfig. If not provided, loads from
                    config/dashboard.toml using get_dashboard_config().
            session: Optional requests.Session to reuse (tests inject a fake).
        """
        self._config = config or get_dashboard_config().api
        self._session = session or requests.Session()
        self._owns_session = session is None

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    @property
    def timeout(self) -> Optional[float]:
        return self._config.timeout

    def _get(self, path: str, params: Optional[dict] = None) -> Any:
        """GET a path and return the decoded JSON body."""
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} params={params}")

        try:
            response = self._session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise DataAcquisitionError(f"Request to {path} failed: {e}", endpoint=path) from e

        if not response.ok:
            raise DataAcquisitionError(
                f"Request to {path} returned HTTP {response.status_code}",
                endpoint=path,
            )

        try:
            return response.json()
        except ValueError as e:
            raise DataAcquisitionError(f"Response from {path} is not valid JSON", endpoint=path) from e

    def get_global(self) -> dict:
        """Aggregate global totals (active, recovered, deaths, population)."""
        return self._get(GLOBAL_PATH)

    def get_countries(self) -> list:
        """All countries, sorted server-side by total cases descending."""
        return self._get(COUNTRIES_PATH, params={"sort": "cases"})

    def get_historical(self, days: int) -> dict:
        """Global cumulative cases/deaths/recovered for the last ``days`` days."""
        return self._get(HISTORICAL_PATH, params={"lastdays": days})

    def get_vaccine_coverage(self, days: int = 30) -> dict:
        """Global cumulative vaccine doses keyed by date."""
        return self._get(VACCINE_COVERAGE_PATH, params={"lastdays": days})

    def get_continents(self) -> list:
        """Per-continent rollups."""
        return self._get(CONTINENTS_PATH)

    def fork(self) -> "DiseaseApiClient":
        """
        Return a client with the same settings for use on another thread.

        requests does not guarantee a Session is thread-safe, so a client that
        manages its own session hands out a fresh one. An injected session is
        the caller's responsibility and is shared as-is.
        """
        if self._owns_session:
            return DiseaseApiClient(self._config)
        return DiseaseApiClient(self._config, session=self._session)

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "DiseaseApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
