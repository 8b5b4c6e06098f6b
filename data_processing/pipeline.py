"""
Data acquisition pipeline for the dashboard.

One fetch cycle pulls the five disease.sh endpoints, reshapes each response
into chart-ready records, and commits a DashboardState. The cycle is
all-or-nothing: if any step fails, every collection is replaced by the static
fallback dataset and an error message is published.

Cycles are numbered per client (one browser session). Only the most recently
started cycle of a client may commit its result; an older cycle of the same
client that finishes late is discarded. Cycles of different clients never
affect each other.
"""

import threading
from collections import OrderedDict
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Optional

from core.logging_config import get_logger
from core.models import DashboardState, days_for_range
from data_processing.api_client import DiseaseApiClient
from data_processing.fallback import (
    FALLBACK_ERROR_MESSAGE,
    fallback_continents,
    fallback_countries,
    fallback_global_stats,
    fallback_trends,
    fallback_vaccines,
)
from data_processing.transforms import (
    DEFAULT_TOP_COUNTRIES,
    to_continent_entries,
    to_country_entries,
    to_global_stats,
    to_trend_points,
    to_vaccine_points,
)

logger = get_logger(__name__)

# Step names double as DashboardState field names
STEP_NAMES = ("global_stats", "countries", "trends", "vaccines", "continents")

DEFAULT_CLIENT_ID = "default"

# Least recently active clients are forgotten beyond this many
MAX_TRACKED_CLIENTS = 1024

Step = Callable[[DiseaseApiClient], Any]


class DataAcquisitionPipeline:
    """
    Runs fetch cycles against a DiseaseApiClient and holds the committed state
    of each client.

    Every step runs on a forked client, so no requests.Session is shared
    between threads.

    Attributes:
        parallel: Issue the five requests concurrently instead of one by one
        max_workers: Thread pool size for parallel cycles
        vaccine_days: Days of vaccine coverage to request
        top_countries: Number of countries kept for the bar chart
    """

    def __init__(
        self,
        client: DiseaseApiClient,
        parallel: bool = True,
        max_workers: int = len(STEP_NAMES),
        vaccine_days: int = 30,
        top_countries: int = DEFAULT_TOP_COUNTRIES,
    ):
        self._client = client
        self.parallel = parallel
        self.max_workers = max_workers
        self.vaccine_days = vaccine_days
        self.top_countries = top_countries

        self._lock = threading.Lock()
        # client id -> (generation, committed state), oldest activity first
        self._cycles: OrderedDict[str, tuple[int, DashboardState]] = OrderedDict()

    def state_for(self, client_id: str = DEFAULT_CLIENT_ID) -> DashboardState:
        """The last committed view state of a client."""
        with self._lock:
            return self._cycles.get(client_id, (0, DashboardState()))[1]

    def generation_for(self, client_id: str = DEFAULT_CLIENT_ID) -> int:
        """Number of the most recently started cycle of a client."""
        with self._lock:
            return self._cycles.get(client_id, (0, None))[0]

    @property
    def state(self) -> DashboardState:
        return self.state_for()

    @property
    def generation(self) -> int:
        return self.generation_for()

    def is_current(self, generation: int, client_id: str = DEFAULT_CLIENT_ID) -> bool:
        """Return True if the client has not started a newer cycle since ``generation``."""
        return generation == self.generation_for(client_id)

    def _steps(self, days: int) -> list[tuple[str, Step]]:
        """Fetch-and-transform callables, in the order a sequential cycle runs them."""
        return [
            ("global_stats", lambda c: to_global_stats(c.get_global())),
            ("countries", lambda c: to_country_entries(c.get_countries(), self.top_countries)),
            ("trends", lambda c: to_trend_points(c.get_historical(days))),
            ("vaccines", lambda c: to_vaccine_points(c.get_vaccine_coverage(self.vaccine_days))),
            ("continents", lambda c: to_continent_entries(c.get_continents())),
        ]

    def _run_step(self, step: Step) -> Any:
        with self._client.fork() as client:
            return step(client)

    def _run_sequential(self, steps: list[tuple[str, Step]]) -> dict[str, Any]:
        # The first failing step raises and the remaining steps never run
        return {name: self._run_step(step) for name, step in steps}

    def _run_parallel(self, steps: list[tuple[str, Step]]) -> dict[str, Any]:
        results = {}
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="fetch") as executor:
            futures = {executor.submit(self._run_step, step): name for name, step in steps}
            try:
                for future in as_completed(futures):
                    results[futures[future]] = future.result()
            except Exception:
                for future in futures:
                    future.cancel()
                raise
        return results

    def _store(self, client_id: str, generation: int, state: DashboardState) -> None:
        # Caller holds the lock
        self._cycles[client_id] = (generation, state)
        self._cycles.move_to_end(client_id)
        while len(self._cycles) > MAX_TRACKED_CLIENTS:
            self._cycles.popitem(last=False)

    def _begin_cycle(self, client_id: str, days: int) -> int:
        with self._lock:
            generation, state = self._cycles.get(client_id, (0, DashboardState()))
            generation += 1
            self._store(client_id, generation, replace(state, loading=True, days=days))
            return generation

    def _commit(self, client_id: str, generation: int, state: DashboardState) -> bool:
        with self._lock:
            current = self._cycles.get(client_id)
            # A client evicted mid-cycle has no newer cycle to lose to
            if current is not None and current[0] != generation:
                return False
            self._store(client_id, generation, state)
            return True

    def run(
        self,
        date_range: Optional[str],
        client_id: str = DEFAULT_CLIENT_ID,
    ) -> Optional[DashboardState]:
        """
        Run one fetch cycle for a date-range code.

        Args:
            date_range: One of "7d", "30d", "90d", "1y". Anything else requests
                        a full year of history.
            client_id: Browser session the cycle belongs to.

        Returns:
            The committed DashboardState, or None if the same client started a
            newer cycle while this one was in flight (its result is discarded).
        """
        days = days_for_range(date_range)
        generation = self._begin_cycle(client_id, days)
        cycle = f"{client_id}#{generation}"
        mode = "parallel" if self.parallel else "sequential"
        logger.info(f"Fetch cycle {cycle} started ({mode}, {days} days)")

        steps = self._steps(days)
        try:
            if self.parallel:
                results = self._run_parallel(steps)
            else:
                results = self._run_sequential(steps)
        except Exception:
            logger.exception(f"Fetch cycle {cycle} failed; showing fallback data")
            state = DashboardState(
                global_stats=fallback_global_stats(),
                countries=fallback_countries(),
                trends=fallback_trends(),
                continents=fallback_continents(),
                vaccines=fallback_vaccines(),
                loading=False,
                error=FALLBACK_ERROR_MESSAGE,
                days=days,
                generation=generation,
                fetched_at=datetime.now().isoformat(timespec="seconds"),
            )
        else:
            state = DashboardState(
                **results,
                loading=False,
                error=None,
                days=days,
                generation=generation,
                fetched_at=datetime.now().isoformat(timespec="seconds"),
            )

        if not self._commit(client_id, generation, state):
            logger.info(f"Fetch cycle {cycle} superseded; result discarded")
            return None

        logger.info(
            f"Fetch cycle {cycle} finished: "
            f"{len(state.trends)} trend points, {len(state.countries)} countries, "
            f"{len(state.vaccines)} vaccine points, {len(state.continents)} continents"
        )
        return state
