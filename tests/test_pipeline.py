"""
Tests for data_processing/pipeline.py - DataAcquisitionPipeline.

Tests cover:
- Successful cycles in sequential and parallel mode
- All-or-nothing fallback when any step fails
- Loading flag and error state transitions
- Date-range code to day-count mapping
- Superseded cycles not committing their result, per client
- A separate HTTP session for every fetch step
"""

import threading
from unittest.mock import MagicMock

import pytest
import requests

from config import ApiConfig
from core.models import DashboardState
from data_processing.api_client import (
    CONTINENTS_PATH,
    COUNTRIES_PATH,
    GLOBAL_PATH,
    HISTORICAL_PATH,
    VACCINE_COVERAGE_PATH,
    DiseaseApiClient,
)
from data_processing.fallback import (
    FALLBACK_ERROR_MESSAGE,
    fallback_continents,
    fallback_countries,
    fallback_global_stats,
    fallback_trends,
    fallback_vaccines,
)
from data_processing.pipeline import DataAcquisitionPipeline
from tests.conftest import make_response, requested_paths

ALL_PATHS = [GLOBAL_PATH, COUNTRIES_PATH, HISTORICAL_PATH, VACCINE_COVERAGE_PATH, CONTINENTS_PATH]


@pytest.fixture(params=[False, True], ids=["sequential", "parallel"])
def parallel(request) -> bool:
    return request.param


def build_pipeline(session, parallel: bool) -> DataAcquisitionPipeline:
    client = DiseaseApiClient(ApiConfig(base_url="https://disease.test"), session=session)
    return DataAcquisitionPipeline(client, parallel=parallel)


def assert_is_fallback(state: DashboardState):
    assert state.global_stats == fallback_global_stats()
    assert state.countries == fallback_countries()
    assert state.trends == fallback_trends()
    assert state.vaccines == fallback_vaccines()
    assert state.continents == fallback_continents()


class TestSuccessfulCycle:
    """A cycle where all five requests succeed."""

    def test_publishes_all_collections(self, make_session, parallel):
        """Every collection is non-empty when every payload is."""
        pipeline = build_pipeline(make_session(), parallel)

        state = pipeline.run("7d")

        assert state is not None
        assert state.global_stats.active_cases == "22,123,398"
        assert len(state.countries) == 5
        assert len(state.trends) == 3
        assert len(state.vaccines) == 3
        assert len(state.continents) == 6

    def test_clears_loading_and_error(self, make_session, parallel):
        state = build_pipeline(make_session(), parallel).run("7d")
        assert state.loading is False
        assert state.error is None

    def test_requests_all_five_endpoints(self, make_session, parallel):
        session = make_session()
        build_pipeline(session, parallel).run("7d")
        assert sorted(requested_paths(session)) == sorted(ALL_PATHS)

    def test_sequential_order(self, make_session):
        """Sequential mode fetches in the fixed step order."""
        session = make_session()
        build_pipeline(session, parallel=False).run("7d")
        assert requested_paths(session) == ALL_PATHS

    def test_no_none_numeric_fields(self, make_session, parallel):
        """Chart-ready fields are always populated."""
        state = build_pipeline(make_session(), parallel).run("30d")
        for point in state.trends:
            assert None not in (point.cases, point.deaths, point.recovered)
        for point in state.vaccines:
            assert None not in (point.administered, point.target)

    def test_committed_state_matches_return(self, make_session, parallel):
        pipeline = build_pipeline(make_session(), parallel)
        state = pipeline.run("7d")
        assert pipeline.state == state
        assert state.generation == pipeline.generation == 1
        assert state.fetched_at is not None

    def test_previous_error_cleared_by_success(self, make_session):
        """A good cycle after a failed one publishes real data and no error."""
        failing = make_session({GLOBAL_PATH: 503})
        pipeline = build_pipeline(failing, parallel=False)
        assert pipeline.run("7d").error == FALLBACK_ERROR_MESSAGE

        pipeline._client = DiseaseApiClient(
            ApiConfig(base_url="https://disease.test"), session=make_session()
        )
        state = pipeline.run("7d")
        assert state.error is None
        assert state.countries[0].name == "USA"


class TestFallback:
    """Any single failure replaces every collection with the fallback dataset."""

    def test_second_fetch_failure(self, make_session):
        """HTTP 500 on countries aborts steps 3-5 and publishes the fallback."""
        session = make_session({COUNTRIES_PATH: 500})
        state = build_pipeline(session, parallel=False).run("7d")

        assert state.loading is False
        assert state.error == FALLBACK_ERROR_MESSAGE
        assert_is_fallback(state)
        assert requested_paths(session) == [GLOBAL_PATH, COUNTRIES_PATH]

    @pytest.mark.parametrize("failing_path", ALL_PATHS)
    def test_any_step_failure(self, make_session, parallel, failing_path):
        session = make_session({failing_path: 500})
        state = build_pipeline(session, parallel).run("7d")
        assert state.error == FALLBACK_ERROR_MESSAGE
        assert_is_fallback(state)

    def test_network_error(self, make_session, parallel):
        session = make_session({HISTORICAL_PATH: requests.ConnectionError("down")})
        state = build_pipeline(session, parallel).run("90d")
        assert_is_fallback(state)
        assert state.days == 90

    def test_malformed_payload(self, make_session, api_payloads, parallel):
        """A well-formed response with the wrong shape is a failure too."""
        api_payloads[CONTINENTS_PATH] = {"message": "Not found"}
        state = build_pipeline(make_session(), parallel).run("7d")
        assert_is_fallback(state)

    def test_fallback_is_identical_across_failures(self, make_session):
        """The same fixed dataset is published every time."""
        pipeline = build_pipeline(make_session({GLOBAL_PATH: 500}), parallel=False)
        first = pipeline.run("7d")
        second = pipeline.run("7d")
        assert first.to_dict() | {"generation": 0, "fetched_at": None} == \
            second.to_dict() | {"generation": 0, "fetched_at": None}


class TestLoadingFlag:
    """The loading flag is raised for the duration of a cycle."""

    def test_loading_true_while_fetching(self, make_session, api_payloads):
        session = make_session()
        pipeline = build_pipeline(session, parallel=False)
        seen = []
        original = session.get.side_effect

        def get(url, params=None, timeout=None):
            seen.append(pipeline.state.loading)
            return original(url, params=params, timeout=timeout)

        session.get.side_effect = get
        state = pipeline.run("7d")

        assert seen and all(seen)
        assert state.loading is False
        assert pipeline.state.loading is False

    def test_loading_cleared_on_failure(self, make_session):
        pipeline = build_pipeline(make_session({VACCINE_COVERAGE_PATH: 502}), parallel=False)
        pipeline.run("7d")
        assert pipeline.state.loading is False


class TestDateRange:
    """The date-range code controls the historical request only."""

    @pytest.mark.parametrize("code, days", [("7d", 7), ("30d", 30), ("90d", 90), ("1y", 365)])
    def test_day_count_sent(self, make_session, code, days):
        session = make_session()
        state = build_pipeline(session, parallel=False).run(code)

        historical = [
            call for call in session.get.call_args_list if call.args[0].endswith(HISTORICAL_PATH)
        ]
        assert historical[0].kwargs["params"] == {"lastdays": days}
        assert state.days == days

    def test_unknown_code_requests_a_year(self, make_session):
        state = build_pipeline(make_session(), parallel=False).run("bogus")
        assert state.days == 365

    def test_vaccine_window_is_fixed(self, make_session):
        """Vaccine coverage always asks for 30 days, whatever the range."""
        session = make_session()
        build_pipeline(session, parallel=False).run("1y")
        vaccine = [
            call for call in session.get.call_args_list
            if call.args[0].endswith(VACCINE_COVERAGE_PATH)
        ]
        assert vaccine[0].kwargs["params"] == {"lastdays": 30}

    def test_changing_range_reruns_with_new_days(self, make_session):
        """Switching 7d -> 30d runs a second cycle with 30 days."""
        session = make_session()
        pipeline = build_pipeline(session, parallel=False)
        pipeline.run("7d")
        state = pipeline.run("30d")

        historical = [
            call.kwargs["params"]["lastdays"]
            for call in session.get.call_args_list
            if call.args[0].endswith(HISTORICAL_PATH)
        ]
        assert historical == [7, 30]
        assert state.generation == 2


class TestSupersededCycles:
    """Only the most recently started cycle commits."""

    def test_stale_cycle_is_discarded(self, make_session):
        """A slow 7d cycle finishing after a 30d cycle does not overwrite it."""
        session = make_session()
        original = session.get.side_effect
        pipeline = build_pipeline(session, parallel=False)

        slow_started = threading.Event()
        release_slow = threading.Event()

        def get(url, params=None, timeout=None):
            if url.endswith(HISTORICAL_PATH) and params == {"lastdays": 7}:
                slow_started.set()
                release_slow.wait(timeout=5)
            return original(url, params=params, timeout=timeout)

        session.get.side_effect = get

        results = {}
        slow = threading.Thread(target=lambda: results.update(slow=pipeline.run("7d")))
        slow.start()
        assert slow_started.wait(timeout=5)

        results["fast"] = pipeline.run("30d")
        release_slow.set()
        slow.join(timeout=5)

        assert results["slow"] is None
        assert results["fast"].days == 30
        assert pipeline.state.days == 30
        assert pipeline.state.generation == 2

    def test_is_current(self, make_session):
        pipeline = build_pipeline(make_session(), parallel=False)
        pipeline.run("7d")
        assert pipeline.is_current(1)
        pipeline.run("7d")
        assert not pipeline.is_current(1)

    def test_other_client_does_not_supersede(self, make_session):
        """A cycle started by another client leaves this client's cycle current."""
        session = make_session()
        original = session.get.side_effect
        pipeline = build_pipeline(session, parallel=False)

        slow_started = threading.Event()
        release_slow = threading.Event()

        def get(url, params=None, timeout=None):
            if url.endswith(HISTORICAL_PATH) and not slow_started.is_set():
                slow_started.set()
                release_slow.wait(timeout=5)
            return original(url, params=params, timeout=timeout)

        session.get.side_effect = get

        results = {}
        slow = threading.Thread(
            target=lambda: results.update(a=pipeline.run("7d", client_id="tab-a"))
        )
        slow.start()
        assert slow_started.wait(timeout=5)

        results["b"] = pipeline.run("30d", client_id="tab-b")
        release_slow.set()
        slow.join(timeout=5)

        assert results["a"] is not None and results["a"].days == 7
        assert results["b"] is not None and results["b"].days == 30
        assert pipeline.state_for("tab-a").days == 7
        assert pipeline.generation_for("tab-a") == pipeline.generation_for("tab-b") == 1

    def test_unknown_client_has_initial_state(self, make_session):
        pipeline = build_pipeline(make_session(), parallel=False)
        pipeline.run("7d", client_id="tab-a")
        assert pipeline.state_for("tab-b") == DashboardState()
        assert pipeline.generation_for("tab-b") == 0


class TestSessionsPerStep:
    """No requests.Session is shared between fetch steps."""

    @pytest.fixture
    def sessions(self, monkeypatch, api_payloads):
        created = []
        real_session = requests.Session

        def new_session():
            session = MagicMock(spec=real_session)
            session.get.side_effect = lambda url, params=None, timeout=None: make_response(
                api_payloads[url[len("https://disease.test"):]]
            )
            created.append(session)
            return session

        monkeypatch.setattr(requests, "Session", new_session)
        return created

    def test_each_step_gets_its_own_session(self, sessions, parallel):
        client = DiseaseApiClient(ApiConfig(base_url="https://disease.test"))
        state = DataAcquisitionPipeline(client, parallel=parallel).run("7d")

        assert state.error is None
        # One session for the pipeline's client, one per step
        assert len(sessions) == 1 + len(ALL_PATHS)
        assert sessions[0].get.call_count == 0
        for session in sessions[1:]:
            assert session.get.call_count == 1
            session.close.assert_called_once()
