"""
Thin wrapper around the shared data acquisition pipeline.

Builds one pipeline per process from config/dashboard.toml and delegates to
the functions in data_processing/.
"""

from typing import Optional

from config import get_dashboard_config
from core.models import DashboardState
from data_processing.api_client import DiseaseApiClient
from data_processing.display_filter import apply_display_filter
from data_processing.pipeline import DEFAULT_CLIENT_ID, DataAcquisitionPipeline

_pipeline: Optional[DataAcquisitionPipeline] = None


def get_pipeline() -> DataAcquisitionPipeline:
    """Return the process-wide pipeline, creating it on first use."""
    global _pipeline
    if _pipeline is None:
        config = get_dashboard_config()
        _pipeline = DataAcquisitionPipeline(
            DiseaseApiClient(config.api),
            parallel=config.pipeline.parallel,
            max_workers=config.pipeline.max_workers,
            vaccine_days=config.api.vaccine_lastdays,
            top_countries=config.api.top_countries,
        )
    return _pipeline


def set_pipeline(pipeline: Optional[DataAcquisitionPipeline]) -> None:
    """Replace the process-wide pipeline (None rebuilds it from config on next use)."""
    global _pipeline
    _pipeline = pipeline


def load_dashboard_data(
    date_range: Optional[str],
    client_id: Optional[str] = None,
) -> Optional[dict]:
    """Run a fetch cycle for one browser session.

    Returns the state as a dict, or None if that session started a newer cycle
    in the meantime.
    """
    state = get_pipeline().run(date_range, client_id=client_id or DEFAULT_CLIENT_ID)
    return state.to_dict() if state is not None else None


def filtered_state(data: Optional[dict], disease: Optional[str], region: Optional[str]) -> DashboardState:
    """Rebuild the stored state and apply the disease/region display filter."""
    return apply_display_filter(DashboardState.from_dict(data), disease, region)
