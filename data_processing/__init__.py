"""
Data processing module for the Public Health Statistics Dashboard.

Fetches disease.sh statistics and reshapes them for the charts.

Submodules:
    api_client: HTTP client for the five disease.sh endpoints
    transforms: Payload -> chart-ready record conversion
    fallback: Static sample dataset used when a fetch cycle fails
    pipeline: Fetch cycle orchestration with all-or-nothing fallback
    display_filter: Disease/region projection over fetched data
"""

from data_processing.api_client import DataAcquisitionError, DiseaseApiClient
from data_processing.display_filter import apply_display_filter
from data_processing.pipeline import DataAcquisitionPipeline

__all__ = [
    "DataAcquisitionError",
    "DiseaseApiClient",
    "DataAcquisitionPipeline",
    "apply_display_filter",
]
