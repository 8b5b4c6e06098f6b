"""
Test suite for the Public Health Statistics Dashboard.

This package contains unit tests for:
- Configuration and models (config/, core/)
- disease.sh client, transforms and fetch pipeline (data_processing/)
- Chart builders (visualization/)
- Dash callback helpers (dash_app/callbacks/)
"""
