"""
Configuration module for the Public Health Statistics Dashboard.

This module provides access to configuration settings loaded from TOML files.
Primary configuration file: config/dashboard.toml

Usage:
    from config import get_dashboard_config

    config = get_dashboard_config()
    print(config.api.base_url)
    print(config.pipeline.parallel)
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class ApiConfig:
    """disease.sh API settings."""
    base_url: str = "https://disease.sh"
    timeout_seconds: float = 10.0  # 0 disables the timeout
    vaccine_lastdays: int = 30
    top_countries: int = 5

    @property
    def timeout(self) -> Optional[float]:
        """Timeout to hand to requests, or None for no timeout."""
        return self.timeout_seconds if self.timeout_seconds > 0 else None


@dataclass
class PipelineConfig:
    """Fetch cycle execution settings."""
    parallel: bool = True
    max_workers: int = 5


@dataclass
class LoggingConfig:
    """Application logging settings."""
    level: str = "INFO"
    file_logging: bool = False
    log_dir: str = "logs"


@dataclass
class ServerConfig:
    """Dash development server settings."""
    host: str = "127.0.0.1"
    port: int = 8050
    debug: bool = False


@dataclass
class DashboardConfig:
    """Complete dashboard configuration."""
    api: ApiConfig = field(default_factory=ApiConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    def validate(self) -> list[str]:
        """
        Validate the configuration.

        Returns:
            List of error messages (empty if valid).
        """
        errors = []

        if not self.api.base_url.startswith(("http://", "https://")):
            errors.append(f"API base URL must be http(s): {self.api.base_url}")

        if self.api.timeout_seconds < 0:
            errors.append("API timeout must be non-negative (0 disables it)")

        if self.api.vaccine_lastdays < 1:
            errors.append("vaccine_lastdays must be at least 1")

        if self.api.top_countries < 1:
            errors.append("top_countries must be at least 1")

        if self.pipeline.max_workers < 1:
            errors.append("max_workers must be at least 1")

        if self.logging.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Invalid log level: {self.logging.level}")

        if not 0 < self.server.port < 65536:
            errors.append(f"Invalid server port: {self.server.port}")

        return errors


def load_dashboard_config(config_path: Optional[Path] = None) -> DashboardConfig:
    """
    Load dashboard configuration from TOML file.

    Args:
        config_path: Path to the TOML config file. Defaults to config/dashboard.toml
                     relative to the project root.

    Returns:
        DashboardConfig dataclass with all settings.

    Raises:
        tomllib.TOMLDecodeError: If the TOML is invalid.
    """
    if config_path is None:
        config_path = Path(__file__).parent / "dashboard.toml"

    if not config_path.exists():
        # Return default config if file doesn't exist
        return DashboardConfig()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    api_data = data.get("api", {})
    api = ApiConfig(
        base_url=api_data.get("base_url", "https://disease.sh").rstrip("/"),
        timeout_seconds=float(api_data.get("timeout_seconds", 10.0)),
        vaccine_lastdays=api_data.get("vaccine_lastdays", 30),
        top_countries=api_data.get("top_countries", 5),
    )

    pipeline_data = data.get("pipeline", {})
    pipeline = PipelineConfig(
        parallel=pipeline_data.get("parallel", True),
        max_workers=pipeline_data.get("max_workers", 5),
    )

    logging_data = data.get("logging", {})
    logging = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        file_logging=logging_data.get("file_logging", False),
        log_dir=logging_data.get("log_dir", "logs"),
    )

    server_data = data.get("server", {})
    server = ServerConfig(
        host=server_data.get("host", "127.0.0.1"),
        port=server_data.get("port", 8050),
        debug=server_data.get("debug", False),
    )

    return DashboardConfig(
        api=api,
        pipeline=pipeline,
        logging=logging,
        server=server,
    )


# Module-level cached config (loaded on first access)
_cached_config: Optional[DashboardConfig] = None


def get_dashboard_config() -> DashboardConfig:
    """
    Get the dashboard configuration (cached after first load).

    Returns:
        DashboardConfig dataclass with all settings.
    """
    global _cached_config
    if _cached_config is None:
        _cached_config = load_dashboard_config()
    return _cached_config


def reload_dashboard_config() -> DashboardConfig:
    """
    Reload the dashboard configuration from disk.

    Returns:
        DashboardConfig dataclass with all settings.
    """
    global _cached_config
    _cached_config = load_dashboard_config()
    return _cached_config


__all__ = [
    "DashboardConfig",
    "ApiConfig",
    "PipelineConfig",
    "LoggingConfig",
    "ServerConfig",
    "load_dashboard_config",
    "get_dashboard_config",
    "reload_dashboard_config",
]
