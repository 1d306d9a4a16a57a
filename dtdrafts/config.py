"""
Configuration management using YAML files and dataclasses.

This module defines the tool settings and provides loading from an optional
YAML file with defaults. Configuration sections:
- ApiConfig: dev.to endpoint, pagination and HTTP settings
- StorageConfig: Location of the API key and article cache files
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container

The API key itself is not part of these settings; it lives in its own JSON
file managed by ConfigStore.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
import os
from pathlib import Path
from typing import Any

import yaml

from . import __version__
from .errors import ConfigError


HOME_ENV = "DTDRAFTS_HOME"
SETTINGS_FILENAME = "settings.yaml"


@dataclass
class ApiConfig:
    """Configuration for the dev.to API client.

    Attributes:
        base_url: Base URL of the REST API
        site_url: Base URL of the website, used to build edit links
        per_page: Page size requested on every call
        page_delay_seconds: Pause between page requests (rate-limit mitigation)
        timeout_seconds: HTTP request timeout
        user_agent: User-Agent header identifying the client
        max_pages: Optional cap (at least 1) on the number of pages fetched, None for no cap
    """

    base_url: str = "https://dev.to/api"
    site_url: str = "https://dev.to"
    per_page: int = 1000
    page_delay_seconds: float = 1.0
    timeout_seconds: float = 30.0
    user_agent: str = f"dtdrafts/{__version__}"
    max_pages: int | None = None


@dataclass
class StorageConfig:
    """Configuration for local files.

    Attributes:
        dir: Data directory; None resolves to $DTDRAFTS_HOME or ~/.dtdrafts
        config_filename: Name of the API key file
        cache_filename: Name of the article cache file
    """

    dir: str | None = None
    config_filename: str = "config.json"
    cache_filename: str = "articles_cache.json"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to the console (stderr)
        file: Whether to log to a file in the data directory
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "plain"
    filename: str = "dtdrafts.log"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    api: ApiConfig = field(default_factory=ApiConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    "api": ApiConfig,
    "storage": StorageConfig,
    "logging": LoggingConfig,
}


def load_config(path: str | Path | None) -> AppConfig:
    """Load configuration from a YAML file with defaults.

    A missing path yields the defaults. Unknown top-level sections are
    ignored; unknown keys inside a known section are rejected.

    Raises:
        ConfigError: If the file cannot be read or does not hold a mapping
    """
    if not path:
        return AppConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"Failed to read settings file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed settings file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")
    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if not isinstance(value, dict):
            raise ConfigError(f"Settings section '{key}' must be a mapping")
        unknown = set(value) - set(data[key])
        if unknown:
            raise ConfigError(
                f"Unknown settings in section '{key}': {', '.join(sorted(unknown))}"
            )
        data[key].update(value)
    cfg = _fromdict(data)
    _validate_api(cfg.api)
    return cfg


def _validate_api(cfg: ApiConfig) -> None:
    if cfg.per_page < 1:
        raise ConfigError("Setting api.per_page must be at least 1")
    if cfg.max_pages is not None and cfg.max_pages < 1:
        raise ConfigError("Setting api.max_pages must be at least 1 or null")


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        name: {f.name: getattr(getattr(cfg, name), f.name) for f in fields(section)}
        for name, section in _SECTIONS.items()
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        api=ApiConfig(**data["api"]),
        storage=StorageConfig(**data["storage"]),
        logging=LoggingConfig(**data["logging"]),
    )


def get_storage_dir(cfg: StorageConfig) -> Path:
    """Resolve the data directory from inline config, environment, or home."""
    if cfg.dir:
        return Path(cfg.dir).expanduser()
    env_dir = os.getenv(HOME_ENV)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / ".dtdrafts"


def get_config_file(cfg: StorageConfig) -> Path:
    return get_storage_dir(cfg) / cfg.config_filename


def get_cache_file(cfg: StorageConfig) -> Path:
    return get_storage_dir(cfg) / cfg.cache_filename


def default_settings_path() -> Path | None:
    """Return the settings file in the default data directory, if it exists."""
    path = get_storage_dir(StorageConfig()) / SETTINGS_FILENAME
    return path if path.exists() else None
