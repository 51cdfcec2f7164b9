"""Configuration loading and management for lintcache.

Configuration sources are merged in priority order:
    1. Defaults (defined in ServiceConfig)
    2. Global config (~/.lintcache.toml)
    3. Project config (./lintcache.toml)
    4. Explicit config file
    5. Environment variables (LINTCACHE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(contact_email="ops@example.com")
    >>> config.contact_email
    'ops@example.com'
"""

from __future__ import annotations

import math
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ServiceConfig:
    """Configuration for the lint cache service.

    Attributes:
        Identity:
            app_id: Name used in the fetch user agent and the bot page
            contact_email: Address shown to operators of crawled hosts

        Storage:
            cache_dir: Directory holding the on-disk result store

        Analysis:
            min_confidence: Default confidence threshold for served results
            source_suffix: Only files with this suffix are linted

        Fetching:
            fetch_timeout_seconds: Timeout for each upstream request
            github_token: Optional token for the GitHub API

        Serving:
            host: Interface ``lintcache serve`` binds to
            port: Port ``lintcache serve`` listens on
    """

    app_id: str = "lintcache"
    contact_email: str = "unknown@example.com"

    cache_dir: str = ".lintcache"

    min_confidence: float = 0.8
    source_suffix: str = ".py"

    fetch_timeout_seconds: float = 30.0
    github_token: Optional[str] = None

    host: str = "127.0.0.1"
    port: int = 8080

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.app_id:
            raise ValueError("app_id must not be empty")
        if math.isnan(self.min_confidence) or not 0.0 <= self.min_confidence <= 1.0:
            raise ValueError("min_confidence must be between 0.0 and 1.0")
        if not self.source_suffix.startswith("."):
            raise ValueError("source_suffix must start with '.'")
        if self.fetch_timeout_seconds <= 0:
            raise ValueError("fetch_timeout_seconds must be positive")
        if not 0 < self.port < 65536:
            raise ValueError("port must be between 1 and 65535")


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ServiceConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset CLI options keep file/env values

    Returns:
        Validated ServiceConfig instance

    Raises:
        ConfigurationError: If a config file or value is invalid
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".lintcache.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "lintcache.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ServiceConfig(**merged)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from LINTCACHE_* environment variables.

    Returns:
        Dict of field_name -> parsed_value for any LINTCACHE_* vars found.
    """
    type_hints = get_type_hints(ServiceConfig)
    result: dict[str, Any] = {}

    for field_name in ServiceConfig.__dataclass_fields__:
        env_key = f"LINTCACHE_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        type_hint = next(t for t in args if t is not type(None))

    if type_hint is int:
        return int(value)
    if type_hint is float:
        return float(value)
    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, reading the ``[lintcache]`` table when present."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
    section = data.get("lintcache", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [lintcache] must be a table")
    return section
