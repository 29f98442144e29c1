# src/semdex/config.py
"""Configuration loading utilities for semdex.

This module provides configuration loading that can be used by:
- CLI commands
- External applications using semdex as a library

It handles:
- Finding and loading semdex.yaml config files
- Loading .env files for API keys and database URLs
- Building Settings objects from multiple sources
- Creating Semdex instances (or a bare store) from configuration
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

import yaml

if TYPE_CHECKING:
    from semdex.configuration import StorageConfig
    from semdex.semdex import Semdex
    from semdex.settings import Settings
    from semdex.stores import ChunkStore

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_DATA_DIR = "./semdex_data"
CONFIG_FILES = ["semdex.yaml", "semdex.yml", ".semdexrc"]
ENV_FILE = ".env"

StorageKind = Literal["sqlite", "postgres"]


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load environment variables from .env file if it exists.

    Existing environment variables are never overridden.

    Args:
        env_path: Path to .env file (default: .env in current directory)
    """
    path = Path(env_path)
    if not path.exists():
        return

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip("'\"")
                if key not in os.environ:
                    os.environ[key] = value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in current directory or parent directories.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# Valid configuration keys for validation
VALID_ROOT_KEYS = {
    "storage",
    "data_dir",
    "database_url",
    "table",
    "embedding_model",
    "embedding_api_base",
    "embedding_dimensions",
    "settings",
}

VALID_SETTINGS_KEYS = {
    "embedding_dimension",
    "default_limit",
    "max_limit",
    "progress_interval",
    "num_retries",
}

# Env var -> Settings field, all integers
ENV_SETTINGS = {
    "SEMDEX_EMBEDDING_DIMENSION": "embedding_dimension",
    "SEMDEX_DEFAULT_LIMIT": "default_limit",
    "SEMDEX_MAX_LIMIT": "max_limit",
    "SEMDEX_PROGRESS_INTERVAL": "progress_interval",
    "SEMDEX_NUM_RETRIES": "num_retries",
}


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for error messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None or not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    for warning in validate_config(config, config_path):
        logger.warning(warning)

    return config


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from SEMDEX_* environment variables.

    Only explicitly set (and valid) values are returned, so that YAML
    settings are used unless overridden.
    """
    result: dict[str, Any] = {}
    for env_key, settings_key in ENV_SETTINGS.items():
        if (val := _safe_int(os.environ.get(env_key))) is not None:
            result[settings_key] = val
    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract settings from the 'settings:' section of a YAML config."""
    yaml_settings = config.get("settings", {}) or {}
    return {key: yaml_settings[key] for key in VALID_SETTINGS_KEYS if key in yaml_settings}


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Settings class defaults
    """
    from semdex.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    return Settings(**{**yaml_settings, **env_settings})


@dataclass
class SemdexConfig:
    """Configuration for creating a Semdex instance."""

    storage: StorageKind
    data_dir: str
    settings: Settings
    database_url: str | None = None
    table: str = "chunks"
    embedding_model: str | None = None
    embedding_api_key: str | None = None
    embedding_api_base: str | None = None
    embedding_dimensions: int | None = None

    def storage_config(self) -> StorageConfig:
        """Build the storage configuration object for this config."""
        from semdex.configuration import LocalStorage, PostgresStorage

        if self.storage == "postgres":
            if not self.database_url:
                raise ValueError("PostgreSQL storage requires database_url")
            return PostgresStorage(dsn=self.database_url, table=self.table)
        return LocalStorage(self.data_dir)


def get_semdex_config(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    require_embedding: bool = True,
) -> SemdexConfig | ConfigError:
    """Get configuration for creating a Semdex instance.

    This extracts configuration without creating the instance, allowing
    the caller to handle errors and missing values appropriately.

    Args:
        data_dir: Override data directory
        config_path: Override config file path
        require_embedding: If False, a missing embedding model is not an error
            (read-only commands such as list and status don't need one)

    Returns:
        SemdexConfig with all settings, or ConfigError if invalid
    """
    config = load_config(config_path)

    storage = os.environ.get("SEMDEX_STORAGE") or config.get("storage") or "sqlite"
    if storage not in ("sqlite", "postgres"):
        return ConfigError(
            message=f"Unknown storage '{storage}'",
            suggestion="Supported storage: sqlite, postgres",
        )

    effective_data_dir = (
        data_dir or os.environ.get("SEMDEX_DATA_DIR") or config.get("data_dir") or DEFAULT_DATA_DIR
    )
    database_url = os.environ.get("SEMDEX_DATABASE_URL") or config.get("database_url")
    if storage == "postgres" and not database_url:
        return ConfigError(
            message="PostgreSQL storage requires a database URL.",
            suggestion="Set SEMDEX_DATABASE_URL or database_url in semdex.yaml",
        )

    embedding_model = os.environ.get("SEMDEX_EMBEDDING_MODEL") or config.get("embedding_model")
    if require_embedding and not embedding_model:
        return ConfigError(
            message="No embedding model configured.",
            suggestion="Set SEMDEX_EMBEDDING_MODEL or embedding_model in semdex.yaml",
        )

    try:
        settings = build_settings(config)
    except ValueError as e:
        return ConfigError(message=f"Invalid settings: {e}")

    return SemdexConfig(
        storage=storage,
        data_dir=effective_data_dir,
        settings=settings,
        database_url=database_url,
        table=config.get("table", "chunks"),
        embedding_model=embedding_model,
        embedding_api_key=os.environ.get("SEMDEX_EMBEDDING_API_KEY"),
        embedding_api_base=(
            os.environ.get("SEMDEX_EMBEDDING_API_BASE") or config.get("embedding_api_base")
        ),
        embedding_dimensions=config.get("embedding_dimensions"),
    )


def create_semdex(config: SemdexConfig) -> Semdex:
    """Create a Semdex instance from configuration.

    Raises:
        ValueError: If no embedding model is configured
    """
    from semdex.configuration import LiteLLMProvider
    from semdex.semdex import Semdex

    if not config.embedding_model:
        raise ValueError("An embedding model is required")

    return Semdex(
        provider=LiteLLMProvider(
            embedding=config.embedding_model,
            api_key=config.embedding_api_key,
            api_base=config.embedding_api_base,
            dimensions=config.embedding_dimensions,
        ),
        storage=config.storage_config(),
        settings=config.settings,
    )


def get_store(config: SemdexConfig) -> ChunkStore:
    """Build only the chunk store (for read-only operations like list and status)."""
    return config.storage_config().build_store(config.settings)


def get_semdex(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> Semdex | ConfigError:
    """Create a Semdex instance based on configuration.

    Convenience wrapper around get_semdex_config and create_semdex.
    """
    config = get_semdex_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return config
    return create_semdex(config)
