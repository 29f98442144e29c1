# src/semdex/commands/list.py
"""List command - list indexed documents."""

from __future__ import annotations

from pathlib import Path

from semdex.commands.base import ListResult
from semdex.config import ConfigError, get_semdex_config, get_store


def list_documents(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ListResult:
    """List all distinct document filenames.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        ListResult with sorted filenames
    """
    config = get_semdex_config(data_dir, config_path, require_embedding=False)
    if isinstance(config, ConfigError):
        return ListResult(success=False, error=config.message)

    if config.storage == "sqlite" and not Path(config.data_dir).exists():
        return ListResult(success=True, documents=[])

    try:
        store = get_store(config)
        documents = store.distinct_filenames()
    except Exception as e:
        return ListResult(success=False, error=f"Failed to access database: {e}")

    return ListResult(success=True, documents=documents)
