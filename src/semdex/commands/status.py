# src/semdex/commands/status.py
"""Status command - show store statistics."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

from semdex.commands.base import StatusResult
from semdex.config import ConfigError, get_semdex_config, get_store


def _redact(url: str) -> str:
    """Drop the password from a database URL."""
    parts = urlsplit(url)
    if parts.password is None:
        return url
    netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
    return urlunsplit(parts._replace(netloc=netloc))


def status(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> StatusResult:
    """Get store statistics.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        StatusResult with chunk and document counts
    """
    config = get_semdex_config(data_dir, config_path, require_embedding=False)
    if isinstance(config, ConfigError):
        return StatusResult(success=False, error=config.message)

    if config.storage == "postgres":
        location = _redact(config.database_url or "")
    else:
        location = config.data_dir
        if not Path(config.data_dir).exists():
            return StatusResult(success=True, storage=config.storage, location=location)

    try:
        store = get_store(config)
        total_chunks = store.count()
        total_documents = len(store.distinct_filenames())
    except Exception as e:
        return StatusResult(success=False, error=f"Failed to access database: {e}")

    return StatusResult(
        success=True,
        storage=config.storage,
        location=location,
        total_chunks=total_chunks,
        total_documents=total_documents,
    )
