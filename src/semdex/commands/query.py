# src/semdex/commands/query.py
"""Search commands - query the chunk store.

This module provides the core search logic that the CLI uses.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from semdex.commands.base import SearchResult
from semdex.config import ConfigError, create_semdex, get_semdex_config
from semdex.tools import clamp_limit

if TYPE_CHECKING:
    from semdex.semdex import Semdex


def search(
    query: str,
    limit: int | None = None,
    filename_pattern: str | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> SearchResult:
    """Search the chunk store with a natural-language query.

    Args:
        query: The search query
        limit: Requested number of results (clamped like the tool operations)
        filename_pattern: If set, only search documents whose filename contains it
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        SearchResult with matching chunks in distance order
    """
    config = get_semdex_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return SearchResult(success=False, query=query, error=config.message)

    try:
        sx = create_semdex(config)
    except Exception as e:
        return SearchResult(success=False, query=query, error=f"Failed to create semdex: {e}")

    return search_with_semdex(sx, query, limit=limit, filename_pattern=filename_pattern)


def search_within(
    filename_pattern: str,
    query: str,
    limit: int | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> SearchResult:
    """Search only documents whose filename contains ``filename_pattern``."""
    return search(
        query,
        limit=limit,
        filename_pattern=filename_pattern,
        data_dir=data_dir,
        config_path=config_path,
    )


def search_with_semdex(
    sx: Semdex,
    query: str,
    limit: int | None = None,
    filename_pattern: str | None = None,
) -> SearchResult:
    """Search using an existing Semdex instance."""
    effective_limit = clamp_limit(limit, sx.settings.default_limit, sx.settings.max_limit)
    retriever = sx.retriever()

    try:
        if filename_pattern:
            results = retriever.search_within(filename_pattern, query, effective_limit)
        else:
            results = retriever.search(query, effective_limit)
    except Exception as e:
        return SearchResult(
            success=False,
            query=query,
            filename_pattern=filename_pattern,
            limit=effective_limit,
            error=f"Search failed: {e}",
        )

    return SearchResult(
        success=True,
        query=query,
        filename_pattern=filename_pattern,
        limit=effective_limit,
        results=results,
    )
