# src/semdex/commands/ingest.py
"""Ingest command - load the metadata and chunk sources into the store.

This module provides the core ingest logic that the CLI uses.
Ingestion only writes pre-computed vectors, so no embedding model is needed.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from semdex.commands.base import (
    CommandStage,
    IngestResult,
    ProgressCallback,
    ProgressUpdate,
)
from semdex.config import ConfigError, get_semdex_config, get_store
from semdex.exceptions import ChunkStoreError, MetadataLoadError
from semdex.ingestor import Ingestor

if TYPE_CHECKING:
    from semdex.settings import Settings
    from semdex.stores import ChunkStore

# Map ingestor event names to CommandStage
STAGE_MAP = {
    "metadata": CommandStage.METADATA,
    "importing": CommandStage.IMPORTING,
}


def ingest(
    metadata_path: str | Path,
    chunks_path: str | Path,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    on_progress: ProgressCallback | None = None,
) -> IngestResult:
    """Ingest the two data sources into the configured store.

    Args:
        metadata_path: Metadata source (id, filename, title, topic, _, word_count)
        chunks_path: Chunk source (id, source_url, chunk_index, content, vector)
        data_dir: Override data directory (uses config if not provided)
        config_path: Override config file path
        on_progress: Callback for progress updates during ingestion

    Returns:
        IngestResult with counts
    """
    config = get_semdex_config(data_dir, config_path, require_embedding=False)
    if isinstance(config, ConfigError):
        return IngestResult(success=False, error=config.message)

    for path in (metadata_path, chunks_path):
        if not Path(path).exists():
            return IngestResult(success=False, error=f"Path not found: {path}")

    try:
        store = get_store(config)
    except (ImportError, ValueError, ChunkStoreError) as e:
        return IngestResult(success=False, error=f"Failed to open store: {e}")

    return ingest_with_store(
        store,
        metadata_path,
        chunks_path,
        settings=config.settings,
        on_progress=on_progress,
    )


def ingest_with_store(
    chunk_store: ChunkStore,
    metadata_path: str | Path,
    chunks_path: str | Path,
    settings: Settings | None = None,
    on_progress: ProgressCallback | None = None,
) -> IngestResult:
    """Ingest into an existing chunk store."""

    def progress_adapter(event: str, current: int, total: int, message: str) -> None:
        """Adapt the ingestor's progress callback to ProgressUpdate."""
        if on_progress:
            on_progress(
                ProgressUpdate(
                    stage=STAGE_MAP.get(event, CommandStage.PROCESSING),
                    current=current,
                    total=total,
                    message=message,
                )
            )

    ingestor = Ingestor(chunk_store=chunk_store, settings=settings)
    try:
        report = ingestor.ingest(
            metadata_path,
            chunks_path,
            on_progress=progress_adapter if on_progress else None,
        )
    except MetadataLoadError as e:
        return IngestResult(success=False, error=f"Invalid metadata source: {e}")
    except (OSError, ChunkStoreError) as e:
        return IngestResult(success=False, error=f"Ingestion failed: {type(e).__name__}: {e}")

    return IngestResult(
        success=True,
        written=report.written,
        failed=report.failed,
        metadata_entries=report.metadata_entries,
        skipped=report.skipped,
    )
