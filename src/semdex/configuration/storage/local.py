# src/semdex/configuration/storage/local.py
"""Local filesystem storage configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from semdex.settings import Settings
    from semdex.stores import ChunkStore


@dataclass(frozen=True)
class LocalStorage:
    """Local filesystem storage using SQLite.

    Data is persisted to ``<data_dir>/chunks.db``.

    Args:
        data_dir: Base directory for the database file.
                  Created if it doesn't exist.

    Example:
        sx = Semdex(
            provider=LiteLLMProvider(embedding="ollama/mxbai-embed-large"),
            storage=LocalStorage("./semdex_data"),
        )
    """

    data_dir: str

    def build_store(self, settings: Settings) -> ChunkStore:
        """Build the SQLite chunk store, creating the data directory if needed."""
        from semdex.stores import SQLiteChunkStore

        Path(self.data_dir).mkdir(parents=True, exist_ok=True)
        return SQLiteChunkStore(
            os.path.join(self.data_dir, "chunks.db"),
            dimension=settings.embedding_dimension,
        )
