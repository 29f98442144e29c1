# src/semdex/semdex.py
"""Central configuration class for semdex."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from semdex.configuration import ProviderConfig, StorageConfig
    from semdex.embedder import Embedder
    from semdex.ingestor import IngestReport, Ingestor, ProgressCallback
    from semdex.retriever import Retriever
    from semdex.stores import ChunkStore
    from semdex.tools import ChunkSearchTools

from semdex.settings import Settings


class Semdex:
    """Bundles the chunk store, the embedder and settings.

    Configure once, then create Ingestors, Retrievers and tool objects from it.

    1. With configuration objects:

        from semdex import Semdex, LiteLLMProvider, LocalStorage

        sx = Semdex(
            provider=LiteLLMProvider(embedding="ollama/mxbai-embed-large"),
            storage=LocalStorage("./semdex_data"),
        )
        sx.ingest("data/metadata.csv", "data/embeddings.csv")
        results = sx.retriever().search("Klimaschutz", limit=5)

    2. With an explicit store and embedder:

        sx = Semdex(
            chunk_store=PgVectorChunkStore("postgresql://localhost/semdex"),
            embedder=my_embedder,
        )
    """

    def __init__(
        self,
        *,
        provider: ProviderConfig | None = None,
        storage: StorageConfig | None = None,
        chunk_store: ChunkStore | None = None,
        embedder: Embedder | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Create a Semdex instance.

        Args:
            provider: Provider configuration (builds the embedder).
                Mutually exclusive with ``embedder``.
            storage: Storage configuration (builds the chunk store).
                Mutually exclusive with ``chunk_store``.
            chunk_store: Explicit chunk store.
            embedder: Explicit embedder.
            settings: Behavioral settings.

        Raises:
            ValueError: If a component is configured twice or not at all.
        """
        self._settings = settings if settings is not None else Settings()

        if (storage is None) == (chunk_store is None):
            raise ValueError("Provide exactly one of 'storage' or 'chunk_store'")
        if (provider is None) == (embedder is None):
            raise ValueError("Provide exactly one of 'provider' or 'embedder'")

        self.chunk_store: ChunkStore = (
            chunk_store if chunk_store is not None else storage.build_store(self._settings)  # type: ignore[union-attr]
        )
        self.embedder: Embedder = (
            embedder if embedder is not None else provider.build_embedder(self._settings)  # type: ignore[union-attr]
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    def ingestor(self) -> Ingestor:
        """Create an Ingestor writing to this instance's store."""
        from semdex.ingestor import Ingestor

        return Ingestor(chunk_store=self.chunk_store, settings=self._settings)

    def retriever(self) -> Retriever:
        """Create a Retriever over this instance's store and embedder."""
        from semdex.retriever import Retriever

        return Retriever(chunk_store=self.chunk_store, embedder=self.embedder)

    def tools(self) -> ChunkSearchTools:
        """Create the tool-facing operations, applying the configured limits."""
        from semdex.tools import ChunkSearchTools

        return ChunkSearchTools(retriever=self.retriever(), settings=self._settings)

    def ingest(
        self,
        metadata_path: str | Path,
        chunks_path: str | Path,
        on_progress: ProgressCallback | None = None,
    ) -> IngestReport:
        """Run the ingestion pipeline once (no-op if the store has data)."""
        return self.ingestor().ingest(metadata_path, chunks_path, on_progress=on_progress)
