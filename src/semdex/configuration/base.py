# src/semdex/configuration/base.py
"""Protocol definitions for configuration objects.

These protocols define the interfaces for provider and storage configurations.
Implementations use @dataclass(frozen=True) for immutability.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from semdex.embedder import Embedder
    from semdex.settings import Settings
    from semdex.stores import ChunkStore


@runtime_checkable
class ProviderConfig(Protocol):
    """Protocol for provider configurations.

    Provider configurations build the embedder used to turn query text into
    vectors in the same space as the ingested chunks.

    Example implementation:
        @dataclass(frozen=True)
        class LiteLLMProvider:
            embedding: str

            def build_embedder(self, settings: Settings) -> Embedder: ...
    """

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build an embedder for creating vector embeddings.

        Args:
            settings: Settings containing num_retries and embedding_dimension.
        """
        ...


@runtime_checkable
class StorageConfig(Protocol):
    """Protocol for storage configurations.

    Example implementation:
        @dataclass(frozen=True)
        class LocalStorage:
            data_dir: str

            def build_store(self, settings: Settings) -> ChunkStore: ...
    """

    def build_store(self, settings: Settings) -> ChunkStore:
        """Build the chunk store.

        Args:
            settings: Settings containing embedding_dimension.
        """
        ...
