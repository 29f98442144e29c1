# src/semdex/stores/base.py
"""Abstract base class for chunk storage."""

from abc import ABC, abstractmethod

from semdex.models import Chunk


class ChunkStore(ABC):
    """Abstract base class for chunk storage with nearest-neighbour search.

    Vectors cross this boundary only as encoded text (see semdex.vector);
    the store casts them to its native vector type. Ranking is entirely the
    store's job: callers must keep the returned order.
    """

    @abstractmethod
    def count(self) -> int:
        """Count the total number of chunks in the store."""
        ...

    @abstractmethod
    def insert(self, chunk: Chunk, encoded_vector: str) -> None:
        """Insert a chunk together with its encoded embedding.

        Raises:
            ChunkStoreError: On constraint violation (e.g. duplicate id) or
                if the store rejects the vector.
        """
        ...

    @abstractmethod
    def nearest(self, encoded_vector: str, limit: int) -> list[Chunk]:
        """Return the ``limit`` chunks closest to the vector, ascending distance."""
        ...

    @abstractmethod
    def nearest_by_filename(self, pattern: str, encoded_vector: str, limit: int) -> list[Chunk]:
        """Like nearest(), restricted to chunks whose filename matches ``pattern``.

        ``pattern`` uses LIKE syntax (``%`` and ``_`` wildcards) and matches
        case-insensitively.
        """
        ...

    @abstractmethod
    def distinct_filenames(self) -> list[str]:
        """List all distinct non-null filenames, sorted alphabetically."""
        ...
