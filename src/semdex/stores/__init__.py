"""Storage abstractions for semdex."""

from semdex.stores.base import ChunkStore
from semdex.stores.sqlite_chunk import SQLiteChunkStore

try:
    from semdex.stores.pgvector_chunk import PgVectorChunkStore
except ImportError:
    from semdex._optional import _create_missing_dependency_class

    PgVectorChunkStore = _create_missing_dependency_class(  # type: ignore[misc,assignment]
        "PgVectorChunkStore", "postgres"
    )

__all__ = [
    "ChunkStore",
    "SQLiteChunkStore",
    "PgVectorChunkStore",
]
