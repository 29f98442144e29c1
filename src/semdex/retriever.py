"""Similarity search pipeline for semdex."""

import logging

from semdex.embedder import Embedder
from semdex.models import QueryResult
from semdex.stores import ChunkStore
from semdex.vector import encode_vector

logger = logging.getLogger(__name__)


def contains_pattern(text: str) -> str:
    """Wrap text in LIKE wildcards so it matches as a substring."""
    return f"%{text}%"


class Retriever:
    """Embeds queries and asks the chunk store for the nearest chunks.

    The store decides the ranking; results are returned in store order.
    Nothing is cached: every call embeds its query again.
    """

    def __init__(self, chunk_store: ChunkStore, embedder: Embedder) -> None:
        """Initialize the retriever.

        Args:
            chunk_store: Store answering nearest-neighbour queries
            embedder: Embedder for query embedding
        """
        self.chunk_store = chunk_store
        self.embedder = embedder

    def search(self, query: str, limit: int) -> list[QueryResult]:
        """Return the ``limit`` chunks most similar to the query.

        Args:
            query: Natural-language query
            limit: Maximum number of results

        Returns:
            QueryResult list ordered by ascending distance (empty if the store is empty)
        """
        encoded = self._encode_query(query)
        chunks = self.chunk_store.nearest(encoded, limit)
        logger.debug("Search returned %d chunks (limit=%d)", len(chunks), limit)
        return [QueryResult.from_chunk(chunk) for chunk in chunks]

    def search_within(self, filename_pattern: str, query: str, limit: int) -> list[QueryResult]:
        """Like search(), restricted to documents whose filename contains the pattern.

        Matching is case-insensitive; "klimaschutz" matches "Klimaschutz-2024.pdf".
        """
        encoded = self._encode_query(query)
        chunks = self.chunk_store.nearest_by_filename(
            contains_pattern(filename_pattern), encoded, limit
        )
        logger.debug(
            "Search within %r returned %d chunks (limit=%d)",
            filename_pattern,
            len(chunks),
            limit,
        )
        return [QueryResult.from_chunk(chunk) for chunk in chunks]

    def list_filenames(self) -> list[str]:
        """List all distinct document filenames, sorted."""
        return self.chunk_store.distinct_filenames()

    def _encode_query(self, query: str) -> str:
        # Embedder errors propagate: a failed embedding fails the whole search
        return encode_vector(self.embedder.embed_text(query))
