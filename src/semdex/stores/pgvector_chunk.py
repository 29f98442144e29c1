# src/semdex/stores/pgvector_chunk.py
"""PostgreSQL + pgvector chunk store implementation.

Nearest-neighbour search and vector inserts are plain SQL: vectors are sent
as their encoded text form and cast server-side with ``cast(%s AS vector)``.
Ranking uses pgvector's cosine distance operator ``<=>``.
"""

import logging
import re

import psycopg

from semdex.exceptions import ChunkStoreError
from semdex.models import Chunk
from semdex.stores.base import ChunkStore
from semdex.vector import decode_vector

logger = logging.getLogger(__name__)

_COLUMNS = "id, source_url, chunk_index, content, title, topic, filename, word_count"
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class PgVectorChunkStore(ChunkStore):
    """Chunk store backed by a PostgreSQL table with a ``vector(n)`` column.

    Example:
        store = PgVectorChunkStore("postgresql://user:pw@localhost/semdex", dimension=1024)
        store.count()
    """

    def __init__(
        self,
        dsn: str,
        dimension: int = 1024,
        table: str = "chunks",
        create_schema: bool = True,
    ) -> None:
        """Initialize the store.

        Args:
            dsn: libpq connection string or URL
            dimension: Size of the vector column
            table: Table name (plain identifier)
            create_schema: Create the vector extension and table if missing
        """
        if not _IDENTIFIER.match(table):
            raise ValueError(f"Invalid table name: {table!r}")
        self.dsn = dsn
        self.dimension = dimension
        self.table = table
        if create_schema:
            self._init_db()

    def _init_db(self) -> None:
        """Create the extension, table and index if they don't exist."""
        with psycopg.connect(self.dsn) as conn:
            conn.execute("CREATE EXTENSION IF NOT EXISTS vector")
            conn.execute(f"""
                CREATE TABLE IF NOT EXISTS {self.table} (
                    id UUID PRIMARY KEY,
                    source_url TEXT,
                    chunk_index INTEGER,
                    content TEXT,
                    title TEXT,
                    topic TEXT,
                    filename TEXT,
                    word_count INTEGER,
                    embedding vector({self.dimension})
                )
            """)
            conn.execute(
                f"CREATE INDEX IF NOT EXISTS idx_{self.table}_filename ON {self.table}(filename)"
            )
        logger.debug("Schema ready: table=%s, dimension=%d", self.table, self.dimension)

    def count(self) -> int:
        with psycopg.connect(self.dsn) as conn:
            row = conn.execute(f"SELECT COUNT(*) FROM {self.table}").fetchone()
            return row[0] if row else 0

    def insert(self, chunk: Chunk, encoded_vector: str) -> None:
        try:
            with psycopg.connect(self.dsn) as conn:
                conn.execute(
                    f"""
                    INSERT INTO {self.table} ({_COLUMNS}, embedding)
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, cast(%s AS vector))
                    """,
                    (
                        chunk.id,
                        chunk.source_url,
                        chunk.chunk_index,
                        chunk.content,
                        chunk.title,
                        chunk.topic,
                        chunk.filename,
                        chunk.word_count,
                        encoded_vector,
                    ),
                )
        except psycopg.Error as e:
            raise ChunkStoreError(f"Failed to insert chunk {chunk.id}: {e}") from e

    def nearest(self, encoded_vector: str, limit: int) -> list[Chunk]:
        return self._query(
            f"""
            SELECT {_COLUMNS}, embedding::text FROM {self.table}
            ORDER BY embedding <=> cast(%s AS vector)
            LIMIT %s
            """,
            (encoded_vector, limit),
        )

    def nearest_by_filename(self, pattern: str, encoded_vector: str, limit: int) -> list[Chunk]:
        return self._query(
            f"""
            SELECT {_COLUMNS}, embedding::text FROM {self.table}
            WHERE filename ILIKE %s
            ORDER BY embedding <=> cast(%s AS vector)
            LIMIT %s
            """,
            (pattern, encoded_vector, limit),
        )

    def distinct_filenames(self) -> list[str]:
        with psycopg.connect(self.dsn) as conn:
            rows = conn.execute(
                f"SELECT DISTINCT filename FROM {self.table} "
                "WHERE filename IS NOT NULL ORDER BY filename"
            ).fetchall()
            return [row[0] for row in rows]

    def _query(self, query: str, params: tuple) -> list[Chunk]:
        try:
            with psycopg.connect(self.dsn) as conn:
                rows = conn.execute(query, params).fetchall()
        except psycopg.Error as e:
            raise ChunkStoreError(f"Nearest-neighbour query failed: {e}") from e
        return [
            Chunk(
                id=row[0],
                source_url=row[1],
                chunk_index=row[2],
                content=row[3],
                title=row[4],
                topic=row[5],
                filename=row[6],
                word_count=row[7],
                embedding=decode_vector(row[8]) if row[8] is not None else None,
            )
            for row in rows
        ]
