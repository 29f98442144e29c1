# src/semdex/stores/sqlite_chunk.py
"""SQLite chunk store implementation.

Embeddings are stored as encoded vector text. Ranking uses the sqlite-vec
extension (``vec_distance_cosine`` accepts the same ``[v0,...]`` text), and
filename filters use SQLite's LIKE with ``\\`` as escape character, matching
PostgreSQL's ILIKE.
"""

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import sqlite_vec

from semdex.exceptions import ChunkStoreError, VectorParseError
from semdex.models import Chunk
from semdex.stores.base import ChunkStore
from semdex.vector import decode_vector

_COLUMNS = "id, source_url, chunk_index, content, title, topic, filename, word_count, embedding"


def _casefold(value: str | None) -> str | None:
    """SQL function: Unicode lower-casing (SQLite's lower() only folds ASCII)."""
    return value.lower() if value is not None else None


def _load_vec(conn: sqlite3.Connection) -> None:
    if not hasattr(conn, "enable_load_extension"):
        raise ChunkStoreError("SQLite was compiled without extension support")
    conn.enable_load_extension(True)
    try:
        sqlite_vec.load(conn)
    except sqlite3.Error as e:
        raise ChunkStoreError(f"Failed to load sqlite-vec extension: {e}") from e
    finally:
        conn.enable_load_extension(False)


class SQLiteChunkStore(ChunkStore):
    """SQLite-based chunk store."""

    def __init__(self, db_path: str, dimension: int | None = None) -> None:
        """Initialize the SQLite store.

        Args:
            db_path: Path to the database file (parent directories are created)
            dimension: If set, inserts with a different vector size are rejected
        """
        self.db_path = db_path
        self.dimension = dimension
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.db_path)
        try:
            _load_vec(conn)
            conn.create_function("casefold", 1, _casefold, deterministic=True)
            with conn:
                yield conn
        finally:
            conn.close()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS chunks (
                    id TEXT PRIMARY KEY,
                    source_url TEXT,
                    chunk_index INTEGER,
                    content TEXT,
                    title TEXT,
                    topic TEXT,
                    filename TEXT,
                    word_count INTEGER,
                    embedding TEXT NOT NULL
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_filename ON chunks(filename)")

    def count(self) -> int:
        """Count the total number of chunks in the store."""
        with self._connect() as conn:
            cursor = conn.execute("SELECT COUNT(id) FROM chunks")
            count = cursor.fetchone()
            return count[0] if count else 0

    def insert(self, chunk: Chunk, encoded_vector: str) -> None:
        """Insert a chunk; duplicate ids are rejected."""
        # Mirror the checks of a server-side cast to vector(n)
        values = decode_vector(encoded_vector)
        if self.dimension is not None and len(values) != self.dimension:
            raise ChunkStoreError(
                f"expected {self.dimension} dimensions, not {len(values)} (chunk {chunk.id})"
            )
        try:
            with self._connect() as conn:
                conn.execute(
                    f"INSERT INTO chunks ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                    (
                        str(chunk.id),
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
        except sqlite3.Error as e:
            raise ChunkStoreError(f"Failed to insert chunk {chunk.id}: {e}") from e

    def nearest(self, encoded_vector: str, limit: int) -> list[Chunk]:
        """Return the closest chunks by cosine distance."""
        decode_vector(encoded_vector)
        return self._query(
            f"SELECT {_COLUMNS} FROM chunks "
            "ORDER BY vec_distance_cosine(embedding, ?) NULLS LAST LIMIT ?",
            (encoded_vector, limit),
        )

    def nearest_by_filename(self, pattern: str, encoded_vector: str, limit: int) -> list[Chunk]:
        """Return the closest chunks among those whose filename matches pattern."""
        decode_vector(encoded_vector)
        return self._query(
            f"SELECT {_COLUMNS} FROM chunks WHERE casefold(filename) LIKE casefold(?) ESCAPE '\\' "
            "ORDER BY vec_distance_cosine(embedding, ?) NULLS LAST LIMIT ?",
            (pattern, encoded_vector, limit),
        )

    def distinct_filenames(self) -> list[str]:
        """List all distinct filenames."""
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT DISTINCT filename FROM chunks WHERE filename IS NOT NULL ORDER BY filename"
            )
            return [row[0] for row in cursor.fetchall()]

    def _query(self, sql: str, params: tuple) -> list[Chunk]:
        try:
            with self._connect() as conn:
                cursor = conn.execute(sql, params)
                rows = cursor.fetchall()
        except sqlite3.Error as e:
            raise ChunkStoreError(f"Nearest-neighbour query failed: {e}") from e
        return [_row_to_chunk(row) for row in rows]


def _row_to_chunk(row: tuple) -> Chunk:
    try:
        embedding = decode_vector(row[8]) if row[8] is not None else None
    except VectorParseError as e:
        raise ChunkStoreError(f"Stored embedding for chunk {row[0]} is corrupt: {e}") from e
    return Chunk(
        id=row[0],
        source_url=row[1],
        chunk_index=row[2],
        content=row[3],
        title=row[4],
        topic=row[5],
        filename=row[6],
        word_count=row[7],
        embedding=embedding,
    )
