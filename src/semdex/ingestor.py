"""Ingestion pipeline for semdex."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from uuid import UUID

from semdex.exceptions import ChunkStoreError, DimensionMismatchError, MetadataLoadError
from semdex.models import Chunk, MetadataEntry
from semdex.parsing import clean_field, parse_bracketed_fields, parse_fields
from semdex.settings import Settings
from semdex.stores import ChunkStore
from semdex.vector import decode_vector, encode_vector

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int, str], None]
"""Callback for ingestion progress updates.

Args:
    event: Event type - "metadata" or "importing"
    current: Current progress count
    total: Total items, or 0 when unknown (the chunk source is streamed)
    message: Human-readable status message
"""

# Minimum field counts per source row
METADATA_MIN_FIELDS = 6
CHUNK_MIN_FIELDS = 5


@dataclass
class IngestReport:
    """Outcome of an ingestion run.

    Attributes:
        written: Number of chunks written to the store
        failed: Number of chunk rows that were skipped because of an error
        metadata_entries: Number of metadata entries loaded
        skipped: True if the store already had data and nothing was read
    """

    written: int = 0
    failed: int = 0
    metadata_entries: int = 0
    skipped: bool = False

    def __int__(self) -> int:
        return self.written


def _read_lines(path: str | Path) -> Iterator[tuple[int, bytes]]:
    """Yield (line_number, raw_line) pairs after the header row, skipping blank lines.

    Lines are left undecoded so that a badly encoded row only fails itself.
    """
    with open(path, "rb") as f:
        for line_number, raw in enumerate(f, start=1):
            if line_number == 1:
                continue
            raw = raw.rstrip(b"\r\n")
            if raw.strip():
                yield line_number, raw


def load_metadata(path: str | Path) -> dict[UUID, MetadataEntry]:
    """Build the id -> MetadataEntry lookup table from the metadata source.

    Row shape: ``id, filename, title, topic, <unused>, word_count, ...``.
    Rows with too few fields are skipped with a warning; a malformed id or
    word count aborts the whole load.

    Raises:
        MetadataLoadError: If any row is not UTF-8 or has a malformed id or word count
        OSError: If the source cannot be read
    """
    entries: dict[UUID, MetadataEntry] = {}
    for line_number, raw in _read_lines(path):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MetadataLoadError(str(e), line_number=line_number) from e
        fields = parse_fields(line)
        if len(fields) < METADATA_MIN_FIELDS:
            logger.warning(
                "Skipping metadata line %d: expected %d fields, got %d",
                line_number,
                METADATA_MIN_FIELDS,
                len(fields),
            )
            continue
        try:
            entry_id = UUID(clean_field(fields[0]).strip())
            entries[entry_id] = MetadataEntry(
                filename=clean_field(fields[1]),
                title=clean_field(fields[2]),
                topic=clean_field(fields[3]),
                word_count=int(clean_field(fields[5]).strip()),
            )
        except ValueError as e:
            raise MetadataLoadError(str(e), line_number=line_number) from e
    return entries


class Ingestor:
    """Bulk-loads pre-chunked, pre-embedded documents into a ChunkStore.

    Pipeline:
    1. Skip everything if the store already holds data
    2. Load the metadata source into an in-memory lookup table
    3. Stream the chunk source, join metadata by id, insert chunk by chunk

    Row errors in step 3 are logged and skipped; errors in step 2 abort.
    Re-running after a partial failure does not resume: the store is
    non-empty, so the run is skipped entirely.
    """

    def __init__(self, chunk_store: ChunkStore, settings: Settings | None = None) -> None:
        """Initialize the ingestor.

        Args:
            chunk_store: Destination store
            settings: Behavioral settings (embedding_dimension, progress_interval)
        """
        self.chunk_store = chunk_store
        self.settings = settings if settings is not None else Settings()

    def ingest(
        self,
        metadata_path: str | Path,
        chunks_path: str | Path,
        on_progress: ProgressCallback | None = None,
    ) -> IngestReport:
        """Ingest a metadata source and a chunk/embedding source.

        Args:
            metadata_path: Delimited file with rows
                ``id, filename, title, topic, <unused>, word_count, ...``
            chunks_path: Delimited file with rows
                ``id, source_url, chunk_index, content, "[v0,v1,...]", ...``
            on_progress: Optional callback(event, current, total, message)

        Returns:
            IngestReport; ``report.written`` is the number of stored chunks

        Raises:
            MetadataLoadError: If the metadata source is malformed
        """

        def progress(event: str, current: int, total: int, message: str = "") -> None:
            if on_progress:
                on_progress(event, current, total, message)

        existing = self.chunk_store.count()
        if existing > 0:
            logger.info("Store already contains %d chunks, skipping import", existing)
            return IngestReport(skipped=True)

        logger.info("Loading metadata from %s", metadata_path)
        progress("metadata", 0, 1, "Loading metadata...")
        metadata = load_metadata(metadata_path)
        logger.info("Loaded %d metadata entries", len(metadata))
        progress("metadata", 1, 1, f"Loaded {len(metadata)} metadata entries")

        report = IngestReport(metadata_entries=len(metadata))
        logger.info("Importing chunks from %s", chunks_path)
        progress("importing", 0, 0, "Importing chunks...")

        for line_number, raw in _read_lines(chunks_path):
            try:
                self._ingest_row(raw.decode("utf-8"), metadata)
            except (ValueError, ChunkStoreError) as e:
                report.failed += 1
                logger.warning("Failed to import chunk line %d: %s", line_number, e)
                continue

            report.written += 1
            if report.written % self.settings.progress_interval == 0:
                logger.info("Imported %d chunks...", report.written)
                progress("importing", report.written, 0, f"Imported {report.written} chunks")

        logger.info(
            "Imported %d chunks (%d rows failed)",
            report.written,
            report.failed,
        )
        progress("importing", report.written, report.written, "Import complete")
        return report

    def _ingest_row(self, line: str, metadata: dict[UUID, MetadataEntry]) -> None:
        """Parse one chunk row, join its metadata and insert it."""
        fields = parse_bracketed_fields(line)
        if len(fields) < CHUNK_MIN_FIELDS:
            raise ValueError(f"expected {CHUNK_MIN_FIELDS} fields, got {len(fields)}")

        chunk_id = UUID(clean_field(fields[0]).strip())
        source_url = clean_field(fields[1])
        chunk_index = int(clean_field(fields[2]).strip())
        content = clean_field(fields[3])
        embedding = decode_vector(clean_field(fields[4]))

        if len(embedding) != self.settings.embedding_dimension:
            raise DimensionMismatchError(self.settings.embedding_dimension, len(embedding))

        meta = metadata.get(chunk_id)
        chunk = Chunk(
            id=chunk_id,
            source_url=source_url,
            chunk_index=chunk_index,
            content=content,
            title=meta.title if meta else None,
            topic=meta.topic if meta else None,
            filename=meta.filename if meta else None,
            word_count=meta.word_count if meta else None,
            embedding=embedding,
        )
        self.chunk_store.insert(chunk, encode_vector(embedding))
