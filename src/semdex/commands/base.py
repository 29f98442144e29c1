# src/semdex/commands/base.py
"""Base types for the commands layer.

This module defines the data structures used by all commands:
- Progress callbacks for long-running operations
- Result types for each command
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from semdex.models import QueryResult


class CommandStage(Enum):
    """Stages of command execution for progress reporting."""

    # Ingest stages
    METADATA = "Metadata"
    IMPORTING = "Importing"

    # General stages
    PROCESSING = "Processing"


@dataclass
class ProgressUpdate:
    """Progress update for long-running operations.

    Attributes:
        stage: Current stage of the operation
        current: Current item number
        total: Total number of items (0 for indeterminate)
        message: Optional status message
    """

    stage: CommandStage
    current: int
    total: int
    message: str | None = None

    @property
    def is_indeterminate(self) -> bool:
        """True if progress is indeterminate (total unknown)."""
        return self.total == 0


# Callback type for progress updates
ProgressCallback = Callable[[ProgressUpdate], None]


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class IngestResult(CommandResult):
    """Result of the ingest command.

    Attributes:
        written: Chunks written to the store
        failed: Chunk rows skipped because of errors
        metadata_entries: Metadata entries loaded
        skipped: True if the store already had data
    """

    written: int = 0
    failed: int = 0
    metadata_entries: int = 0
    skipped: bool = False


@dataclass
class SearchResult(CommandResult):
    """Result of the search command.

    Attributes:
        query: The original query
        filename_pattern: Document filter, if the search was restricted
        limit: The effective (clamped) limit
        results: Matching chunks in distance order
    """

    query: str = ""
    filename_pattern: str | None = None
    limit: int = 0
    results: list[QueryResult] = field(default_factory=list)


@dataclass
class ListResult(CommandResult):
    """Result of the list command."""

    documents: list[str] = field(default_factory=list)


@dataclass
class StatusResult(CommandResult):
    """Result of the status command.

    Attributes:
        storage: Storage kind ("sqlite" or "postgres")
        location: Data directory or database URL (without password)
        total_chunks: Total chunks in the store
        total_documents: Distinct document filenames
    """

    storage: str = ""
    location: str = ""
    total_chunks: int = 0
    total_documents: int = 0
