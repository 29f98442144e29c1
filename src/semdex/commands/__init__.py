"""UI-agnostic command layer for semdex.

Commands return data structures, allowing UIs to render results appropriately.

Usage:
    from semdex.commands import ingest, query, status

    result = ingest.ingest("data/metadata.csv", "data/embeddings.csv")
    result = query.search("Klimaschutz", limit=5)
    result = status.status()
"""

from semdex.commands import ingest, query, status
from semdex.commands import list as list_cmd
from semdex.commands.base import (
    CommandResult,
    CommandStage,
    IngestResult,
    ListResult,
    ProgressCallback,
    ProgressUpdate,
    SearchResult,
    StatusResult,
)

__all__ = [
    # Base types
    "CommandStage",
    "ProgressUpdate",
    "ProgressCallback",
    "CommandResult",
    # Result types
    "IngestResult",
    "SearchResult",
    "ListResult",
    "StatusResult",
    # Command modules
    "ingest",
    "query",
    "status",
    "list_cmd",
]
