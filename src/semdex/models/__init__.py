"""Data models for semdex."""

from semdex.models.chunk import Chunk, MetadataEntry
from semdex.models.results import QueryResult

__all__ = ["Chunk", "MetadataEntry", "QueryResult"]
