# src/semdex/models/results.py
"""Result data models returned to search callers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from semdex.models.chunk import Chunk


class QueryResult(BaseModel):
    """Read-only projection of a Chunk exposed to callers.

    Never carries the chunk id, index, word count or embedding.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str | None = None
    topic: str | None = None
    content: str
    source_url: str = Field(serialization_alias="sourceUrl")
    filename: str | None = None

    @classmethod
    def from_chunk(cls, chunk: Chunk) -> QueryResult:
        return cls(
            title=chunk.title,
            topic=chunk.topic,
            content=chunk.content,
            source_url=chunk.source_url,
            filename=chunk.filename,
        )
