# src/semdex/models/chunk.py
"""Chunk data models."""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """A unit of retrievable text with provenance and its embedding."""

    id: UUID = Field(default_factory=uuid4)
    source_url: str
    chunk_index: int = Field(ge=0)
    content: str
    title: str | None = None
    topic: str | None = None
    filename: str | None = None
    word_count: int | None = Field(default=None, ge=0)
    embedding: list[float] | None = None


class MetadataEntry(BaseModel):
    """Descriptive fields joined onto a chunk by id during ingestion."""

    filename: str
    title: str
    topic: str
    word_count: int = Field(ge=0)
