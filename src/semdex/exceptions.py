# src/semdex/exceptions.py
"""Exceptions raised by semdex."""


class SemdexError(Exception):
    """Base class for all semdex errors."""


class VectorParseError(SemdexError, ValueError):
    """Raised when encoded vector text cannot be decoded (or a vector cannot be encoded)."""


class DimensionMismatchError(SemdexError, ValueError):
    """Raised when an embedding does not have the corpus-wide dimensionality."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected embedding of dimension {expected}, got {actual}")


class MetadataLoadError(SemdexError):
    """Raised when the metadata source cannot be loaded.

    Loading metadata is all-or-nothing: one malformed row aborts the
    whole ingestion run.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class ChunkStoreError(SemdexError):
    """Raised when the chunk store rejects an operation (e.g. duplicate id)."""
