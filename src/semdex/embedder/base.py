# src/semdex/embedder/base.py
"""Embedder abstract base class."""

from abc import ABC, abstractmethod


class Embedder(ABC):
    """Turns query text into a vector in the same space as the stored chunks.

    The chunk vectors are computed ahead of time; an Embedder must use the
    same model (and dimensionality) that produced them, or distances between
    query and chunks are meaningless.
    """

    @abstractmethod
    def embed_text(self, text: str) -> list[float]:
        """Embed one text."""
        ...

    @abstractmethod
    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """Embed several texts, one vector per text in input order."""
        ...
