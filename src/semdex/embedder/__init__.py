"""Embedding functionality for semdex."""

from semdex.embedder.base import Embedder
from semdex.embedder.client import ClientEmbedder

__all__ = ["Embedder", "ClientEmbedder"]
