# src/semdex/embedder/client.py
"""Client-based embedder implementation."""

from semdex.embedder.base import Embedder
from semdex.exceptions import DimensionMismatchError
from semdex.providers.base import EmbeddingClient


class ClientEmbedder(Embedder):
    """Embedder backed by an EmbeddingClient.

    If ``dimension`` is given, every returned vector is checked against it so
    that a misconfigured model fails here instead of inside the vector store.

    Example:
        from semdex.providers.litellm import LiteLLMEmbeddingClient
        from semdex.embedder import ClientEmbedder

        client = LiteLLMEmbeddingClient(model="ollama/mxbai-embed-large")
        embedder = ClientEmbedder(embedding_client=client, dimension=1024)
    """

    def __init__(self, embedding_client: EmbeddingClient, dimension: int | None = None) -> None:
        """Initialize the embedder.

        Args:
            embedding_client: Any EmbeddingClient implementation
            dimension: Expected vector size, or None to accept any
        """
        self._client = embedding_client
        self.dimension = dimension

    def embed_text(self, text: str) -> list[float]:
        result = self._client.embed([text])
        if len(result) != 1:
            raise RuntimeError(f"Embedding client returned {len(result)} vectors for 1 text")
        return self._checked(result[0])

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []
        return [self._checked(vector) for vector in self._client.embed(texts)]

    def _checked(self, vector: list[float]) -> list[float]:
        if self.dimension is not None and len(vector) != self.dimension:
            raise DimensionMismatchError(self.dimension, len(vector))
        return vector
