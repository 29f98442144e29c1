# src/semdex/providers/base.py
"""Abstract base class for embedding providers."""

from abc import ABC, abstractmethod


class EmbeddingClient(ABC):
    """Wraps a remote or local embedding API.

    Example:
        class OllamaClient(EmbeddingClient):
            def embed(self, texts):
                return [ollama.embeddings(model="mxbai-embed-large", prompt=t)["embedding"]
                        for t in texts]
    """

    @abstractmethod
    def embed(self, texts: list[str]) -> list[list[float]]:
        """Embed a batch of texts.

        Returns:
            One vector per input text; ``result[i]`` belongs to ``texts[i]``.
        """
        ...
