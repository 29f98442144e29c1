# src/semdex/configuration/providers/litellm.py
"""LiteLLM provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from semdex.embedder import Embedder
    from semdex.settings import Settings


@dataclass(frozen=True)
class LiteLLMProvider:
    """Provider configuration using LiteLLM for embedding calls.

    LiteLLM provides a unified interface to many embedding providers
    including Ollama, OpenAI, Mistral and Bedrock.

    Args:
        embedding: LiteLLM model identifier for embeddings.
                   Examples: "ollama/mxbai-embed-large", "openai/text-embedding-3-small"
        api_key: Optional API key for the embedding provider.
        api_base: Optional base URL (e.g. a self-hosted Ollama).
        dimensions: Optional output dimensions, for models that support shortening.

    Example:
        provider = LiteLLMProvider(embedding="ollama/mxbai-embed-large")
    """

    embedding: str
    api_key: str | None = None
    api_base: str | None = None
    dimensions: int | None = None

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build a ClientEmbedder using the LiteLLM embedding client.

        Args:
            settings: Settings with num_retries (rate limit handling) and
                embedding_dimension (checked on every returned vector).
        """
        from semdex.embedder import ClientEmbedder
        from semdex.providers.litellm import LiteLLMEmbeddingClient

        embedding_client = LiteLLMEmbeddingClient(
            model=self.embedding,
            num_retries=settings.num_retries,
            api_key=self.api_key,
            api_base=self.api_base,
            dimensions=self.dimensions,
        )
        return ClientEmbedder(
            embedding_client=embedding_client,
            dimension=settings.embedding_dimension,
        )
