# src/semdex/providers/litellm/client.py
"""LiteLLM client implementation for embedding APIs."""

from typing import Any

import litellm

from semdex.providers.base import EmbeddingClient
from semdex.providers.litellm.models import EmbeddingModels


class LiteLLMEmbeddingClient(EmbeddingClient):
    """LiteLLM-based embedding client.

    Supports any embedding model available through LiteLLM.

    Example:
        from semdex.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels

        client = LiteLLMEmbeddingClient(model=EmbeddingModels.OLLAMA_MXBAI_EMBED_LARGE)
        embeddings = client.embed(["Klimaschutz", "Bildungspolitik"])

        # Local Ollama on a non-default host
        client = LiteLLMEmbeddingClient(
            model="ollama/mxbai-embed-large", api_base="http://ollama:11434"
        )
    """

    def __init__(
        self,
        model: str = EmbeddingModels.OLLAMA_MXBAI_EMBED_LARGE,
        num_retries: int = 3,
        api_key: str | None = None,
        api_base: str | None = None,
        dimensions: int | None = None,
    ) -> None:
        """Initialize the LiteLLM embedding client.

        Args:
            model: LiteLLM embedding model identifier.
                   Examples: "ollama/mxbai-embed-large", "openai/text-embedding-3-small"
            num_retries: Number of retries on rate limit errors. LiteLLM handles
                        exponential backoff automatically. Default: 3.
            api_key: Optional API key (otherwise read by LiteLLM from the environment).
            api_base: Optional base URL, e.g. for a self-hosted Ollama.
            dimensions: Optional output dimensions for models that support it.
        """
        self.model = model
        self.num_retries = num_retries
        self.api_key = api_key
        self.api_base = api_base
        self.dimensions = dimensions

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM."""
        if not texts:
            return []

        kwargs: dict[str, Any] = {
            "model": self.model,
            "input": texts,
            "num_retries": self.num_retries,
        }
        if self.api_key is not None:
            kwargs["api_key"] = self.api_key
        if self.api_base is not None:
            kwargs["api_base"] = self.api_base
        if self.dimensions is not None:
            kwargs["dimensions"] = self.dimensions

        response = litellm.embedding(**kwargs)
        # Sort by index to maintain order
        sorted_data = sorted(response.data, key=lambda x: x["index"])
        return [item["embedding"] for item in sorted_data]
