"""LiteLLM embedding client for semdex.

Usage:
    from semdex.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels
    from semdex.embedder import ClientEmbedder

    client = LiteLLMEmbeddingClient(model=EmbeddingModels.OLLAMA_MXBAI_EMBED_LARGE)
    embedder = ClientEmbedder(embedding_client=client)
"""

from semdex.providers.litellm.client import LiteLLMEmbeddingClient
from semdex.providers.litellm.models import EmbeddingModels

__all__ = ["LiteLLMEmbeddingClient", "EmbeddingModels"]
