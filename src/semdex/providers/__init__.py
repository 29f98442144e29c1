"""Embedding provider implementations for semdex.

- EmbeddingClient: Abstract base class for embedding providers
- LiteLLM implementation (requires: pip install semdex[litellm])

Usage:
    from semdex.providers import EmbeddingClient
    from semdex.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels
"""

from semdex.providers.base import EmbeddingClient

try:
    from semdex.providers.litellm import EmbeddingModels, LiteLLMEmbeddingClient
except ImportError:
    from semdex._optional import _create_missing_dependency_class

    class EmbeddingModels:  # type: ignore[no-redef]
        """Placeholder - requires litellm package."""

        pass

    LiteLLMEmbeddingClient = _create_missing_dependency_class(  # type: ignore[misc,assignment]
        "LiteLLMEmbeddingClient", "litellm"
    )

__all__ = [
    "EmbeddingClient",
    "EmbeddingModels",
    "LiteLLMEmbeddingClient",
]
