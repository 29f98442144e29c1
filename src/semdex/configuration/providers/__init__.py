"""Provider configurations."""

from semdex.configuration.providers.litellm import LiteLLMProvider

__all__ = ["LiteLLMProvider"]
