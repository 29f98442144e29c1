# src/semdex/providers/litellm/models.py
"""Curated embedding model constants for the LiteLLM provider.

These are convenience constants for IDE autocomplete. Any valid LiteLLM
model string can be passed directly. The corpus dimension
(Settings.embedding_dimension) must match the model's output size.
"""


class EmbeddingModels:
    """Embedding models for LiteLLMEmbeddingClient / ClientEmbedder."""

    # Ollama (local) - 1024 dimensions
    OLLAMA_MXBAI_EMBED_LARGE = "ollama/mxbai-embed-large"
    OLLAMA_BGE_M3 = "ollama/bge-m3"

    # OpenAI (supports the dimensions parameter)
    TEXT_3_SMALL = "openai/text-embedding-3-small"
    TEXT_3_LARGE = "openai/text-embedding-3-large"

    # Mistral - 1024 dimensions
    MISTRAL_EMBED = "mistral/mistral-embed"

    # AWS Bedrock
    BEDROCK_TITAN_V2 = "bedrock/amazon.titan-embed-text-v2:0"
    BEDROCK_COHERE_V3 = "bedrock/cohere.embed-multilingual-v3"
