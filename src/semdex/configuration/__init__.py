"""Configuration objects for semdex.

Instead of factory methods, you pass configuration objects that know how to
build their components.

Provider configurations (build the embedder):
- LiteLLMProvider: Uses LiteLLM for embedding calls

Storage configurations (build the chunk store):
- LocalStorage: SQLite file for local use
- PostgresStorage: PostgreSQL with pgvector

Example:
    from semdex import Semdex, LiteLLMProvider, LocalStorage

    sx = Semdex(
        provider=LiteLLMProvider(embedding="ollama/mxbai-embed-large"),
        storage=LocalStorage("./semdex_data"),
    )
"""

from semdex.configuration.base import ProviderConfig, StorageConfig
from semdex.configuration.providers import LiteLLMProvider
from semdex.configuration.storage import LocalStorage, PostgresStorage

__all__ = [
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
    "PostgresStorage",
]
