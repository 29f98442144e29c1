# tests/test_configuration.py
"""Tests for the configuration objects."""

import os
from dataclasses import FrozenInstanceError

import pytest

from semdex.configuration import (
    LiteLLMProvider,
    LocalStorage,
    PostgresStorage,
    ProviderConfig,
    StorageConfig,
)
from semdex.settings import Settings


class TestLocalStorage:
    def test_build_store(self, temp_dir):
        from semdex.stores import SQLiteChunkStore

        store = LocalStorage(temp_dir).build_store(Settings(embedding_dimension=3))

        assert isinstance(store, SQLiteChunkStore)
        assert store.db_path == os.path.join(temp_dir, "chunks.db")
        assert store.dimension == 3

    def test_build_store_creates_directory(self, temp_dir):
        new_dir = os.path.join(temp_dir, "new_storage")
        LocalStorage(new_dir).build_store(Settings())

        assert os.path.isdir(new_dir)

    def test_is_frozen_dataclass(self, temp_dir):
        storage = LocalStorage(temp_dir)

        with pytest.raises(FrozenInstanceError):
            storage.data_dir = "/other/path"  # type: ignore[misc]

    def test_satisfies_protocol(self, temp_dir):
        assert isinstance(LocalStorage(temp_dir), StorageConfig)


class TestPostgresStorage:
    def test_build_store(self):
        pytest.importorskip("psycopg", reason="This test requires psycopg")
        from unittest.mock import patch

        from semdex.stores import PgVectorChunkStore

        with patch("semdex.stores.pgvector_chunk.psycopg.connect"):
            store = PostgresStorage("postgresql://localhost/semdex", table="docs").build_store(
                Settings(embedding_dimension=768)
            )

        assert isinstance(store, PgVectorChunkStore)
        assert store.table == "docs"
        assert store.dimension == 768

    def test_satisfies_protocol(self):
        assert isinstance(PostgresStorage("postgresql://localhost/semdex"), StorageConfig)


class TestLiteLLMProvider:
    def test_build_embedder_returns_client_embedder(self):
        pytest.importorskip("litellm", reason="This test requires litellm")
        from semdex.embedder import ClientEmbedder

        provider = LiteLLMProvider(
            embedding="ollama/mxbai-embed-large",
            api_base="http://ollama:11434",
        )
        embedder = provider.build_embedder(Settings(num_retries=7))

        assert isinstance(embedder, ClientEmbedder)
        assert embedder._client.model == "ollama/mxbai-embed-large"
        assert embedder._client.api_base == "http://ollama:11434"
        assert embedder._client.num_retries == 7
        assert embedder.dimension == 1024

    def test_is_frozen_dataclass(self):
        provider = LiteLLMProvider(embedding="ollama/mxbai-embed-large")

        with pytest.raises(FrozenInstanceError):
            provider.embedding = "other"  # type: ignore[misc]

    def test_satisfies_protocol(self):
        assert isinstance(LiteLLMProvider(embedding="x"), ProviderConfig)
