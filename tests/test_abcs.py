"""Tests for remaining abstract base classes."""

from abc import ABC

import pytest

from semdex.embedder import Embedder
from semdex.providers.base import EmbeddingClient


class TestEmbedderABC:
    def test_is_abstract(self):
        assert issubclass(Embedder, ABC)

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            Embedder()

    def test_has_embed_methods(self):
        assert hasattr(Embedder, "embed_text")
        assert hasattr(Embedder, "embed_texts")


class TestEmbeddingClientABC:
    def test_is_abstract(self):
        assert issubclass(EmbeddingClient, ABC)

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            EmbeddingClient()

    def test_has_embed_method(self):
        assert hasattr(EmbeddingClient, "embed")
