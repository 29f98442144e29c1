# tests/embedder/test_embedder.py
"""Tests for the LiteLLM embedding client and ClientEmbedder."""

from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("litellm", reason="Tests require litellm package")

from semdex.embedder import ClientEmbedder, Embedder
from semdex.exceptions import DimensionMismatchError
from semdex.providers.base import EmbeddingClient
from semdex.providers.litellm import EmbeddingModels, LiteLLMEmbeddingClient


def mock_embedding_response(embeddings: list[list[float]], reverse: bool = False):
    """Create a mock LiteLLM embedding response."""
    mock_response = MagicMock()
    data = [{"index": i, "embedding": emb} for i, emb in enumerate(embeddings)]
    mock_response.data = list(reversed(data)) if reverse else data
    return mock_response


@pytest.fixture
def client():
    return LiteLLMEmbeddingClient()


class TestLiteLLMEmbeddingClient:
    def test_is_embedding_client(self, client):
        assert isinstance(client, EmbeddingClient)

    def test_default_model(self, client):
        assert client.model == EmbeddingModels.OLLAMA_MXBAI_EMBED_LARGE
        assert client.model == "ollama/mxbai-embed-large"

    @patch("semdex.providers.litellm.client.litellm.embedding")
    def test_embed(self, mock_embedding, client):
        mock_embedding.return_value = mock_embedding_response([[0.1, 0.2], [0.3, 0.4]])

        result = client.embed(["Klimaschutz", "Bildung"])

        assert result == [[0.1, 0.2], [0.3, 0.4]]
        mock_embedding.assert_called_once_with(
            model="ollama/mxbai-embed-large",
            input=["Klimaschutz", "Bildung"],
            num_retries=3,
        )

    @patch("semdex.providers.litellm.client.litellm.embedding")
    def test_embed_restores_input_order(self, mock_embedding, client):
        mock_embedding.return_value = mock_embedding_response([[1.0], [2.0]], reverse=True)

        assert client.embed(["a", "b"]) == [[1.0], [2.0]]

    @patch("semdex.providers.litellm.client.litellm.embedding")
    def test_embed_empty(self, mock_embedding, client):
        assert client.embed([]) == []
        mock_embedding.assert_not_called()

    @patch("semdex.providers.litellm.client.litellm.embedding")
    def test_optional_arguments(self, mock_embedding):
        mock_embedding.return_value = mock_embedding_response([[0.5]])
        client = LiteLLMEmbeddingClient(
            model="openai/text-embedding-3-small",
            num_retries=1,
            api_key="sk-test",
            api_base="http://localhost:4000",
            dimensions=1024,
        )

        client.embed(["x"])

        mock_embedding.assert_called_once_with(
            model="openai/text-embedding-3-small",
            input=["x"],
            num_retries=1,
            api_key="sk-test",
            api_base="http://localhost:4000",
            dimensions=1024,
        )

    @patch("semdex.providers.litellm.client.litellm.embedding")
    def test_errors_propagate(self, mock_embedding, client):
        mock_embedding.side_effect = ConnectionError("ollama unreachable")

        with pytest.raises(ConnectionError):
            client.embed(["x"])


class TestClientEmbedder:
    def test_is_embedder(self):
        assert isinstance(ClientEmbedder(MagicMock(spec=EmbeddingClient)), Embedder)

    def test_embed_text(self):
        embedding_client = MagicMock(spec=EmbeddingClient)
        embedding_client.embed.return_value = [[0.1, 0.2, 0.3]]

        result = ClientEmbedder(embedding_client).embed_text("Hallo")

        assert result == [0.1, 0.2, 0.3]
        embedding_client.embed.assert_called_once_with(["Hallo"])

    def test_embed_text_wrong_count(self):
        embedding_client = MagicMock(spec=EmbeddingClient)
        embedding_client.embed.return_value = []

        with pytest.raises(RuntimeError):
            ClientEmbedder(embedding_client).embed_text("Hallo")

    def test_embed_texts(self):
        embedding_client = MagicMock(spec=EmbeddingClient)
        embedding_client.embed.return_value = [[1.0], [2.0]]

        assert ClientEmbedder(embedding_client).embed_texts(["a", "b"]) == [[1.0], [2.0]]

    def test_embed_texts_empty(self):
        embedding_client = MagicMock(spec=EmbeddingClient)

        assert ClientEmbedder(embedding_client).embed_texts([]) == []
        embedding_client.embed.assert_not_called()

    def test_dimension_checked(self):
        embedding_client = MagicMock(spec=EmbeddingClient)
        embedding_client.embed.return_value = [[0.1, 0.2]]

        with pytest.raises(DimensionMismatchError):
            ClientEmbedder(embedding_client, dimension=1024).embed_text("Hallo")

    def test_dimension_checked_in_batches(self):
        embedding_client = MagicMock(spec=EmbeddingClient)
        embedding_client.embed.return_value = [[1.0, 0.0], [1.0]]

        with pytest.raises(DimensionMismatchError):
            ClientEmbedder(embedding_client, dimension=2).embed_texts(["a", "b"])

    def test_matching_dimension(self):
        embedding_client = MagicMock(spec=EmbeddingClient)
        embedding_client.embed.return_value = [[1.0, 0.0]]

        assert ClientEmbedder(embedding_client, dimension=2).embed_text("a") == [1.0, 0.0]
