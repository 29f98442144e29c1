"""Shared pytest fixtures."""

import os
import tempfile

import pytest

# Fixed ids so metadata rows and chunk rows can be joined in tests
ID_KLIMA_0 = "3f2b8c1e-6a4d-4e7b-9c21-0d5e8f7a1b01"
ID_KLIMA_1 = "3f2b8c1e-6a4d-4e7b-9c21-0d5e8f7a1b02"
ID_BILDUNG = "3f2b8c1e-6a4d-4e7b-9c21-0d5e8f7a1b03"

METADATA_HEADER = "id,filename,title,topic,summary,word_count"
CHUNKS_HEADER = "id,source_url,chunk_index,content,embedding"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test without SEMDEX_* variables and away from any semdex.yaml."""
    for key in list(os.environ):
        if key.startswith("SEMDEX_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores and data files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def settings():
    """Settings for three-dimensional test vectors."""
    from semdex.settings import Settings

    return Settings(embedding_dimension=3, progress_interval=2)


@pytest.fixture
def chunk_store(temp_dir):
    """Create an empty SQLiteChunkStore for 3-dimensional vectors."""
    from semdex.stores import SQLiteChunkStore

    return SQLiteChunkStore(os.path.join(temp_dir, "chunks.db"), dimension=3)


@pytest.fixture
def mock_embedder():
    """Create a mock embedder for testing."""
    from semdex.embedder import Embedder

    class MockEmbedder(Embedder):
        """Mock embedder that returns a fixed vector and records its inputs."""

        def __init__(self) -> None:
            self.vector = [1.0, 0.0, 0.0]
            self.calls: list[str] = []

        def embed_text(self, text: str) -> list[float]:
            self.calls.append(text)
            return list(self.vector)

        def embed_texts(self, texts: list[str]) -> list[list[float]]:
            return [self.embed_text(t) for t in texts]

    return MockEmbedder()


@pytest.fixture
def write_file(temp_dir):
    """Write lines to a file in the temp directory and return its path."""

    def _write(name: str, lines: list[str]) -> str:
        path = os.path.join(temp_dir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        return path

    return _write


@pytest.fixture
def metadata_file(write_file):
    """Metadata source covering the three joined chunk ids."""
    return write_file(
        "metadata.csv",
        [
            METADATA_HEADER,
            f'{ID_KLIMA_0},Klimaschutz-2024.pdf,"Klimaschutz, jetzt",Umwelt,kurz,120',
            f'{ID_KLIMA_1},Klimaschutz-2024.pdf,"Klimaschutz, jetzt",Umwelt,kurz,120',
            f'{ID_BILDUNG},Bildung.pdf,Gute Schulen,Bildung,"lang, sehr lang",80',
        ],
    )


@pytest.fixture
def chunks_file(write_file):
    """Chunk source with three valid rows."""
    return write_file(
        "embeddings.csv",
        [
            CHUNKS_HEADER,
            f'{ID_KLIMA_0},https://example.org/klima.pdf,0,'
            '"Mehr Bäume, weniger CO2","[1.0,0.0,0.0]"',
            f'{ID_KLIMA_1},https://example.org/klima.pdf,1,Windkraft ausbauen,"[0.9,0.1,0.0]"',
            f'{ID_BILDUNG},https://example.org/bildung.pdf,0,Kleinere Klassen,"[0.0,1.0,0.0]"',
        ],
    )
