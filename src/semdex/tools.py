# src/semdex/tools.py
"""Tool-facing search operations.

These are the operations exposed to an LLM tool-calling layer. Each one has
a human-readable description constant that the transport layer can publish
alongside it; the descriptions are plain strings and carry no logic.
"""

from typing import Any

from semdex.retriever import Retriever
from semdex.settings import Settings

SEARCH_CHUNKS_DESCRIPTION = (
    "Searches the document collection with a natural-language query and returns "
    "the most relevant passages with title, topic, content and source link."
)
SEARCH_WITHIN_DOCUMENT_DESCRIPTION = (
    "Searches for relevant passages inside one specific document. Use this tool "
    "when you want to look into a single known document."
)
LIST_DOCUMENTS_DESCRIPTION = (
    "Lists all available documents (file names). Use this tool to find out which "
    "documents can be searched."
)

QUERY_PARAM_DESCRIPTION = (
    "The search query in natural language, e.g. 'climate protection' or 'education policy'"
)
LIMIT_PARAM_DESCRIPTION = "Number of results to return (1-20, default: 5)"
FILENAME_PARAM_DESCRIPTION = (
    "The file name of the document (or part of it), e.g. 'climate' or '2024-programme'"
)

TOOL_DESCRIPTIONS: dict[str, dict[str, Any]] = {
    "search_chunks": {
        "description": SEARCH_CHUNKS_DESCRIPTION,
        "parameters": {
            "query": QUERY_PARAM_DESCRIPTION,
            "limit": LIMIT_PARAM_DESCRIPTION,
        },
    },
    "search_within_document": {
        "description": SEARCH_WITHIN_DOCUMENT_DESCRIPTION,
        "parameters": {
            "filename_pattern": FILENAME_PARAM_DESCRIPTION,
            "query": QUERY_PARAM_DESCRIPTION,
            "limit": LIMIT_PARAM_DESCRIPTION,
        },
    },
    "list_documents": {
        "description": LIST_DOCUMENTS_DESCRIPTION,
        "parameters": {},
    },
}


def clamp_limit(limit: int | None, default: int = 5, maximum: int = 20) -> int:
    """Normalize a caller-supplied result limit.

    None or anything below 1 becomes ``default``; anything above ``maximum``
    becomes ``maximum``.
    """
    if limit is None or limit < 1:
        return default
    return min(limit, maximum)


class ChunkSearchTools:
    """The three tool operations over a Retriever.

    Results are plain dicts shaped ``{title, topic, content, sourceUrl, filename}``
    so the transport layer can serialize them directly.
    """

    def __init__(self, retriever: Retriever, settings: Settings | None = None) -> None:
        self.retriever = retriever
        self.settings = settings if settings is not None else Settings()

    def effective_limit(self, limit: int | None) -> int:
        return clamp_limit(limit, self.settings.default_limit, self.settings.max_limit)

    def search_chunks(self, query: str, limit: int | None = None) -> list[dict[str, Any]]:
        results = self.retriever.search(query, self.effective_limit(limit))
        return [r.model_dump(by_alias=True) for r in results]

    def search_within_document(
        self,
        filename_pattern: str,
        query: str,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        results = self.retriever.search_within(
            filename_pattern, query, self.effective_limit(limit)
        )
        return [r.model_dump(by_alias=True) for r in results]

    def list_documents(self) -> list[str]:
        return self.retriever.list_filenames()
