"""Base search engine interface for the docs search system.

This module defines the abstract interface that search engines implement,
and the record filtering shared by them.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from aiken_docs_mcp.config import DocsConfig
from aiken_docs_mcp.docs.models import QueryResult, RecordKind, SearchRecord
from aiken_docs_mcp.docs.search.indexing import SearchIndex


class BaseSearchEngine(ABC):
    """Abstract base class for search engines.

    The engine is handed an already built, immutable SearchIndex and never
    mutates it, so any number of queries may read it concurrently.

    Usage:
        >>> engine = TieredSearchEngine(index, config)
        >>> result = engine.search("datum", top_k=5)
        >>> [m.record.title for m in result.matches]
        ['Datum', 'spending']
    """

    def __init__(self, index: SearchIndex, config: DocsConfig | None = None):
        self.index = index
        self.config = config or DocsConfig()

    @abstractmethod
    def search(
        self,
        query: str,
        top_k: int | None = None,
        filters: dict[str, Any] | None = None,
        generation: int = 0,
    ) -> QueryResult:
        """Execute a query synchronously.

        Args:
            query: Raw user input
            top_k: Maximum number of matches (default: config.result_limit)
            filters: Optional filters:
                    - kind: Record kind ("type", "function", ...)
                    - module: Parent module path
            generation: Generation tag copied onto the result

        Returns:
            QueryResult; status EMPTY for a blank query. Never raises for
            budget overruns.
        """

    @abstractmethod
    async def search_async(
        self,
        query: str,
        top_k: int | None = None,
        filters: dict[str, Any] | None = None,
        generation: int = 0,
    ) -> QueryResult:
        """Execute a query, yielding to the event loop between record chunks."""

    def get_record_count(self) -> int:
        return len(self.index)

    def build_filter(self, filters: dict[str, Any] | None) -> Callable[[int], bool]:
        """Build a predicate over record ids from filter criteria.

        Example:
            >>> allowed = self.build_filter({"kind": "type", "module": "aiken/list"})
            >>> allowed(4)
            True

        Raises:
            ValueError: If ``kind`` is not a record kind
        """
        if not filters:
            return lambda record_id: True

        kind = filters.get("kind")
        if kind is not None and not isinstance(kind, RecordKind):
            kind = RecordKind(str(kind).lower())
        module = filters.get("module")
        records = self.index.records

        def allowed(record_id: int) -> bool:
            record = records[record_id]
            if kind is not None and record.kind is not kind:
                return False
            if module is not None and not _in_module(record, module):
                return False
            return True

        return allowed


def _in_module(record: SearchRecord, module: str) -> bool:
    if record.kind is RecordKind.MODULE:
        return record.title == module
    return record.parent == module
