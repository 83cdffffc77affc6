"""Indexing utilities for the docs search system."""

from aiken_docs_mcp.docs.search.indexing.prefix_indexer import PrefixIndexer, SearchIndex

__all__ = ["PrefixIndexer", "SearchIndex"]
