"""Search infrastructure for the docs system.

Provides the index builder, the tiered query engine and the matching
primitives they share.
"""

from aiken_docs_mcp.docs.search.engines import BaseSearchEngine, TieredSearchEngine
from aiken_docs_mcp.docs.search.indexing import PrefixIndexer, SearchIndex

__all__ = [
    "BaseSearchEngine",
    "TieredSearchEngine",
    "PrefixIndexer",
    "SearchIndex",
]
