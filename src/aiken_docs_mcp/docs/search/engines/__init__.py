"""Search engines for the docs search system."""

from aiken_docs_mcp.docs.search.engines.base_engine import BaseSearchEngine
from aiken_docs_mcp.docs.search.engines.tiered_engine import TieredSearchEngine

__all__ = ["BaseSearchEngine", "TieredSearchEngine"]
