"""High-level query interfaces for the docs search system."""

from aiken_docs_mcp.docs.query.session import SearchSession, SessionState

__all__ = [
    "SearchSession",
    "SessionState",
]
