"""Docs MCP tool implementations."""

from . import (
    browse_modules,
    query_docs,
)

__all__ = [
    "browse_modules",
    "query_docs",
]
