"""Documentation and search models."""

from aiken_docs_mcp.docs.models.module import (
    Argument,
    ConstantInfo,
    Constructor,
    FunctionInfo,
    Module,
    TypeInfo,
)
from aiken_docs_mcp.docs.models.search_record import RecordKind, SearchRecord
from aiken_docs_mcp.docs.models.search_result import (
    Highlight,
    MatchTier,
    QueryResult,
    QueryStatus,
    SearchMatch,
)

__all__ = [
    "Argument",
    "ConstantInfo",
    "Constructor",
    "FunctionInfo",
    "Module",
    "TypeInfo",
    "RecordKind",
    "SearchRecord",
    "Highlight",
    "MatchTier",
    "QueryResult",
    "QueryStatus",
    "SearchMatch",
]
