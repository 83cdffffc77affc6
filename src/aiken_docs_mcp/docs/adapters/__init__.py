"""Document adapters for the docs search system.

This package converts the doc model into flat SearchRecords for indexing.
"""

from aiken_docs_mcp.docs.adapters.record_adapter import RecordAdapter, flatten_modules

__all__ = ["RecordAdapter", "flatten_modules"]
