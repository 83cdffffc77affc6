"""Text preprocessing utilities for the docs search system.

This package provides title tokenization and markup stripping used when
building records and the search index.
"""

from aiken_docs_mcp.docs.search.preprocessing.markup import make_preview, strip_markup
from aiken_docs_mcp.docs.search.preprocessing.tokenizer import TextTokenizer

__all__ = [
    "TextTokenizer",
    "make_preview",
    "strip_markup",
]
