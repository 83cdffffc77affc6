"""Prefix index builder for the docs search system.

The index answers exact and prefix title lookups by dictionary access and
keeps case-folded titles, previews and title tokens precomputed for the
substring and fuzzy fallback scan, so a query never re-derives them.

Design:
- Pure Python implementation
- Built once per generation run, published as an immutable value
- Record ids are positions in the record tuple
"""

import logging
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from aiken_docs_mcp.docs.models import SearchRecord
from aiken_docs_mcp.docs.search.preprocessing.tokenizer import TextTokenizer

logger = logging.getLogger("aiken-docs-mcp.index")


@dataclass(frozen=True)
class SearchIndex:
    """Immutable queryable structure over SearchRecords.

    Attributes:
        records: Indexed records; a record's id is its position here
        folded_titles: Case-folded title per record
        folded_previews: Case-folded preview per record
        title_tokens: Case-folded title tokens per record (full title first)
        title_prefixes: Prefix of a full folded title -> record ids
        token_prefixes: Prefix of any title token -> record ids
    """

    records: Tuple[SearchRecord, ...]
    folded_titles: Tuple[str, ...]
    folded_previews: Tuple[str, ...]
    title_tokens: Tuple[Tuple[str, ...], ...]
    title_prefixes: Mapping[str, Tuple[int, ...]]
    token_prefixes: Mapping[str, Tuple[int, ...]]

    def __len__(self) -> int:
        return len(self.records)

    def ids_with_title_prefix(self, prefix: str) -> Tuple[int, ...]:
        """Record ids whose folded title starts with ``prefix``."""
        return self.title_prefixes.get(prefix, ())

    def ids_with_token_prefix(self, prefix: str) -> Tuple[int, ...]:
        """Record ids having a title token that starts with ``prefix``."""
        return self.token_prefixes.get(prefix, ())

    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics for debugging.

        Example:
            >>> index.get_stats()
            {'record_count': 42, 'vocab_size': 61, 'prefix_count': 310,
             'kinds': {'module': 3, 'type': 8, ...}}
        """
        vocabulary = {token for tokens in self.title_tokens for token in tokens[1:]}
        kinds = Counter(record.kind.value for record in self.records)
        return {
            "record_count": len(self.records),
            "vocab_size": len(vocabulary),
            "prefix_count": len(self.token_prefixes),
            "kinds": dict(kinds),
        }


class PrefixIndexer:
    """Builder for SearchIndex values.

    Usage:
        >>> index = PrefixIndexer().build(records)
        >>> index.ids_with_title_prefix("da")
        (4,)
    """

    def __init__(self, tokenizer: TextTokenizer | None = None):
        self.tokenizer = tokenizer or TextTokenizer()

    def build(self, records: Iterable[SearchRecord]) -> SearchIndex:
        """Build the index in one pass over the records.

        Args:
            records: Flattened records; ids must equal their positions

        Returns:
            Fully built SearchIndex

        Raises:
            ValueError: If a record id doesn't match its position
        """
        record_list = list(records)
        title_prefixes: Dict[str, List[int]] = {}
        token_prefixes: Dict[str, List[int]] = {}
        folded_titles = []
        folded_previews = []
        all_tokens = []

        for position, record in enumerate(record_list):
            if record.id != position:
                raise ValueError(f"Record id {record.id} does not match position {position}")

            folded_title = record.title.strip().casefold()
            tokens = tuple(self.tokenizer.tokenize(record.title)) or (folded_title,)

            folded_titles.append(folded_title)
            folded_previews.append(record.preview.casefold())
            all_tokens.append(tokens)

            for end in range(1, len(folded_title) + 1):
                title_prefixes.setdefault(folded_title[:end], []).append(position)

            seen = set()
            for token in tokens[1:]:
                for end in range(1, len(token) + 1):
                    prefix = token[:end]
                    if prefix in seen:
                        continue
                    seen.add(prefix)
                    token_prefixes.setdefault(prefix, []).append(position)

        index = SearchIndex(
            records=tuple(record_list),
            folded_titles=tuple(folded_titles),
            folded_previews=tuple(folded_previews),
            title_tokens=tuple(all_tokens),
            title_prefixes=MappingProxyType({k: tuple(v) for k, v in title_prefixes.items()}),
            token_prefixes=MappingProxyType({k: tuple(v) for k, v in token_prefixes.items()}),
        )
        logger.info("Built search index over %d records (%d token prefixes)", len(index), len(token_prefixes))
        return index
