"""Search result models for the docs query engine.

This module defines what the query engine hands back to callers: ranked
matches annotated with the tier that produced them and the character ranges
to highlight, wrapped in a ``QueryResult`` tagged with the generation of the
query that produced it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from aiken_docs_mcp.docs.models.search_record import SearchRecord


class MatchTier(Enum):
    """Match-quality bucket, lower is better."""

    EXACT = 0
    PREFIX = 1
    TITLE_SUBSTRING = 2
    PREVIEW_SUBSTRING = 3
    FUZZY = 4


class QueryStatus(Enum):
    """Outcome of a query.

    - EMPTY: the query normalized to nothing; there is no active search
    - RESULTS: at least one record matched
    - NO_RESULTS: the query was evaluated and nothing matched
    """

    EMPTY = "empty"
    RESULTS = "results"
    NO_RESULTS = "no_results"


@dataclass(frozen=True)
class Highlight:
    """Half-open character range [start, end) within a record field."""

    field: str  # "title" or "preview"
    start: int
    end: int

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "start": self.start, "end": self.end}


@dataclass(frozen=True)
class SearchMatch:
    """Single ranked match.

    Attributes:
        record: The matched SearchRecord
        tier: Tier that admitted the record
        rank: Result ranking (1-based, 1 is best)
        highlights: Ranges to highlight in the title or preview

    Usage:
        >>> match.get_highlighted_title()
        '**Da**tum'
    """

    record: SearchRecord
    tier: MatchTier
    rank: int
    highlights: Tuple[Highlight, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "record": self.record.to_dict(),
            "tier": self.tier.value,
            "rank": self.rank,
            "highlights": [h.to_dict() for h in self.highlights],
        }

    def get_highlighted_title(self, highlight_tag: str = "**") -> str:
        """Render the title with its highlight ranges wrapped in ``highlight_tag``."""
        return _apply_highlights(self.record.title, self._spans("title"), highlight_tag)

    def get_highlighted_preview(self, highlight_tag: str = "**") -> str:
        """Render the preview with its highlight ranges wrapped in ``highlight_tag``."""
        return _apply_highlights(self.record.preview, self._spans("preview"), highlight_tag)

    def _spans(self, field_name: str) -> List[Tuple[int, int]]:
        return sorted((h.start, h.end) for h in self.highlights if h.field == field_name)


@dataclass(frozen=True)
class QueryResult:
    """Bounded, ranked answer to one query.

    Attributes:
        generation: Generation tag of the query (see SearchSession)
        query: Normalized query text
        status: EMPTY, RESULTS or NO_RESULTS
        matches: Ranked matches, at most the configured bound
        degraded: True when the fuzzy tier was skipped for budget reasons
    """

    generation: int
    query: str
    status: QueryStatus
    matches: Tuple[SearchMatch, ...] = ()
    degraded: bool = False
    total_candidates: int = field(default=0, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generation": self.generation,
            "query": self.query,
            "status": self.status.value,
            "matches": [m.to_dict() for m in self.matches],
            "degraded": self.degraded,
            "total_candidates": self.total_candidates,
        }


def _apply_highlights(text: str, spans: List[Tuple[int, int]], tag: str) -> str:
    parts = []
    cursor = 0
    for start, end in spans:
        if start < cursor:
            continue
        parts.append(text[cursor:start])
        parts.append(f"{tag}{text[start:end]}{tag}")
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)
