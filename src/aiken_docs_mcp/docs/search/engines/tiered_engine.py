"""Tiered search engine for Aiken documentation.

Every record is assigned the best tier it reaches for a query:

    0  exact title match
    1  title prefix match
    2  title substring match
    3  preview substring match
    4  fuzzy title match (edit distance within tolerance)

Matches are ranked by tier, then kind priority (module, type, function,
constant, constructor), then title. Only the returned top-k are
highlighted, so highlighting cost is bounded by the result limit rather
than the corpus size.

The evaluation runs as a generator that pauses after each chunk of
records: ``search`` drains it in one go, ``search_async`` yields to the
event loop at every pause so a large corpus never blocks input handling.
"""

import asyncio
import logging
import time
from collections.abc import Callable, Iterator
from typing import Any

from aiken_docs_mcp.docs.models import (
    Highlight,
    MatchTier,
    QueryResult,
    QueryStatus,
    SearchMatch,
    SearchRecord,
)
from aiken_docs_mcp.docs.search.engines.base_engine import BaseSearchEngine
from aiken_docs_mcp.docs.search.keyword_matcher import (
    best_fuzzy_token,
    effective_tolerance,
    find_spans,
)
from aiken_docs_mcp.docs.search.preprocessing.tokenizer import TextTokenizer
from aiken_docs_mcp.errors import QueryBudgetExceeded

logger = logging.getLogger("aiken-docs-mcp.search")


class _Evaluation:
    """Mutable per-query state; never shared between queries."""

    def __init__(self, query: str, allowed: Callable[[int], bool]):
        self.query = query
        self.allowed = allowed
        self.best: dict[int, MatchTier] = {}
        self.degraded = False


class TieredSearchEngine(BaseSearchEngine):
    """Tiered search engine with prefix index lookups and a chunked fallback scan.

    Usage:
        >>> engine = TieredSearchEngine(index, DocsConfig(result_limit=20))
        >>> result = engine.search("Da")
        >>> result.matches[0].record.title, result.matches[0].tier
        ('Datum', <MatchTier.PREFIX: 1>)
        >>> result.matches[0].get_highlighted_title()
        '**Da**tum'
    """

    def search(
        self,
        query: str,
        top_k: int | None = None,
        filters: dict[str, Any] | None = None,
        generation: int = 0,
    ) -> QueryResult:
        normalized = TextTokenizer.normalize_query(query)
        if not normalized:
            return QueryResult(generation=generation, query="", status=QueryStatus.EMPTY)

        state = _Evaluation(normalized, self.build_filter(filters))
        for _ in self._evaluate(state):
            pass
        return self._finish(state, top_k, generation)

    async def search_async(
        self,
        query: str,
        top_k: int | None = None,
        filters: dict[str, Any] | None = None,
        generation: int = 0,
    ) -> QueryResult:
        normalized = TextTokenizer.normalize_query(query)
        if not normalized:
            return QueryResult(generation=generation, query="", status=QueryStatus.EMPTY)

        state = _Evaluation(normalized, self.build_filter(filters))
        for _ in self._evaluate(state):
            await asyncio.sleep(0)
        return self._finish(state, top_k, generation)

    def _evaluate(self, state: _Evaluation) -> Iterator[None]:
        """Assign each record its best tier, pausing after every chunk."""
        index = self.index
        query = state.query
        chunk_size = self.config.chunk_size

        # Tiers 0-1 straight from the title prefix map
        for record_id in index.ids_with_title_prefix(query):
            if state.allowed(record_id):
                exact = index.folded_titles[record_id] == query
                state.best[record_id] = MatchTier.EXACT if exact else MatchTier.PREFIX

        # Tier 2 candidates whose title tokens start with the query
        for record_id in index.ids_with_token_prefix(query):
            if record_id in state.best or not state.allowed(record_id):
                continue
            if query in index.folded_titles[record_id]:
                state.best[record_id] = MatchTier.TITLE_SUBSTRING
        yield

        # Tiers 2-3 by scanning whatever is left
        fuzzy_candidates = []
        for start in range(0, len(index), chunk_size):
            for record_id in range(start, min(start + chunk_size, len(index))):
                if record_id in state.best or not state.allowed(record_id):
                    continue
                if query in index.folded_titles[record_id]:
                    state.best[record_id] = MatchTier.TITLE_SUBSTRING
                elif query in index.folded_previews[record_id]:
                    state.best[record_id] = MatchTier.PREVIEW_SUBSTRING
                else:
                    fuzzy_candidates.append(record_id)
            yield

        # Tier 4, skipped entirely if it would blow its budget
        tolerance = effective_tolerance(query, self.config.fuzzy_tolerance)
        if tolerance == 0 or len(query) < self.config.fuzzy_min_query_length:
            return

        try:
            if len(query) > self.config.fuzzy_max_query_length:
                raise QueryBudgetExceeded(
                    f"query length {len(query)} exceeds {self.config.fuzzy_max_query_length}"
                )

            budget_ms = self.config.fuzzy_time_budget_ms
            spent_ms = 0.0
            fuzzy_matches = []
            for start in range(0, len(fuzzy_candidates), chunk_size):
                started = time.perf_counter()
                for record_id in fuzzy_candidates[start:start + chunk_size]:
                    if best_fuzzy_token(query, index.title_tokens[record_id], tolerance) is not None:
                        fuzzy_matches.append(record_id)
                    elapsed_ms = spent_ms + (time.perf_counter() - started) * 1000.0
                    if budget_ms > 0 and elapsed_ms > budget_ms:
                        raise QueryBudgetExceeded(f"fuzzy pass exceeded {budget_ms}ms")
                spent_ms += (time.perf_counter() - started) * 1000.0
                yield

            for record_id in fuzzy_matches:
                state.best[record_id] = MatchTier.FUZZY
        except QueryBudgetExceeded as exc:
            logger.debug("Skipping fuzzy tier for %r: %s", query, exc)
            state.degraded = True

    def _finish(self, state: _Evaluation, top_k: int | None, generation: int) -> QueryResult:
        records = self.index.records
        folded_titles = self.index.folded_titles

        ranked = sorted(
            state.best.items(),
            key=lambda item: (
                item[1].value,
                records[item[0]].kind.priority,
                folded_titles[item[0]],
                records[item[0]].title,
                item[0],
            ),
        )

        limit = top_k if top_k is not None else self.config.result_limit
        matches = tuple(
            SearchMatch(
                record=records[record_id],
                tier=tier,
                rank=rank,
                highlights=self._highlight(records[record_id], record_id, tier, state.query),
            )
            for rank, (record_id, tier) in enumerate(ranked[:max(0, limit)], start=1)
        )

        return QueryResult(
            generation=generation,
            query=state.query,
            status=QueryStatus.RESULTS if matches else QueryStatus.NO_RESULTS,
            matches=matches,
            degraded=state.degraded,
            total_candidates=len(ranked),
        )

    def _highlight(
        self, record: SearchRecord, record_id: int, tier: MatchTier, query: str
    ) -> tuple[Highlight, ...]:
        if tier is MatchTier.PREVIEW_SUBSTRING:
            spans = find_spans(record.preview, query)
            return tuple(Highlight("preview", start, end) for start, end in spans)

        if tier is MatchTier.FUZZY:
            tokens = self.index.title_tokens[record_id]
            tolerance = effective_tolerance(query, self.config.fuzzy_tolerance)
            best = best_fuzzy_token(query, tokens, tolerance)
            if best is None or best[0] == 0:
                return (Highlight("title", 0, len(record.title)),)
            spans = find_spans(record.title, tokens[best[0]], first_only=True)
            return tuple(Highlight("title", start, end) for start, end in spans)

        spans = find_spans(record.title, query, first_only=True)
        return tuple(Highlight("title", start, end) for start, end in spans)
