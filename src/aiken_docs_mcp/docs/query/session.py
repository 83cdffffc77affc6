"""Interactive search session: debouncing and stale-result handling.

A session follows one search surface through its lifecycle:

    IDLE -> DEBOUNCING -> MATCHING -> DISPLAYING -> IDLE

Every input bumps a generation counter. Results carry the generation of the
query that produced them and are dropped on arrival unless that generation
is still the current one, so the displayed result always belongs to the
most recent query. Tests can drive ``begin``/``deliver`` directly instead of
relying on timers.
"""

import asyncio
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from aiken_docs_mcp.docs.models import QueryResult
from aiken_docs_mcp.docs.search.engines import BaseSearchEngine
from aiken_docs_mcp.docs.search.preprocessing.tokenizer import TextTokenizer

logger = logging.getLogger("aiken-docs-mcp.session")


class SessionState(Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    MATCHING = "matching"
    DISPLAYING = "displaying"


class SearchSession:
    """Search session bound to one engine.

    Attributes:
        state: Current SessionState
        generation: Generation of the most recent input
        displayed: Result currently on display (None unless DISPLAYING)

    Raises:
        ValueError: If ``filters`` names an unknown record kind

    Usage:
        >>> session = SearchSession(engine, debounce_s=0.15)
        >>> session.input("dat")
        1
        >>> await session.wait()
        >>> session.displayed.status
        <QueryStatus.RESULTS: 'results'>
    """

    def __init__(
        self,
        engine: BaseSearchEngine,
        debounce_s: float | None = None,
        on_display: Callable[[QueryResult], Any] | None = None,
        top_k: int | None = None,
        filters: dict[str, Any] | None = None,
    ):
        self.engine = engine
        # Unknown kinds fail here, never inside the debounce task
        engine.build_filter(filters)

        self.debounce_s = engine.config.debounce_s if debounce_s is None else debounce_s
        self.on_display = on_display
        self.top_k = top_k
        self.filters = filters

        self.state = SessionState.IDLE
        self.generation = 0
        self.displayed: QueryResult | None = None
        self._task: asyncio.Task | None = None

    @property
    def is_pending(self) -> bool:
        """True while a query is debouncing or being matched."""
        return self.state in (SessionState.DEBOUNCING, SessionState.MATCHING)

    def begin(self, text: str) -> int:
        """Register new input without scheduling work; returns its generation.

        A blank query ends the active search: the session goes IDLE and any
        displayed result is cleared.
        """
        self._cancel_pending()
        self.generation += 1

        if not TextTokenizer.normalize_query(text):
            self.state = SessionState.IDLE
            self.displayed = None
        else:
            self.state = SessionState.DEBOUNCING
        return self.generation

    def input(self, text: str) -> int:
        """Handle a keystroke: restart the debounce timer for ``text``.

        Must be called from a running event loop.

        Returns:
            Generation assigned to this input
        """
        generation = self.begin(text)
        if self.state is SessionState.DEBOUNCING:
            self._task = asyncio.get_running_loop().create_task(self._run(text, generation))
        return generation

    def deliver(self, result: QueryResult) -> bool:
        """Display ``result`` if it belongs to the current generation.

        Returns:
            True if displayed, False if discarded as stale
        """
        if result.generation != self.generation or self.state is SessionState.IDLE:
            logger.debug(
                "Discarding stale result for generation %d (current %d)",
                result.generation,
                self.generation,
            )
            return False

        self.state = SessionState.DISPLAYING
        self.displayed = result
        if self.on_display is not None:
            self.on_display(result)
        return True

    def close(self) -> None:
        """Close the search surface; returns to IDLE from any state."""
        self._cancel_pending()
        self.generation += 1
        self.state = SessionState.IDLE
        self.displayed = None

    async def wait(self) -> None:
        """Wait for the outstanding debounce/match task, if any."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def _run(self, text: str, generation: int) -> None:
        await asyncio.sleep(self.debounce_s)
        if generation != self.generation:
            return

        self.state = SessionState.MATCHING
        result = await self.engine.search_async(
            text, top_k=self.top_k, filters=self.filters, generation=generation
        )
        self.deliver(result)

    def _cancel_pending(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
