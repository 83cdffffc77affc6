"""Docs Query Tool - Ranked search over every documented symbol."""

from typing import Any

from fastmcp import FastMCP

from aiken_docs_mcp.contracts import QuerySummary, build_docs_data, build_ok
from aiken_docs_mcp.docs.site import DocsSite
from aiken_docs_mcp.utils import KindFilter, ModuleFilter, SearchLimit, SearchQuery

NO_RESULT_HINTS = (
    "Try a shorter prefix of the symbol name.",
    "Drop the kind or module filter.",
)


def register(mcp: FastMCP, site: DocsSite) -> None:
    """Register docs_query tool with the MCP server."""
    engine = site.engine()

    @mcp.tool()
    def docs_query(
        query: SearchQuery,
        limit: SearchLimit = 10,
        kind: KindFilter = None,
        module: ModuleFilter = None,
    ) -> dict[str, Any]:
        """Search documented modules, types, constructors, constants and functions.

        Exact title matches rank first, then title prefixes, title substrings,
        documentation matches and finally near-miss spellings.

        When to use:
        - You know (part of) a symbol name but not its module
        - Example: "Datum", "from_asset", "output reference"

        Related tools:
        - docs_browse_modules: Read the full documentation of a module
        """
        filters: dict[str, Any] = {}
        if kind:
            filters["kind"] = kind
        if module:
            filters["module"] = module.strip()

        result = engine.search(query, top_k=limit, filters=filters or None)

        entries: list[dict[str, Any]] = []
        for match in result.matches:
            record = match.record
            entries.append(
                {
                    "title": record.title,
                    "kind": record.kind.value,
                    "module": record.parent or record.title,
                    "location": record.location,
                    "preview": record.preview,
                    "tier": match.tier.name.lower(),
                    "rank": match.rank,
                    "highlights": [h.to_dict() for h in match.highlights],
                    "highlighted_title": match.get_highlighted_title(),
                }
            )

        summary = QuerySummary(
            count=len(entries),
            status=result.status.value,
            total_matches=result.total_candidates,
            degraded=result.degraded,
        )
        if not entries:
            summary.hints = list(NO_RESULT_HINTS)
            summary.available_modules = site.module_names()

        return build_ok(build_docs_data(source="search", action="query", entries=entries, summary=summary))
