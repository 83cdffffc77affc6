"""Module Browse Tool - Navigate the documented modules of a project."""

from typing import Any

from fastmcp import FastMCP
from pydantic import Field

from aiken_docs_mcp.contracts import build_docs_data, build_module_not_found, build_ok
from aiken_docs_mcp.docs.locations import location_for, page_path
from aiken_docs_mcp.docs.models import Module, RecordKind
from aiken_docs_mcp.docs.search.preprocessing import make_preview
from aiken_docs_mcp.docs.site import DocsSite
from aiken_docs_mcp.utils import normalize_input


def register(mcp: FastMCP, site: DocsSite) -> None:
    """Register docs_browse_modules tool with the MCP server."""

    @mcp.tool()
    def docs_browse_modules(
        module: str | None = Field(
            None,
            description=(
                "Module path to browse. Examples:\n"
                "- None or '': List all modules\n"
                "- 'aiken/list': Every type, constructor, constant and function of aiken/list"
            ),
        ),
    ) -> dict[str, Any]:
        """Browse project documentation by module (like ls + cat).

        Navigation levels:
        - No module: All modules with entity counts
        - Module path: Full documentation of that module, in page order

        Related tools:
        - docs_query: Search every documented symbol (when the module is unknown)
        """
        name = normalize_input(module)

        if not name:
            return build_ok(browse_root(site))

        found = site.get_module(name)
        if found is None:
            return build_module_not_found(name, site.module_names())
        return build_ok(browse_module(found, site.config.preview_length))


def browse_root(site: DocsSite) -> dict[str, Any]:
    """Level 0: Return overview of all modules."""
    entries = []
    for module in site.modules:
        entry: dict[str, Any] = {
            "name": module.name,
            "location": page_path(module.name),
            "preview": make_preview(module.docs, site.config.preview_length),
        }
        entry.update(module.entity_counts())
        entries.append(entry)

    return build_docs_data(
        source="modules",
        action="browse",
        entries=entries,
        summary={
            "count": len(entries),
            "total_records": len(site.records),
        },
    )


def browse_module(module: Module, preview_length: int) -> dict[str, Any]:
    """Level 1: Return every member of one module, in page order."""
    entries: list[dict[str, Any]] = []

    for type_info in module.types:
        entries.append(
            {
                "kind": RecordKind.TYPE.value,
                "name": type_info.name,
                "location": location_for(module.name, RecordKind.TYPE, type_info.name),
                "definition": type_info.definition,
                "docs": type_info.docs,
            }
        )
        for constructor in type_info.constructors:
            entries.append(
                {
                    "kind": RecordKind.CONSTRUCTOR.value,
                    "name": constructor.name,
                    "type": type_info.name,
                    "location": location_for(
                        module.name, RecordKind.CONSTRUCTOR, constructor.name, type_info.name
                    ),
                    "definition": constructor.definition,
                    "docs": constructor.docs,
                    "arguments": [argument.to_dict() for argument in constructor.arguments],
                }
            )

    for constant in module.constants:
        entries.append(
            {
                "kind": RecordKind.CONSTANT.value,
                "name": constant.name,
                "location": location_for(module.name, RecordKind.CONSTANT, constant.name),
                "definition": constant.definition,
                "docs": constant.docs,
            }
        )

    for function in module.functions:
        entries.append(
            {
                "kind": RecordKind.FUNCTION.value,
                "name": function.name,
                "location": location_for(module.name, RecordKind.FUNCTION, function.name),
                "signature": function.signature,
                "docs": function.docs,
            }
        )

    summary: dict[str, Any] = {
        "module": module.name,
        "location": page_path(module.name),
        "docs": module.docs,
        "preview": make_preview(module.docs, preview_length),
        "count": len(entries),
    }
    summary.update(module.entity_counts())

    return build_docs_data(source="modules", action="browse", entries=entries, summary=summary)
