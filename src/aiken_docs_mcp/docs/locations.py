"""Navigable locations for documented entities.

Pages are named after their module; entities are addressed by a
kind-qualified in-page anchor so that, e.g., a type and a function sharing a
name never share a location. The page renderer emits the same anchors.
"""

from typing import Optional

from aiken_docs_mcp.docs.models.search_record import RecordKind


def page_path(module_name: str) -> str:
    """Relative page path of a module, e.g. "aiken/list" -> "aiken/list.html"."""
    return f"{module_name}.html"


def anchor_for(kind: RecordKind, name: str, owner: Optional[str] = None) -> str:
    """In-page anchor of an entity.

    Constructors are qualified by their owning type, since constructor names
    are only unique within a type.

    Example:
        >>> anchor_for(RecordKind.FUNCTION, "map")
        'function-map'
        >>> anchor_for(RecordKind.CONSTRUCTOR, "Some", owner="Option")
        'constructor-Option.Some'
    """
    if kind is RecordKind.MODULE:
        raise ValueError("Modules are addressed by page, not by anchor")
    if kind is RecordKind.CONSTRUCTOR:
        if not owner:
            raise ValueError("Constructor anchors require the owning type")
        return f"{kind.value}-{owner}.{name}"
    return f"{kind.value}-{name}"


def location_for(module_name: str, kind: RecordKind, name: str, owner: Optional[str] = None) -> str:
    """Full navigable location: page path plus anchor fragment (none for modules)."""
    if kind is RecordKind.MODULE:
        return page_path(module_name)
    return f"{page_path(module_name)}#{anchor_for(kind, name, owner)}"
