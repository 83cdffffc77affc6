"""Flat search record model.

One ``SearchRecord`` exists per documented entity. Records are derived from
the doc model, never authored, and are independently rankable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class RecordKind(Enum):
    """Kind of documented entity a record stands for.

    ``priority`` breaks ties between records that matched on the same tier:
    modules first, then types, functions, constants and constructors.
    """

    MODULE = "module"
    TYPE = "type"
    CONSTRUCTOR = "constructor"
    CONSTANT = "constant"
    FUNCTION = "function"

    @property
    def priority(self) -> int:
        return _KIND_PRIORITY[self]


_KIND_PRIORITY = {
    RecordKind.MODULE: 0,
    RecordKind.TYPE: 1,
    RecordKind.FUNCTION: 2,
    RecordKind.CONSTANT: 3,
    RecordKind.CONSTRUCTOR: 4,
}


@dataclass(frozen=True)
class SearchRecord:
    """Searchable unit derived from one documented entity.

    Attributes:
        id: Position in the flattened record sequence (stable per run)
        title: Display title (entity name, or module path for modules)
        kind: Entity kind
        parent: Parent module path ("" for module records)
        location: Navigable page location, e.g. "aiken/list.html#function-map"
        preview: Plain-text documentation excerpt, bounded in length
    """

    id: int
    title: str
    kind: RecordKind
    parent: str
    location: str
    preview: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to its serialized payload form (fixed key order)."""
        return {
            "id": self.id,
            "title": self.title,
            "kind": self.kind.value,
            "parent": self.parent,
            "location": self.location,
            "preview": self.preview,
        }
