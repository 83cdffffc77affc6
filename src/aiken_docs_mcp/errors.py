"""Error taxonomy for documentation generation and search.

Ingestion errors (``MalformedMetadata`` and its ``NameCollision`` subclass)
are fatal for a generation run and propagate to whoever asked for the model.
``QueryBudgetExceeded`` is raised and caught inside the query engine only;
callers observe it as a ``degraded`` result, never as an exception.
"""

from __future__ import annotations


class DocsError(Exception):
    """Base class for all documentation errors."""


class MalformedMetadata(DocsError):
    """Raised when compiler metadata is missing required fields or has the wrong shape.

    Attributes:
        path: Location of the offending value inside the metadata
            (e.g. ``modules[2].functions[0].name``)
    """

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        super().__init__(f"{message} (at {path})" if path else message)


class NameCollision(MalformedMetadata):
    """Raised when two entities of the same kind share a name within one owner.

    Attributes:
        path: Entity path of the collision (e.g. ``aiken/list.functions.map``)
        name: The colliding name
    """

    def __init__(self, path: str, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate name '{name}'", path)


class QueryBudgetExceeded(DocsError):
    """Raised when the fuzzy tier would exceed its length or time budget."""
