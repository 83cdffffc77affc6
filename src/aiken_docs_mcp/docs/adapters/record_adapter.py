"""Search record adapter for the docs search system.

This module flattens the doc model into SearchRecords, one per module, type,
constructor, constant and function, so that every symbol is independently
searchable, including symbols without documentation.
"""

import logging
from typing import Iterable, List, Tuple

from aiken_docs_mcp.docs.locations import location_for
from aiken_docs_mcp.docs.models import Module, RecordKind, SearchRecord
from aiken_docs_mcp.docs.search.preprocessing import make_preview

logger = logging.getLogger("aiken-docs-mcp.records")

DEFAULT_PREVIEW_LENGTH = 140


class RecordAdapter:
    """Adapter from Module trees to flat SearchRecords.

    Record order is deterministic: for each module in order, the module
    record, then each type followed by its constructors, then constants,
    then functions. Record ids are positions in that sequence.

    Usage:
        >>> records = RecordAdapter(preview_length=140).flatten(modules)
        >>> records[0].kind
        <RecordKind.MODULE: 'module'>
    """

    def __init__(self, preview_length: int = DEFAULT_PREVIEW_LENGTH):
        self.preview_length = preview_length

    def flatten(self, modules: Iterable[Module]) -> Tuple[SearchRecord, ...]:
        """Emit one SearchRecord per documented entity.

        Args:
            modules: Modules of one generation run

        Returns:
            Tuple of SearchRecords in deterministic order
        """
        records: List[SearchRecord] = []

        for module in modules:
            self._emit(records, module.name, RecordKind.MODULE, module.name, "", module.docs)

            for type_info in module.types:
                self._emit(
                    records, type_info.name, RecordKind.TYPE, module.name, module.name, type_info.docs
                )
                for constructor in type_info.constructors:
                    self._emit(
                        records,
                        constructor.name,
                        RecordKind.CONSTRUCTOR,
                        module.name,
                        module.name,
                        constructor.docs,
                        owner=type_info.name,
                    )

            for constant in module.constants:
                self._emit(
                    records, constant.name, RecordKind.CONSTANT, module.name, module.name, constant.docs
                )

            for function in module.functions:
                self._emit(
                    records, function.name, RecordKind.FUNCTION, module.name, module.name, function.docs
                )

        logger.info("Flattened %d search records", len(records))
        return tuple(records)

    def _emit(
        self,
        records: List[SearchRecord],
        title: str,
        kind: RecordKind,
        module_name: str,
        parent: str,
        docs: str,
        owner: str | None = None,
    ) -> None:
        records.append(
            SearchRecord(
                id=len(records),
                title=title,
                kind=kind,
                parent=parent,
                location=location_for(module_name, kind, title, owner),
                preview=make_preview(docs, self.preview_length),
            )
        )


def flatten_modules(
    modules: Iterable[Module], preview_length: int = DEFAULT_PREVIEW_LENGTH
) -> Tuple[SearchRecord, ...]:
    """Flatten modules into SearchRecords (see RecordAdapter.flatten)."""
    return RecordAdapter(preview_length=preview_length).flatten(modules)
