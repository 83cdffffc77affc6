"""Doc model builder.

Turns raw module descriptors from the compiler into the immutable doc model.
Validation happens here and only here: the first missing name or name
collision aborts the whole build, so callers either get every module or an
exception, never a partial model.
"""

import logging
from typing import Any, Iterable, Mapping, Sequence, Tuple, Union

from pydantic import BaseModel, ValidationError

from aiken_docs_mcp.docs.models.descriptor import ModuleDescriptor, TypeDescriptor
from aiken_docs_mcp.docs.models.module import (
    Argument,
    ConstantInfo,
    Constructor,
    FunctionInfo,
    Module,
    TypeInfo,
)
from aiken_docs_mcp.errors import MalformedMetadata, NameCollision

logger = logging.getLogger("aiken-docs-mcp.builder")

RawDescriptor = Union[Mapping[str, Any], ModuleDescriptor]


def build_modules(descriptors: Iterable[RawDescriptor]) -> Tuple[Module, ...]:
    """Build the doc model from raw module descriptors.

    Args:
        descriptors: Module descriptors in project order (decoded JSON
            mappings or already validated ModuleDescriptor instances)

    Returns:
        Tuple of Module values, one per descriptor, in input order

    Raises:
        MalformedMetadata: If a required name is missing or a descriptor has
            the wrong shape
        NameCollision: If two modules, or two entities of the same kind in
            the same owner, share a name

    Example:
        >>> modules = build_modules([{"name": "aiken/list", "functions": [{"name": "map"}]}])
        >>> modules[0].functions[0].name
        'map'
    """
    modules = []
    seen_modules = set()

    for position, raw in enumerate(descriptors):
        descriptor = _validate(raw, f"modules[{position}]")

        if descriptor.name in seen_modules:
            raise NameCollision(f"modules.{descriptor.name}", descriptor.name)
        seen_modules.add(descriptor.name)

        modules.append(_build_module(descriptor))

    logger.info("Built doc model for %d modules", len(modules))
    return tuple(modules)


def _validate(raw: RawDescriptor, path: str) -> ModuleDescriptor:
    if isinstance(raw, ModuleDescriptor):
        return raw
    if isinstance(raw, BaseModel):
        raw = raw.model_dump()
    try:
        return ModuleDescriptor.model_validate(raw)
    except ValidationError as exc:
        error = exc.errors()[0]
        raise MalformedMetadata(error["msg"], _format_loc(path, error["loc"])) from exc


def _format_loc(prefix: str, loc: Sequence[Union[str, int]]) -> str:
    parts = [prefix]
    for item in loc:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        else:
            parts.append(f".{item}")
    return "".join(parts)


def _check_unique(names: Iterable[str], owner_path: str) -> None:
    seen = set()
    for name in names:
        if name in seen:
            raise NameCollision(f"{owner_path}.{name}", name)
        seen.add(name)


def _build_module(descriptor: ModuleDescriptor) -> Module:
    _check_unique((t.name for t in descriptor.types), f"{descriptor.name}.types")
    _check_unique((c.name for c in descriptor.constants), f"{descriptor.name}.constants")
    _check_unique((f.name for f in descriptor.functions), f"{descriptor.name}.functions")

    return Module(
        name=descriptor.name,
        docs=descriptor.docs,
        types=tuple(_build_type(descriptor.name, t) for t in descriptor.types),
        constants=tuple(
            ConstantInfo(name=c.name, docs=c.docs, definition=c.definition) for c in descriptor.constants
        ),
        functions=tuple(
            FunctionInfo(name=f.name, docs=f.docs, signature=f.signature) for f in descriptor.functions
        ),
    )


def _build_type(module_name: str, descriptor: TypeDescriptor) -> TypeInfo:
    _check_unique(
        (c.name for c in descriptor.constructors),
        f"{module_name}.types.{descriptor.name}.constructors",
    )
    constructors = tuple(
        Constructor(
            name=c.name,
            definition=c.definition,
            docs=c.docs,
            arguments=tuple(Argument(label=a.label, docs=a.docs) for a in c.arguments),
        )
        for c in descriptor.constructors
    )
    return TypeInfo(
        name=descriptor.name,
        docs=descriptor.docs,
        definition=descriptor.definition,
        constructors=constructors,
    )
