"""Documentation model for Aiken modules.

This module defines the immutable tree produced by the doc model builder:
modules own types, constants and functions; types own constructors; and
constructors own arguments. All collections are tuples in declaration
order, since that order drives both page layout and search tie-breaking.

An empty string is the "no docs" sentinel everywhere; documentation and
definition fields are never ``None``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Argument:
    """Labelled constructor argument."""

    label: str
    docs: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "docs": self.docs}


@dataclass(frozen=True)
class Constructor:
    """Constructor of a sum type.

    Attributes:
        name: Constructor name, unique within its owning type
        definition: Raw definition text as printed by the compiler
        docs: Documentation text (markdown source)
        arguments: Constructor arguments in declaration order
    """

    name: str
    definition: str = ""
    docs: str = ""
    arguments: Tuple[Argument, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "definition": self.definition,
            "docs": self.docs,
            "arguments": [argument.to_dict() for argument in self.arguments],
        }


@dataclass(frozen=True)
class TypeInfo:
    """Documented type.

    Attributes:
        name: Type name, unique within its module
        docs: Documentation text (markdown source)
        definition: Raw definition text
        constructors: Constructors in declaration order (empty for non-sum types)
    """

    name: str
    docs: str = ""
    definition: str = ""
    constructors: Tuple[Constructor, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "docs": self.docs,
            "definition": self.definition,
            "constructors": [constructor.to_dict() for constructor in self.constructors],
        }


@dataclass(frozen=True)
class ConstantInfo:
    """Documented module constant."""

    name: str
    docs: str = ""
    definition: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "docs": self.docs, "definition": self.definition}


@dataclass(frozen=True)
class FunctionInfo:
    """Documented function with its printed signature."""

    name: str
    docs: str = ""
    signature: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "docs": self.docs, "signature": self.signature}


@dataclass(frozen=True)
class Module:
    """Documented compilation unit.

    Attributes:
        name: Module path, unique across the project (e.g. "aiken/list")
        docs: Module-level documentation text
        types: Types in declaration order
        constants: Constants in declaration order
        functions: Functions in declaration order

    Usage:
        >>> module = Module(
        ...     name="aiken/list",
        ...     docs="Operations on lists.",
        ...     functions=(FunctionInfo(name="map", signature="fn map(...)"),),
        ... )
        >>> module.entity_counts()
        {'types': 0, 'constructors': 0, 'constants': 0, 'functions': 1}
    """

    name: str
    docs: str = ""
    types: Tuple[TypeInfo, ...] = ()
    constants: Tuple[ConstantInfo, ...] = ()
    functions: Tuple[FunctionInfo, ...] = ()

    def entity_counts(self) -> Dict[str, int]:
        """Count nested entities per kind."""
        return {
            "types": len(self.types),
            "constructors": sum(len(t.constructors) for t in self.types),
            "constants": len(self.constants),
            "functions": len(self.functions),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert module tree to a dictionary for tool payloads and rendering."""
        return {
            "name": self.name,
            "docs": self.docs,
            "types": [type_info.to_dict() for type_info in self.types],
            "constants": [constant.to_dict() for constant in self.constants],
            "functions": [function.to_dict() for function in self.functions],
        }
