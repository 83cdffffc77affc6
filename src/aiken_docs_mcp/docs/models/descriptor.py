"""Raw module descriptor schema, as emitted by the compiler.

These pydantic models validate the shape of the metadata at ingestion. They
are an input contract only; the builder converts them to the frozen doc
model in ``module.py`` and they never travel further downstream.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.functional_validators import AfterValidator, BeforeValidator


def _none_to_empty_str(value: Any) -> Any:
    return "" if value is None else value


def _none_to_empty_list(value: Any) -> Any:
    return [] if value is None else value


def validate_entity_name(value: str) -> str:
    """Strip surrounding whitespace; reject names that are empty or whitespace only."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("name cannot be empty or whitespace only")
    return stripped


EntityName = Annotated[str, AfterValidator(validate_entity_name)]
DocText = Annotated[str, BeforeValidator(_none_to_empty_str)]


class _Descriptor(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ArgumentDescriptor(_Descriptor):
    label: DocText = ""
    docs: DocText = ""


class ConstructorDescriptor(_Descriptor):
    name: EntityName
    definition: DocText = ""
    docs: DocText = ""
    arguments: Annotated[list[ArgumentDescriptor], BeforeValidator(_none_to_empty_list)] = Field(
        default_factory=list
    )


class TypeDescriptor(_Descriptor):
    name: EntityName
    docs: DocText = ""
    definition: DocText = ""
    constructors: Annotated[list[ConstructorDescriptor], BeforeValidator(_none_to_empty_list)] = Field(
        default_factory=list
    )


class ConstantDescriptor(_Descriptor):
    name: EntityName
    docs: DocText = ""
    definition: DocText = ""


class FunctionDescriptor(_Descriptor):
    name: EntityName
    docs: DocText = ""
    signature: DocText = ""


class ModuleDescriptor(_Descriptor):
    name: EntityName
    docs: DocText = ""
    types: Annotated[list[TypeDescriptor], BeforeValidator(_none_to_empty_list)] = Field(default_factory=list)
    constants: Annotated[list[ConstantDescriptor], BeforeValidator(_none_to_empty_list)] = Field(
        default_factory=list
    )
    functions: Annotated[list[FunctionDescriptor], BeforeValidator(_none_to_empty_list)] = Field(
        default_factory=list
    )
