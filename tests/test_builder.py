"""Tests for building the doc model from raw module descriptors."""

import dataclasses

import pytest

from aiken_docs_mcp.docs.builder import build_modules
from aiken_docs_mcp.docs.models import MatchTier
from aiken_docs_mcp.docs.models.descriptor import ModuleDescriptor
from aiken_docs_mcp.docs.site import build_site
from aiken_docs_mcp.errors import MalformedMetadata, NameCollision


def test_build_preserves_declaration_order(project_descriptors) -> None:
    modules = build_modules(project_descriptors)

    assert [m.name for m in modules] == ["aiken/list", "aiken/option", "cardano/transaction"]
    assert [f.name for f in modules[0].functions] == ["map", "filter", "length", "is_empty"]
    assert [c.name for c in modules[1].types[0].constructors] == ["Some", "None"]


def test_missing_docs_and_definitions_become_empty_strings() -> None:
    modules = build_modules(
        [
            {
                "name": "m",
                "docs": None,
                "types": [{"name": "T", "constructors": [{"name": "C", "arguments": [{"label": None}]}]}],
                "functions": [{"name": "f", "docs": None, "signature": None}],
            }
        ]
    )
    module = modules[0]

    assert module.docs == ""
    assert module.types[0].docs == ""
    assert module.types[0].definition == ""
    assert module.types[0].constructors[0].arguments[0].label == ""
    assert module.functions[0].signature == ""
    assert module.constants == ()


def test_missing_function_name_is_malformed() -> None:
    with pytest.raises(MalformedMetadata) as excinfo:
        build_modules([{"name": "m", "functions": [{"docs": "no name"}]}])

    assert excinfo.value.path == "modules[0].functions[0].name"
    assert not isinstance(excinfo.value, NameCollision)


def test_blank_module_name_is_malformed() -> None:
    with pytest.raises(MalformedMetadata) as excinfo:
        build_modules([{"name": "ok"}, {"name": "   "}])

    assert excinfo.value.path == "modules[1].name"


def test_missing_type_name_is_malformed() -> None:
    with pytest.raises(MalformedMetadata) as excinfo:
        build_modules([{"name": "m", "types": [{"name": "A"}, {"definition": "type ?"}]}])

    assert excinfo.value.path == "modules[0].types[1].name"


def test_non_mapping_descriptor_is_malformed() -> None:
    with pytest.raises(MalformedMetadata) as excinfo:
        build_modules(["not a module"])

    assert excinfo.value.path == "modules[0]"


def test_duplicate_function_raises_name_collision(example_descriptors) -> None:
    example_descriptors[0]["functions"].append({"name": "spending", "docs": "again"})

    result = None
    with pytest.raises(NameCollision) as excinfo:
        result = build_modules(example_descriptors)

    assert result is None
    assert excinfo.value.name == "spending"
    assert excinfo.value.path == "example.functions.spending"
    assert isinstance(excinfo.value, MalformedMetadata)


def test_duplicate_constructor_within_type_raises_name_collision() -> None:
    descriptors = [
        {
            "name": "m",
            "types": [{"name": "T", "constructors": [{"name": "A"}, {"name": "A"}]}],
        }
    ]

    with pytest.raises(NameCollision) as excinfo:
        build_modules(descriptors)

    assert excinfo.value.path == "m.types.T.constructors.A"


def test_duplicate_module_raises_name_collision() -> None:
    with pytest.raises(NameCollision) as excinfo:
        build_modules([{"name": "aiken/list"}, {"name": "aiken/list"}])

    assert excinfo.value.name == "aiken/list"


def test_same_name_across_kinds_and_owners_is_allowed() -> None:
    modules = build_modules(
        [
            {
                "name": "m",
                "types": [
                    {"name": "Foo", "constructors": [{"name": "Foo"}]},
                    {"name": "Bar", "constructors": [{"name": "Foo"}]},
                ],
                "constants": [{"name": "foo"}],
                "functions": [{"name": "Foo"}],
            },
            {"name": "n", "functions": [{"name": "Foo"}]},
        ]
    )

    assert len(modules) == 2
    assert modules[0].functions[0].name == "Foo"


def test_doc_model_is_immutable(example_descriptors) -> None:
    module = build_modules(example_descriptors)[0]

    with pytest.raises(dataclasses.FrozenInstanceError):
        module.name = "other"  # type: ignore[misc]
    assert isinstance(module.types, tuple)
    assert isinstance(module.types[0].constructors, tuple)


def test_accepts_validated_descriptors(example_descriptors) -> None:
    descriptor = ModuleDescriptor.model_validate(example_descriptors[0])

    modules = build_modules([descriptor])

    assert modules[0].types[0].constructors[0].arguments[0].label == "owner"


def test_entity_counts(example_descriptors) -> None:
    module = build_modules(example_descriptors)[0]

    assert module.entity_counts() == {"types": 2, "constructors": 3, "constants": 0, "functions": 1}


def test_entity_names_are_trimmed() -> None:
    site = build_site([{"name": " m ", "functions": [{"name": " map"}]}])

    assert site.modules[0].name == "m"
    assert site.modules[0].functions[0].name == "map"

    result = site.engine().search("map")
    assert [(m.record.title, m.tier, m.record.location) for m in result.matches] == [
        ("map", MatchTier.EXACT, "m.html#function-map")
    ]
