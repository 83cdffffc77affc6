"""Shared sample metadata for docs tests."""

import copy

import pytest

from aiken_docs_mcp.config import DocsConfig
from aiken_docs_mcp.docs.site import build_site


EXAMPLE_MODULES = [
    {
        "name": "example",
        "docs": "",
        "types": [
            {
                "name": "Datum",
                "docs": "Data attached to a locked output.",
                "definition": "type Datum {\n  owner: ByteArray\n}",
                "constructors": [
                    {
                        "name": "Datum",
                        "definition": "Datum { owner: ByteArray }",
                        "docs": "",
                        "arguments": [{"label": "owner", "docs": "Key hash of the **owner**."}],
                    }
                ],
            },
            {
                "name": "Redeemer",
                "docs": "Action requested by the spender.",
                "definition": "type Redeemer {\n  Claim\n  Cancel\n}",
                "constructors": [
                    {"name": "Claim", "definition": "Claim", "docs": "Take the funds."},
                    {"name": "Cancel", "definition": "Cancel", "docs": None},
                ],
            },
        ],
        "constants": [],
        "functions": [
            {
                "name": "spending",
                "docs": "Validate spending an output, given its `Datum` and the `Redeemer`.",
                "signature": "fn spending(datum: Datum, redeemer: Redeemer) -> Bool",
            }
        ],
    }
]


PROJECT_MODULES = [
    {
        "name": "aiken/list",
        "docs": "A module for working with **lists**.\n\nLists are immutable.",
        "types": [],
        "constants": [{"name": "empty", "docs": "The empty list.", "definition": "const empty = []"}],
        "functions": [
            {"name": "map", "docs": "Apply a function to every element.", "signature": "fn map(xs, f)"},
            {"name": "filter", "docs": "Keep elements matching a predicate.", "signature": "fn filter(xs, f)"},
            {"name": "length", "docs": "Count the elements.", "signature": "fn length(xs) -> Int"},
            {"name": "is_empty", "docs": "", "signature": "fn is_empty(xs) -> Bool"},
        ],
    },
    {
        "name": "aiken/option",
        "docs": "Helpers for optional values.",
        "types": [
            {
                "name": "Option",
                "docs": "A value that may be absent.",
                "definition": "type Option<a> {\n  Some(a)\n  None\n}",
                "constructors": [
                    {"name": "Some", "definition": "Some(a)", "docs": "A present value.",
                     "arguments": [{"label": "", "docs": ""}]},
                    {"name": "None", "definition": "None", "docs": "No value."},
                ],
            }
        ],
        "constants": [],
        "functions": [
            {"name": "option", "docs": "Build an option from a boolean.", "signature": "fn option(b, a)"},
            {"name": "map", "docs": "Transform the inner value of an `Option`.", "signature": "fn map(opt, f)"},
        ],
    },
    {
        "name": "cardano/transaction",
        "docs": "Transaction types & helpers.",
        "types": [
            {"name": "OutputReference", "docs": "Points at an output of a transaction.", "definition": ""},
            {"name": "ValidityRange", "docs": "", "definition": ""},
        ],
        "constants": [{"name": "placeholder", "docs": "", "definition": ""}],
        "functions": [
            {"name": "find_input", "docs": "Find an input by its `OutputReference`.", "signature": ""},
        ],
    },
]


@pytest.fixture
def example_descriptors() -> list[dict]:
    return copy.deepcopy(EXAMPLE_MODULES)


@pytest.fixture
def project_descriptors() -> list[dict]:
    return copy.deepcopy(PROJECT_MODULES)


@pytest.fixture
def example_site(example_descriptors):
    return build_site(example_descriptors, DocsConfig())


@pytest.fixture
def project_site(project_descriptors):
    return build_site(project_descriptors, DocsConfig())
