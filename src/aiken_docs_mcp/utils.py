"""Validation models and utilities for the docs MCP tools."""

from typing import Annotated, Optional

from pydantic import Field
from pydantic.functional_validators import AfterValidator


# Search limits
DEFAULT_SEARCH_LIMIT = 10
MAX_SEARCH_LIMIT = 20

RECORD_KINDS = ("module", "type", "constructor", "constant", "function")


def normalize_input(value: Optional[str], lowercase: bool = False) -> str:
    """Normalize user input: collapse whitespace, optionally lowercase."""
    if value is None:
        return ""
    normalized = " ".join(value.split())
    return normalized.lower() if lowercase else normalized


def validate_non_empty_string(value: str) -> str:
    """Validate that a string is not empty after stripping whitespace."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("Value cannot be empty or whitespace only")
    return stripped


def validate_record_kind(value: Optional[str]) -> Optional[str]:
    """Validate an optional record kind filter."""
    if value is None:
        return None
    normalized = normalize_input(value, lowercase=True)
    if not normalized:
        return None
    if normalized not in RECORD_KINDS:
        raise ValueError(f"kind must be one of: {', '.join(RECORD_KINDS)}")
    return normalized


# Search query for documented symbols
SearchQuery = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(
        ...,
        min_length=1,
        description=(
            "Search text for documented symbols. Examples: 'Datum', 'from_asset', "
            "'aiken/list', 'output reference'. Case-insensitive, typo tolerant."
        ),
    ),
]

# Search limit
SearchLimit = Annotated[
    int,
    Field(
        default=DEFAULT_SEARCH_LIMIT,
        ge=1,
        le=MAX_SEARCH_LIMIT,
        description=f"Maximum number of results (1-{MAX_SEARCH_LIMIT}).",
    ),
]

KindFilter = Annotated[
    Optional[str],
    AfterValidator(validate_record_kind),
    Field(
        default=None,
        description=f"Only return records of this kind: {', '.join(RECORD_KINDS)}.",
    ),
]

ModuleFilter = Annotated[
    Optional[str],
    Field(default=None, description="Only return records of this module, e.g. 'aiken/list'."),
]
