"""Response envelope contracts for the docs tools.

Every tool result is an ``{ok, data, error}`` envelope. Browse and query
payloads share the ``DocsData`` shape; the query summary and the
module-not-found error details have their own models so both tools report
them the same way.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

DocsSource = Literal["modules", "search"]
DocsAction = Literal["browse", "query"]


class ToolError(BaseModel):
    """Structured business error for tool payloads."""

    code: str = Field(description="Stable machine-readable error code")
    message: str = Field(description="Human-readable error summary")
    details: dict[str, Any] | None = Field(default=None, description="Structured error details")


class ToolEnvelope(BaseModel):
    """Unified response shape for all tool business results."""

    ok: bool = Field(description="Business-level success flag")
    data: Any | None = Field(default=None, description="Tool-specific payload")
    error: ToolError | None = Field(default=None, description="Structured error payload")

    @model_validator(mode="after")
    def _validate_coherence(self) -> "ToolEnvelope":
        if self.ok and self.error is not None:
            raise ValueError("ok=true responses must not include error")
        if not self.ok and self.error is None:
            raise ValueError("ok=false responses must include error")
        return self


class DocsData(BaseModel):
    """Inner `data` schema shared by the browse and query tools."""

    source: DocsSource
    action: DocsAction
    entries: list[dict[str, Any]]
    summary: dict[str, Any] = Field(default_factory=dict)


class QuerySummary(BaseModel):
    """Summary of one docs query.

    ``status`` distinguishes an evaluated query with no matches
    ("no_results") from one that had nothing to evaluate ("empty").
    ``hints`` and ``available_modules`` are only filled when nothing matched.
    """

    count: int
    status: Literal["empty", "results", "no_results"]
    total_matches: int
    degraded: bool = False
    hints: list[str] | None = None
    available_modules: list[str] | None = None


class ModuleNotFound(BaseModel):
    """Details of a browse request for a module the site doesn't have."""

    source: DocsSource = "modules"
    input: dict[str, str]
    available_modules: list[str]


def build_ok(data: Any) -> dict[str, Any]:
    """Build and validate a success envelope."""
    return ToolEnvelope(ok=True, data=data).model_dump(exclude_none=True)


def build_error(code: str, message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build and validate an error envelope."""
    return ToolEnvelope(
        ok=False,
        error=ToolError(code=code, message=message, details=details),
    ).model_dump(exclude_none=True)


def build_module_not_found(name: str, available: list[str]) -> dict[str, Any]:
    """Error envelope for an unknown module path."""
    details = ModuleNotFound(input={"module": name}, available_modules=available)
    return build_error("module_not_found", f"Module not found: {name}", details.model_dump())


def build_docs_data(
    *,
    source: DocsSource,
    action: DocsAction,
    entries: list[dict[str, Any]],
    summary: dict[str, Any] | BaseModel | None = None,
) -> dict[str, Any]:
    """Build and validate documentation tool `data` payloads."""
    if isinstance(summary, BaseModel):
        summary = summary.model_dump(exclude_none=True)
    return DocsData(
        source=source,
        action=action,
        entries=entries,
        summary=summary or {},
    ).model_dump()
