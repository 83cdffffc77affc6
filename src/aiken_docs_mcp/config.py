"""Runtime configuration for the Aiken docs server and search engine."""

from dataclasses import dataclass
import os


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class DocsConfig:
    metadata_path: str | None = None
    preview_length: int = 140
    result_limit: int = 20
    fuzzy_tolerance: int = 2
    fuzzy_min_query_length: int = 3
    fuzzy_max_query_length: int = 32
    fuzzy_time_budget_ms: float = 8.0
    debounce_ms: float = 150.0
    chunk_size: int = 256

    @property
    def debounce_s(self) -> float:
        return self.debounce_ms / 1000.0


def get_docs_config() -> DocsConfig:
    """Load docs config from environment variables."""
    metadata_path = os.getenv("AIKEN_DOCS_METADATA_PATH")
    return DocsConfig(
        metadata_path=metadata_path if metadata_path else None,
        preview_length=max(0, _env_int("AIKEN_DOCS_PREVIEW_LENGTH", 140)),
        result_limit=max(1, _env_int("AIKEN_DOCS_RESULT_LIMIT", 20)),
        fuzzy_tolerance=max(0, _env_int("AIKEN_DOCS_FUZZY_TOLERANCE", 2)),
        fuzzy_min_query_length=max(1, _env_int("AIKEN_DOCS_FUZZY_MIN_QUERY_LENGTH", 3)),
        fuzzy_max_query_length=max(1, _env_int("AIKEN_DOCS_FUZZY_MAX_QUERY_LENGTH", 32)),
        fuzzy_time_budget_ms=max(0.0, _env_float("AIKEN_DOCS_FUZZY_TIME_BUDGET_MS", 8.0)),
        debounce_ms=max(0.0, _env_float("AIKEN_DOCS_DEBOUNCE_MS", 150.0)),
        chunk_size=max(1, _env_int("AIKEN_DOCS_CHUNK_SIZE", 256)),
    )
