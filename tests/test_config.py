"""Tests for environment-driven docs configuration."""

from aiken_docs_mcp.config import DocsConfig, get_docs_config


def test_defaults(monkeypatch) -> None:
    for name in ("AIKEN_DOCS_METADATA_PATH", "AIKEN_DOCS_PREVIEW_LENGTH", "AIKEN_DOCS_DEBOUNCE_MS"):
        monkeypatch.delenv(name, raising=False)

    config = get_docs_config()

    assert config.metadata_path is None
    assert config.preview_length == 140
    assert config.debounce_s == 0.15


def test_env_overrides_and_clamping(monkeypatch) -> None:
    monkeypatch.setenv("AIKEN_DOCS_METADATA_PATH", "/tmp/docs.json")
    monkeypatch.setenv("AIKEN_DOCS_RESULT_LIMIT", "0")
    monkeypatch.setenv("AIKEN_DOCS_FUZZY_TOLERANCE", "-3")
    monkeypatch.setenv("AIKEN_DOCS_CHUNK_SIZE", "64")

    config = get_docs_config()

    assert config.metadata_path == "/tmp/docs.json"
    assert config.result_limit == 1
    assert config.fuzzy_tolerance == 0
    assert config.chunk_size == 64


def test_invalid_values_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("AIKEN_DOCS_PREVIEW_LENGTH", "long")
    monkeypatch.setenv("AIKEN_DOCS_FUZZY_TIME_BUDGET_MS", "soon")

    config = get_docs_config()

    assert config.preview_length == DocsConfig().preview_length
    assert config.fuzzy_time_budget_ms == 8.0
