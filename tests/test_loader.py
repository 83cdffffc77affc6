"""Tests for reading compiler metadata files."""

import json

import pytest

from aiken_docs_mcp.docs.loader import load_descriptors
from aiken_docs_mcp.docs.site import build_site_async, load_site
from aiken_docs_mcp.errors import MalformedMetadata


def test_load_list_document(tmp_path, project_descriptors) -> None:
    path = tmp_path / "docs.json"
    path.write_text(json.dumps(project_descriptors), encoding="utf-8")

    assert load_descriptors(path) == project_descriptors


def test_load_object_document(tmp_path, example_descriptors) -> None:
    path = tmp_path / "docs.json"
    path.write_text(json.dumps({"modules": example_descriptors}), encoding="utf-8")

    site = load_site(path)

    assert site.module_names() == ["example"]
    assert len(site.records) == 7


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_descriptors(tmp_path / "absent.json")


def test_invalid_json(tmp_path) -> None:
    path = tmp_path / "docs.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(MalformedMetadata) as excinfo:
        load_descriptors(path)

    assert excinfo.value.path == str(path)


def test_wrong_top_level_shape(tmp_path) -> None:
    path = tmp_path / "docs.json"
    path.write_text(json.dumps({"name": "example"}), encoding="utf-8")

    with pytest.raises(MalformedMetadata):
        load_descriptors(path)


@pytest.mark.asyncio
async def test_build_site_async(project_descriptors, project_site) -> None:
    site = await build_site_async(project_descriptors)

    assert site.records == project_site.records
    assert site.search_payload_json() == project_site.search_payload_json()
