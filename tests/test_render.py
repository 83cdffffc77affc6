"""Tests for static page rendering."""

import json

from aiken_docs_mcp.docs.builder import build_modules
from aiken_docs_mcp.docs.models import RecordKind
from aiken_docs_mcp.docs.render import SEARCH_DATA_PATH, render_module_page, render_site


def test_every_record_location_resolves_to_a_rendered_element(project_site) -> None:
    pages = render_site(project_site)

    for record in project_site.records:
        page, _, fragment = record.location.partition("#")
        assert page in pages
        if record.kind is RecordKind.MODULE:
            assert fragment == ""
        else:
            assert f'id="{fragment}"' in pages[page]


def test_render_site_outputs(project_site) -> None:
    pages = render_site(project_site, project="stdlib")

    assert sorted(pages) == sorted(
        ["aiken/list.html", "aiken/option.html", "cardano/transaction.html", "index.html", SEARCH_DATA_PATH]
    )
    assert json.loads(pages[SEARCH_DATA_PATH]) == project_site.search_payload()
    assert 'href="aiken/list.html"' in pages["index.html"]
    assert "<title>aiken/list - stdlib</title>" in pages["aiken/list.html"]


def test_nested_pages_link_back_to_root(project_site) -> None:
    page = render_module_page(project_site.modules[0])

    assert 'href="../index.html"' in page
    assert 'data-search-data="../search-data.json"' in page


def test_docs_are_rendered_as_markdown(project_site) -> None:
    page = render_module_page(project_site.modules[0])

    assert "<strong>lists</strong>" in page


def test_definitions_are_escaped() -> None:
    module = build_modules(
        [{"name": "m", "functions": [{"name": "f", "signature": "fn f(x: List<Int>) -> Bool"}]}]
    )[0]

    page = render_module_page(module)

    assert "List&lt;Int&gt;" in page
    assert "List<Int>" not in page
