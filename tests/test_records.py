"""Tests for flattening the doc model into search records."""

from collections import Counter

from aiken_docs_mcp.config import DocsConfig
from aiken_docs_mcp.docs.adapters import RecordAdapter, flatten_modules
from aiken_docs_mcp.docs.builder import build_modules
from aiken_docs_mcp.docs.models import RecordKind
from aiken_docs_mcp.docs.search.preprocessing import make_preview, strip_markup
from aiken_docs_mcp.docs.site import build_site


def test_one_record_per_entity_per_module(project_descriptors) -> None:
    modules = build_modules(project_descriptors)
    records = flatten_modules(modules)

    counts = Counter((r.parent, r.kind) for r in records)
    for module in modules:
        assert counts[("", RecordKind.MODULE)] == len(modules)
        assert counts[(module.name, RecordKind.TYPE)] == len(module.types)
        assert counts[(module.name, RecordKind.CONSTRUCTOR)] == sum(len(t.constructors) for t in module.types)
        assert counts[(module.name, RecordKind.CONSTANT)] == len(module.constants)
        assert counts[(module.name, RecordKind.FUNCTION)] == len(module.functions)


def test_record_order_and_ids(example_site) -> None:
    records = example_site.records

    assert [(r.kind.value, r.title) for r in records] == [
        ("module", "example"),
        ("type", "Datum"),
        ("constructor", "Datum"),
        ("type", "Redeemer"),
        ("constructor", "Claim"),
        ("constructor", "Cancel"),
        ("function", "spending"),
    ]
    assert [r.id for r in records] == list(range(len(records)))


def test_locations_are_unique_and_kind_qualified(example_site, project_site) -> None:
    for site in (example_site, project_site):
        locations = [r.location for r in site.records]
        assert len(locations) == len(set(locations))

    by_title = {(r.kind, r.title): r.location for r in example_site.records}
    assert by_title[(RecordKind.MODULE, "example")] == "example.html"
    assert by_title[(RecordKind.TYPE, "Datum")] == "example.html#type-Datum"
    assert by_title[(RecordKind.CONSTRUCTOR, "Datum")] == "example.html#constructor-Datum.Datum"
    assert by_title[(RecordKind.FUNCTION, "spending")] == "example.html#function-spending"


def test_preview_is_plain_text(example_site) -> None:
    spending = example_site.records[-1]

    assert spending.preview == "Validate spending an output, given its Datum and the Redeemer."
    assert example_site.records[0].parent == ""
    assert example_site.records[1].parent == "example"


def test_empty_docs_still_emit_a_record(example_site) -> None:
    cancel = [r for r in example_site.records if r.title == "Cancel"][0]

    assert cancel.preview == ""
    assert cancel.kind is RecordKind.CONSTRUCTOR


def test_preview_is_bounded(project_descriptors) -> None:
    project_descriptors[0]["functions"][0]["docs"] = "word " * 100

    site = build_site(project_descriptors, DocsConfig(preview_length=20))

    assert all(len(r.preview) <= 20 for r in site.records)
    assert site.records[2].preview == "word word word word"


def test_strip_markup_handles_blocks_and_entities() -> None:
    text = "# Title\n\nTurn a **list** into `Data` & more.\n\n- one\n- two"

    assert strip_markup(text) == "Title Turn a list into Data & more. one two"
    assert strip_markup("") == ""
    assert make_preview("abc", 0) == ""


def test_rebuild_is_byte_identical(project_descriptors) -> None:
    first = build_site(project_descriptors)
    second = build_site(project_descriptors)

    assert first.search_payload_json() == second.search_payload_json()
    assert first.records == second.records


def test_payload_is_serializable_in_record_order(example_site) -> None:
    payload = example_site.search_payload()

    assert [entry["id"] for entry in payload] == list(range(len(payload)))
    assert list(payload[1].keys()) == ["id", "title", "kind", "parent", "location", "preview"]
    assert payload[1]["kind"] == "type"


def test_adapter_is_reusable(example_site, project_site) -> None:
    adapter = RecordAdapter(preview_length=140)

    first = adapter.flatten(project_site.modules)
    other = adapter.flatten(example_site.modules)
    again = adapter.flatten(project_site.modules)

    assert first == again == project_site.records
    assert other == example_site.records
    assert other[0].id == 0
