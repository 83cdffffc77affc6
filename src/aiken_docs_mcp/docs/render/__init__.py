"""Static page rendering for the doc model."""

from aiken_docs_mcp.docs.render.page_renderer import (
    SEARCH_DATA_PATH,
    render_index_page,
    render_module_page,
    render_site,
)

__all__ = [
    "SEARCH_DATA_PATH",
    "render_index_page",
    "render_module_page",
    "render_site",
]
