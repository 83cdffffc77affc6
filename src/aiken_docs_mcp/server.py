"""Aiken Docs MCP Server - project documentation browse and search over MCP."""

import argparse
import logging

from fastmcp import FastMCP

from aiken_docs_mcp import __version__
from aiken_docs_mcp.config import get_docs_config
from aiken_docs_mcp.docs.site import DocsSite, load_site
from aiken_docs_mcp.tools import browse_modules, query_docs

logger = logging.getLogger("aiken-docs-mcp.server")


def create_server(site: DocsSite) -> FastMCP:
    """Create an MCP server whose tools read ``site``."""
    mcp = FastMCP(
        "Aiken Docs MCP Server",
        instructions=(
            "Aiken project documentation server. "
            "Provides tools for browsing modules and for searching every documented "
            "type, constructor, constant and function of the project."
        ),
    )

    browse_modules.register(mcp, site)
    query_docs.register(mcp, site)

    return mcp


def main():
    """Entry point for the Aiken docs MCP server."""
    parser = argparse.ArgumentParser(
        prog="aiken-docs-mcp",
        description="Aiken Docs MCP Server - project documentation browse and search over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"aiken-docs-mcp {__version__}")
    parser.add_argument(
        "--metadata",
        default=None,
        help="Path to the compiler's module metadata JSON (default: $AIKEN_DOCS_METADATA_PATH)",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    args = parser.parse_args()

    config = get_docs_config()
    metadata_path = args.metadata or config.metadata_path
    if not metadata_path:
        parser.error("no metadata file given (use --metadata or AIKEN_DOCS_METADATA_PATH)")

    # Malformed metadata aborts startup: no partial site is ever served
    site = load_site(metadata_path, config)
    mcp = create_server(site)

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        logger.debug("Server interrupted")


if __name__ == "__main__":
    main()
