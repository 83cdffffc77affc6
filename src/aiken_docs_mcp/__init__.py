"""Aiken documentation model, search index and MCP tools."""

__version__ = "0.1.0"
