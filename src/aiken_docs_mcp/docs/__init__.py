"""Documentation model, search index and query engine for Aiken projects."""
