"""Generation run: doc model, search records and index as one handle.

A ``DocsSite`` is built in a single step and published whole; nothing about
it changes afterwards. Callers pass it explicitly to the query engine,
search sessions, page rendering and tool registration instead of reaching
for a module-level singleton.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from aiken_docs_mcp.config import DocsConfig
from aiken_docs_mcp.docs.adapters import flatten_modules
from aiken_docs_mcp.docs.builder import RawDescriptor, build_modules
from aiken_docs_mcp.docs.loader import load_descriptors
from aiken_docs_mcp.docs.models import Module, SearchRecord
from aiken_docs_mcp.docs.query import SearchSession
from aiken_docs_mcp.docs.search import PrefixIndexer, SearchIndex, TieredSearchEngine

logger = logging.getLogger("aiken-docs-mcp.site")


@dataclass(frozen=True)
class DocsSite:
    """Everything one documentation generation run produces.

    Attributes:
        modules: Doc model, in project order
        records: Flattened search records
        index: Search index over the records
        config: Configuration the run was built with
    """

    modules: Tuple[Module, ...]
    records: Tuple[SearchRecord, ...]
    index: SearchIndex
    config: DocsConfig

    def get_module(self, name: str) -> Optional[Module]:
        for module in self.modules:
            if module.name == name:
                return module
        return None

    def module_names(self) -> List[str]:
        return [module.name for module in self.modules]

    def engine(self) -> TieredSearchEngine:
        """Create a query engine reading this site's index."""
        return TieredSearchEngine(self.index, self.config)

    def session(self, **kwargs: Any) -> SearchSession:
        """Create an interactive search session over this site."""
        return SearchSession(self.engine(), **kwargs)

    def search_payload(self) -> List[Dict[str, Any]]:
        """Serializable search records, in record order."""
        return [record.to_dict() for record in self.records]

    def search_payload_json(self) -> str:
        """Byte-stable JSON form of the search payload."""
        return json.dumps(self.search_payload(), ensure_ascii=False, separators=(",", ":"))


def build_site(descriptors: Iterable[RawDescriptor], config: DocsConfig | None = None) -> DocsSite:
    """Run the whole pipeline: descriptors -> modules -> records -> index.

    Raises:
        MalformedMetadata: If any descriptor is invalid (nothing is returned)
        NameCollision: If names collide within an owner
    """
    config = config or DocsConfig()
    modules = build_modules(descriptors)
    records = flatten_modules(modules, preview_length=config.preview_length)
    index = PrefixIndexer().build(records)
    return DocsSite(modules=modules, records=records, index=index, config=config)


async def build_site_async(
    descriptors: Iterable[RawDescriptor], config: DocsConfig | None = None
) -> DocsSite:
    """Build a site on a worker thread; the caller only ever sees the finished value."""
    return await asyncio.to_thread(build_site, list(descriptors), config)


def load_site(path: Union[str, Path], config: DocsConfig | None = None) -> DocsSite:
    """Build a site from a compiler metadata JSON file."""
    descriptors = load_descriptors(path)
    site = build_site(descriptors, config)
    logger.info("Loaded %d modules from %s", len(site.modules), path)
    return site
