"""Loading of compiler metadata files.

The compiler writes one JSON document per project holding either a list of
module descriptors or an object with a "modules" list.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from aiken_docs_mcp.errors import MalformedMetadata


def load_descriptors(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read raw module descriptors from a metadata JSON file.

    Args:
        path: Path to the metadata file

    Returns:
        List of raw descriptor mappings, in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        MalformedMetadata: If the file is not valid JSON or has the wrong
            top-level shape
    """
    metadata_path = Path(path)
    if not metadata_path.exists():
        raise FileNotFoundError(f"Metadata file not found: {metadata_path}")

    with open(metadata_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise MalformedMetadata(f"Invalid JSON: {exc.msg}", str(metadata_path)) from exc

    if isinstance(data, dict):
        data = data.get("modules")
    if not isinstance(data, list):
        raise MalformedMetadata("Expected a list of modules", str(metadata_path))

    return data
