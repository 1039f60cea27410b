"""
Asset Graph Loader
==================

Load the bundler's emitted asset graph and validate every entry into a
ChunkEntry or AssetEntry. Malformed graphs fail here instead of surfacing as
confusing resolution errors during rendering.
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from static_prerender.config.logging import get_logger
from static_prerender.core.exceptions import AssetGraphError
from static_prerender.models.schemas import AssetEntry, AssetGraph, AssetGraphEntry, ChunkEntry

logger = get_logger(__name__)


def _entry_kind(key: str, raw: Mapping[str, Any]) -> str:
    """Determine the variant of a raw graph record from its role tags."""
    is_chunk = raw.get("isChunk") is True or raw.get("type") == "chunk"
    is_asset = raw.get("isAsset") is True or raw.get("type") == "asset"

    if is_chunk and is_asset:
        raise AssetGraphError(f"Graph entry '{key}' is tagged both chunk and asset")
    if not is_chunk and not is_asset:
        raise AssetGraphError(f"Graph entry '{key}' is tagged neither chunk nor asset")
    return "chunk" if is_chunk else "asset"


def parse_entry(key: str, raw: Any) -> AssetGraphEntry:
    """Validate a single raw graph record."""
    if not isinstance(raw, Mapping):
        raise AssetGraphError(f"Graph entry '{key}' must be an object, got {type(raw).__name__}")

    kind = _entry_kind(key, raw)
    model = ChunkEntry if kind == "chunk" else AssetEntry
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise AssetGraphError(f"Graph entry '{key}' is malformed: {e}") from e


def parse_graph(data: Any) -> AssetGraph:
    """
    Build an AssetGraph from decoded JSON.

    Args:
        data: Mapping of artifact identifier to raw entry

    Returns:
        Validated, immutable AssetGraph

    Raises:
        AssetGraphError: If the document or any entry is malformed
    """
    if not isinstance(data, Mapping):
        raise AssetGraphError(f"Asset graph must be a JSON object, got {type(data).__name__}")

    entries: Dict[str, AssetGraphEntry] = {}
    for key, raw in data.items():
        entries[str(key)] = parse_entry(str(key), raw)

    return AssetGraph(entries=entries)


def load_graph(path: Path) -> AssetGraph:
    """Read and validate the asset graph JSON file at ``path``."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        logger.error("Asset graph not found", path=str(path))
        raise AssetGraphError(f"Asset graph not found: {path}") from e
    except json.JSONDecodeError as e:
        logger.error("Asset graph is not valid JSON", path=str(path), error=str(e))
        raise AssetGraphError(f"Asset graph is not valid JSON: {e}") from e

    graph = parse_graph(data)
    logger.info(
        "Asset graph loaded",
        path=str(path),
        chunks=len(graph.chunks()),
        assets=len(graph.assets()),
    )
    return graph
