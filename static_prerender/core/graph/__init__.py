"""Asset graph loading and lookups."""

from static_prerender.core.graph.loader import load_graph, parse_graph
from static_prerender.core.graph.resolver import (
    find_asset_by_logical_name,
    find_chunk_by_module_suffix,
    resolve_asset,
    resolve_chunk,
)

__all__ = [
    "load_graph",
    "parse_graph",
    "find_asset_by_logical_name",
    "find_chunk_by_module_suffix",
    "resolve_asset",
    "resolve_chunk",
]
