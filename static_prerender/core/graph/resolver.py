"""
Graph Resolver
==============

Pure lookups over an in-memory asset graph. Bundlers name emitted files
``<name>-<hex>.<ext>``; these functions reconstruct the logical to hashed
mapping from that filename grammar alone.
"""

import posixpath
import re
from typing import Optional, Tuple

from static_prerender.core.exceptions import AssetResolutionError
from static_prerender.models.schemas import AssetEntry, AssetGraph, ChunkEntry

HASH_SUFFIX = re.compile(r"-[0-9a-f]+")


def split_name(file_name: str) -> Tuple[str, str]:
    """Split the last path component into base name and extension."""
    return posixpath.splitext(posixpath.basename(file_name))


def find_chunk_by_module_suffix(graph: AssetGraph, suffix: str) -> Optional[ChunkEntry]:
    """Return the first chunk whose facade module id ends with ``suffix``."""
    for entry in graph.values():
        if not isinstance(entry, ChunkEntry):
            continue
        if entry.facade_module_id and entry.facade_module_id.endswith(suffix):
            return entry
    return None


def find_asset_by_logical_name(graph: AssetGraph, logical_name: str) -> Optional[AssetEntry]:
    """
    Resolve a hashed asset from its logical name.

    ``favicon.png`` matches ``favicon-deadbeef.png`` but neither
    ``favicon-DEADBEEF.png`` nor ``favicon-deadbeef.jpg``.

    Args:
        graph: Asset graph to search
        logical_name: Human-readable file name without hash

    Returns:
        First matching AssetEntry, or None
    """
    base, ext = split_name(logical_name)

    for entry in graph.values():
        if not isinstance(entry, AssetEntry):
            continue
        candidate_base, candidate_ext = split_name(entry.file_name)
        if candidate_ext != ext:
            continue
        if not candidate_base.startswith(base):
            continue
        if HASH_SUFFIX.fullmatch(candidate_base[len(base):]):
            return entry
    return None


def resolve_chunk(graph: AssetGraph, suffix: str) -> ChunkEntry:
    """Like find_chunk_by_module_suffix, raising AssetResolutionError when absent."""
    entry = find_chunk_by_module_suffix(graph, suffix)
    if entry is None:
        raise AssetResolutionError(suffix, kind="chunk")
    return entry


def resolve_asset(graph: AssetGraph, logical_name: str) -> AssetEntry:
    """Like find_asset_by_logical_name, raising AssetResolutionError when absent."""
    entry = find_asset_by_logical_name(graph, logical_name)
    if entry is None:
        raise AssetResolutionError(logical_name, kind="asset")
    return entry
