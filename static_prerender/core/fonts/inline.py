"""
Font Inlining
=============

Build FontDescriptors: the full font is referenced by its hashed asset name,
while a pre-trimmed subset covering only the characters of the first paint
is embedded as base64.
"""

import base64
from pathlib import Path
from typing import List

from static_prerender.config.logging import get_logger
from static_prerender.core.exceptions import TemplateRenderError
from static_prerender.core.fonts.charset import to_hex_range_string
from static_prerender.core.graph.resolver import resolve_asset
from static_prerender.models.schemas import AssetGraph, FontDescriptor, FontSpec

logger = get_logger(__name__)


def read_inline_payload(path: Path) -> str:
    """Base64-encode a trimmed font file."""
    try:
        return base64.b64encode(Path(path).read_bytes()).decode("ascii")
    except OSError as e:
        logger.error("Inline font unreadable", path=str(path), error=str(e))
        raise TemplateRenderError(f"Cannot read inline font {path}: {e}") from e


def build_font_descriptor(graph: AssetGraph, spec: FontSpec) -> FontDescriptor:
    """Resolve the hosted font and attach its inline subset."""
    asset = resolve_asset(graph, spec.logical_name)
    descriptor = FontDescriptor(
        asset=asset.file_name,
        weight=spec.weight,
        inline=read_inline_payload(spec.inline_path),
        inline_range=to_hex_range_string(spec.characters),
    )
    logger.debug(
        "Font descriptor built",
        asset=descriptor.asset,
        weight=descriptor.weight,
        inline_bytes=len(descriptor.inline),
        inline_range=descriptor.inline_range,
    )
    return descriptor


def build_font_descriptors(graph: AssetGraph, specs: List[FontSpec]) -> List[FontDescriptor]:
    return [build_font_descriptor(graph, spec) for spec in specs]
