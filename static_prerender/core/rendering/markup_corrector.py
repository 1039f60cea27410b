"""
Markup Corrector
================

Rewrite captured markup into a portable static document. Three passes run in
order: absolute local-server URLs become relative, dynamically injected chunk
script tags are dropped, and styleInject calls whose styles are already in
the document are removed.
"""

import re
import warnings
from typing import Any, Tuple

from static_prerender.config.logging import get_logger
from static_prerender.core.exceptions import CorrectionNoOpWarning
from static_prerender.models.schemas import CorrectionResult

logger = get_logger(__name__)

CHUNK_SCRIPT = re.compile(r'<script src="\./chunk-([^"]+)"[^>]+></script>')
STYLE_INJECT = re.compile(r"""\w+\.styleInject\((["']).*?\1\);""")


def local_origin(port: int) -> str:
    return f"http://localhost:{port}/"


def relativize_urls(markup: str, port: int) -> Tuple[str, int]:
    """Replace every ``http://localhost:<port>/`` with ``./``."""
    origin = local_origin(port)
    return markup.replace(origin, "./"), markup.count(origin)


def strip_chunk_scripts(markup: str) -> Tuple[str, int]:
    """Remove ``<script src="./chunk-...">`` tags added by the chunk loader."""
    return CHUNK_SCRIPT.subn("", markup)


def strip_style_injections(markup: str) -> Tuple[str, int]:
    """Remove ``<identifier>.styleInject("...");`` statements."""
    return STYLE_INJECT.subn("", markup)


class MarkupCorrector:
    """Apply the rewrite passes and report how many rewrites each made."""

    def __init__(self) -> None:
        self.logger: Any = logger.bind(component="markup_corrector")  # structlog.BoundLoggerBase

    def correct(self, markup: str, port: int) -> CorrectionResult:
        """
        Correct captured markup served from ``port``.

        Args:
            markup: Serialized DOM from the prerenderer
            port: Port the page was served from during capture

        Returns:
            CorrectionResult with the rewritten markup and per-pass counts
        """
        markup, absolute_references = relativize_urls(markup, port)
        markup, chunk_scripts = strip_chunk_scripts(markup)
        markup, style_injections = strip_style_injections(markup)

        if absolute_references == 0:
            message = (
                f"No {local_origin(port)} references found; "
                "the port may not match the one used for capture"
            )
            self.logger.warning("Correction pass matched nothing", port=port, rewrite="relativize")
            warnings.warn(message, CorrectionNoOpWarning, stacklevel=2)

        self.logger.info(
            "Markup corrected",
            port=port,
            absolute_references=absolute_references,
            chunk_scripts=chunk_scripts,
            style_injections=style_injections,
        )

        return CorrectionResult(
            markup=markup,
            absolute_references=absolute_references,
            chunk_scripts=chunk_scripts,
            style_injections=style_injections,
        )


def correct_markup(markup: str, port: int) -> str:
    """Return ``markup`` rewritten for static hosting."""
    return MarkupCorrector().correct(markup, port).markup
