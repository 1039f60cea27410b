"""
Prerender Pipeline
==================

Sequence one run: render the shell, serve the output, capture the prerendered
page, correct the markup, persist it over the shell, stop the server, and
finally render the response headers file.
"""

from typing import Any, Optional
from pathlib import Path

from static_prerender.config.logging import get_logger
from static_prerender.config.settings import Settings, get_settings
from static_prerender.core.graph.loader import load_graph
from static_prerender.core.rendering.markup_corrector import MarkupCorrector
from static_prerender.core.rendering.prerenderer import Prerenderer
from static_prerender.core.rendering.shell_renderer import build_shell_context, render_shell
from static_prerender.core.rendering.template_renderer import render_template_file, write_output
from static_prerender.core.server.ephemeral import serve_directory
from static_prerender.models.schemas import PipelineResult

logger = get_logger(__name__)


def prerender_url(base_url: str, marker: str) -> str:
    """Append the prerender-mode marker the page looks for."""
    return f"{base_url}?{marker}"


class PrerenderPipeline:
    """Run the static prerender build step once."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        prerenderer: Optional[Prerenderer] = None,
        corrector: Optional[MarkupCorrector] = None,
    ):
        self.settings = settings or get_settings()
        self.prerenderer = prerenderer or Prerenderer.from_settings(self.settings)
        self.corrector = corrector or MarkupCorrector()
        self.logger: Any = logger.bind(component="pipeline")  # structlog.BoundLoggerBase

    async def run(self) -> PipelineResult:
        """
        Execute every step in order.

        Returns:
            PipelineResult describing the written files

        Raises:
            PrerenderError: On any fatal step failure. The browser and server
                are released before the error propagates.
        """
        settings = self.settings
        shell_path: Path = settings.shell_output
        headers_path: Path = settings.headers_output

        graph = load_graph(settings.graph_path)
        context = build_shell_context(graph, settings)
        await render_shell(settings.shell_template, shell_path, context)

        async with serve_directory(settings.output_dir, settings.server_bind_host) as server:
            port = server.port
            url = prerender_url(server.url, settings.prerender_query)
            markup = await self.prerenderer.capture(url)
            correction = self.corrector.correct(markup, port)
            write_output(shell_path, correction.markup)
            self.logger.info("Prerendered markup written", path=str(shell_path), port=port)

        await render_template_file(settings.headers_template, headers_path, {})

        return PipelineResult(
            shell_path=shell_path,
            headers_path=headers_path,
            port=port,
            markup_length=len(correction.markup),
            correction=correction,
        )


async def run_pipeline(settings: Optional[Settings] = None) -> PipelineResult:
    """Run the prerender pipeline with the given or global settings."""
    return await PrerenderPipeline(settings).run()
