"""
Shell Renderer
==============

Assemble the ShellRenderContext from the asset graph and settings, and render
the HTML shell template with it. Every asset the shell references is resolved
up front so a missing graph entry aborts before anything is written.
"""

import json
from pathlib import Path
from typing import Any, Dict
from urllib.parse import urljoin

from static_prerender.config.logging import get_logger
from static_prerender.config.settings import Settings
from static_prerender.core.exceptions import TemplateRenderError
from static_prerender.core.fonts.inline import build_font_descriptors
from static_prerender.core.graph.resolver import resolve_asset, resolve_chunk
from static_prerender.core.rendering.template_renderer import render_template_file
from static_prerender.models.schemas import AssetGraph, ShellRenderContext

logger = get_logger(__name__)


def load_package_manifest(path: Path) -> Dict[str, Any]:
    """Read the application's package.json."""
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Package manifest unreadable", path=str(path), error=str(e))
        raise TemplateRenderError(f"Cannot read package manifest {path}: {e}") from e


def build_shell_context(graph: AssetGraph, settings: Settings) -> ShellRenderContext:
    """
    Resolve every shell reference and collect the template context.

    Args:
        graph: Loaded asset graph
        settings: Pipeline settings

    Returns:
        Immutable ShellRenderContext

    Raises:
        AssetResolutionError: If any chunk or asset is missing from the graph
        TemplateRenderError: If an inline font or the package manifest is unreadable
    """
    social_image = resolve_asset(graph, settings.social_image).file_name

    context = ShellRenderContext(
        bootstrap_file=resolve_chunk(graph, settings.bootstrap_module).file_name,
        worker_file=resolve_chunk(graph, settings.worker_module).file_name,
        fonts=build_font_descriptors(graph, settings.fonts),
        theme_color=settings.theme_color,
        favicon=resolve_asset(graph, settings.favicon).file_name,
        icon=resolve_asset(graph, settings.icon).file_name,
        image_url=urljoin(settings.site_url, social_image),
        image_alt=settings.image_alt,
        image_width=settings.image_width,
        image_height=settings.image_height,
        image_type=settings.image_type,
        title=settings.title,
        description=settings.description,
        twitter_account=settings.twitter_account,
        url=settings.site_url,
        locale=settings.locale,
        pkg=load_package_manifest(settings.package_manifest),
        dependency_graph=graph,
    )

    logger.info(
        "Shell context built",
        bootstrap=context.bootstrap_file,
        worker=context.worker_file,
        fonts=[font.asset for font in context.fonts],
    )
    return context


async def render_shell(template_path: Path, output_path: Path, context: ShellRenderContext) -> str:
    """Render the shell template with ``context`` into ``output_path``."""
    return await render_template_file(template_path, output_path, context.template_data())
