"""
Template Renderer
=================

Render a Jinja2 template file against a flat mapping of values and write the
result to disk. Shared by the HTML shell and the response headers file.
"""

from typing import Any, Dict, Mapping
from pathlib import Path
import jinja2

from static_prerender.config.logging import get_logger
from static_prerender.core.exceptions import TemplateRenderError

logger = get_logger(__name__)

AUTOESCAPE_EXTENSIONS = ["html", "htm", "xml", "html.j2"]


def create_environment(template_dir: Path) -> jinja2.Environment:
    """Setup Jinja2 template environment rooted at ``template_dir``."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        autoescape=jinja2.select_autoescape(AUTOESCAPE_EXTENSIONS, default_for_string=False),
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        enable_async=True,
    )
    return env


async def render_template(template_path: Path, data: Mapping[str, Any]) -> str:
    """
    Render a template file to a string.

    Args:
        template_path: Path to the Jinja2 template
        data: Placeholder values

    Returns:
        Rendered text

    Raises:
        TemplateRenderError: If the template is missing, malformed, or
            references a value not present in ``data``
    """
    template_path = Path(template_path)
    env = create_environment(template_path.parent)

    try:
        template = env.get_template(template_path.name)
        return await template.render_async(**dict(data))
    except jinja2.TemplateNotFound as e:
        logger.error("Template not found", template=str(template_path))
        raise TemplateRenderError(f"Template not found: {template_path}") from e
    except jinja2.TemplateError as e:
        error_msg = f"Template rendering failed for {template_path}: {e}"
        logger.error("Template rendering failed", template=str(template_path), error=str(e))
        raise TemplateRenderError(error_msg) from e


def write_output(output_path: Path, content: str) -> None:
    """Write ``content`` to ``output_path``, replacing any existing file."""
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error("Output write failed", path=str(output_path), error=str(e))
        raise TemplateRenderError(f"Cannot write {output_path}: {e}") from e


async def render_template_file(
    template_path: Path, output_path: Path, data: Dict[str, Any]
) -> str:
    """Render ``template_path`` into ``output_path`` and return the rendered text."""
    output = await render_template(template_path, data)
    write_output(output_path, output)

    logger.info(
        "Template rendered",
        template=str(template_path),
        output=str(output_path),
        length=len(output),
    )
    return output
