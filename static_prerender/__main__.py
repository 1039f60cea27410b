"""
Command line entry point: ``python -m static_prerender``.

Runs the prerender pipeline once and exits non-zero on any fatal error.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from static_prerender.config.logging import get_logger, setup_logging
from static_prerender.config.settings import reload_settings
from static_prerender.core.exceptions import PrerenderError
from static_prerender.core.pipeline import run_pipeline

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="static-prerender",
        description="Prerender a bundled single-page app into a static index.html.",
    )
    parser.add_argument("--project-root", type=Path, help="Application project root")
    parser.add_argument("--output-dir", type=Path, help="Bundler output directory")
    parser.add_argument("--graph", dest="graph_path", type=Path, help="Asset graph JSON")
    parser.add_argument("--shell-template", type=Path, help="HTML shell template")
    parser.add_argument("--headers-template", type=Path, help="Response headers template")
    parser.add_argument("--settle-ms", type=int, help="Post-navigation settle wait")
    parser.add_argument(
        "--headed", action="store_true", help="Show the browser window while capturing"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Increase log verbosity for troubleshooting."
    )
    return parser


def settings_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the options the user actually passed."""
    overrides: Dict[str, Any] = {}
    for name in (
        "project_root",
        "output_dir",
        "graph_path",
        "shell_template",
        "headers_template",
        "settle_ms",
    ):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    if args.headed:
        overrides["headless"] = False
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return overrides


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = reload_settings(**settings_overrides(args))
    except ValidationError as e:
        logger.error("Invalid settings", error=str(e), error_count=e.error_count())
        return 1
    setup_logging()

    try:
        result = asyncio.run(run_pipeline(settings))
    except PrerenderError as e:
        logger.error("Prerender failed", error=str(e), error_type=type(e).__name__)
        return 1

    logger.info(
        "Prerender complete",
        shell=str(result.shell_path),
        headers=str(result.headers_path),
        markup_length=result.markup_length,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
