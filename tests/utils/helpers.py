"""
Test Helpers
============

Helpers for laying out a throwaway application project on disk.
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from static_prerender.config.settings import Settings

from .data_generators import AssetGraphGenerator

REGULAR_INLINE_FONT = b"regular-subset-bytes"
BOLD_INLINE_FONT = b"bold-subset-bytes"


class ProjectBuilder:
    """Write the inputs of one prerender run into a temporary directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "app"
        self.root.mkdir()

    def write(self, relative: str, content: Any) -> Path:
        """Write text or bytes at ``relative`` under the project root."""
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    def write_graph(self, graph: Optional[Mapping[str, Any]] = None) -> Path:
        graph = AssetGraphGenerator.complete_graph() if graph is None else graph
        return self.write("lib/dependencygraph.json", json.dumps(graph, indent=2))

    def build(self, graph: Optional[Mapping[str, Any]] = None) -> "ProjectBuilder":
        """Lay out a complete project: graph, fonts, manifest and dist files."""
        self.write_graph(graph)
        self.write("package.json", json.dumps({"name": "proxx", "version": "1.2.3"}))
        self.write("src/assets/space-mono-inline.woff2", REGULAR_INLINE_FONT)
        self.write("src/assets/space-mono-bold-inline.woff2", BOLD_INLINE_FONT)
        self.write("dist/bootstrap-ab12.js", "console.log('boot');\n")
        self.write("dist/favicon-ff00.png", b"\x89PNG\r\n")
        return self

    def settings(self, **overrides: Any) -> Settings:
        values: Dict[str, Any] = {"project_root": self.root, "environment": "testing"}
        values.update(overrides)
        return Settings(**values)

    @property
    def dist(self) -> Path:
        return self.root / "dist"


__all__ = ["ProjectBuilder", "REGULAR_INLINE_FONT", "BOLD_INLINE_FONT"]
