"""
Test Configuration
==================

Pytest configuration with fixtures for all test types.
Provides temporary application projects, settings and graph data.
"""

import pytest
from pathlib import Path
from typing import Any, Dict

from static_prerender.config.settings import Settings
from static_prerender.core.graph.loader import parse_graph
from static_prerender.models.schemas import AssetGraph

from tests.utils.data_generators import AssetGraphGenerator
from tests.utils.helpers import ProjectBuilder


@pytest.fixture
def graph_data() -> Dict[str, Dict[str, Any]]:
    """Raw asset graph with every entry the default shell references."""
    return AssetGraphGenerator.complete_graph()


@pytest.fixture
def asset_graph(graph_data: Dict[str, Dict[str, Any]]) -> AssetGraph:
    """Validated asset graph."""
    return parse_graph(graph_data)


@pytest.fixture
def project(tmp_path: Path) -> ProjectBuilder:
    """Complete application project on disk."""
    return ProjectBuilder(tmp_path).build()


@pytest.fixture
def project_settings(project: ProjectBuilder) -> Settings:
    """Settings rooted at the temporary project."""
    return project.settings(settle_ms=0)
