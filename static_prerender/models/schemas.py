"""
Pydantic Models and Schemas
===========================

Core data models for the bundler asset graph, font inlining, shell rendering
context and pipeline results. All models are immutable once constructed.
"""

from typing import Optional, List, Dict, Any, Union, Iterator, Literal
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


# Asset Graph Models
class GraphEntry(BaseModel):
    """Base model for one bundler output artifact."""

    file_name: str = Field(..., alias="fileName", min_length=1, description="Hashed output path")

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class ChunkEntry(GraphEntry):
    """Compiled script output tied to a source module."""

    kind: Literal["chunk"] = "chunk"
    facade_module_id: Optional[str] = Field(
        None, alias="facadeModuleId", description="Source module that produced the chunk"
    )

    @property
    def is_chunk(self) -> bool:
        return True

    @property
    def is_asset(self) -> bool:
        return False


class AssetEntry(GraphEntry):
    """Non-script output file (font, image, ...)."""

    kind: Literal["asset"] = "asset"

    @property
    def is_chunk(self) -> bool:
        return False

    @property
    def is_asset(self) -> bool:
        return True


AssetGraphEntry = Union[ChunkEntry, AssetEntry]


class AssetGraph(BaseModel):
    """Bundler manifest keyed by opaque artifact identifiers.

    ``values()`` yields entries in the order they appeared in the source
    document; lookups rely on that order to pick the first match.
    """

    entries: Dict[str, AssetGraphEntry] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def values(self) -> Iterator[AssetGraphEntry]:
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)

    def chunks(self) -> List[ChunkEntry]:
        return [entry for entry in self.entries.values() if isinstance(entry, ChunkEntry)]

    def assets(self) -> List[AssetEntry]:
        return [entry for entry in self.entries.values() if isinstance(entry, AssetEntry)]


# Font Models
class FontSpec(BaseModel):
    """How to build one inlined font descriptor."""

    logical_name: str = Field(..., description="Logical name of the full font asset")
    weight: int = Field(..., ge=100, le=900, description="CSS font weight")
    inline_path: Path = Field(..., description="Pre-trimmed subset font file")
    characters: str = Field(..., min_length=1, description="Characters the subset covers")

    model_config = ConfigDict(frozen=True)


class FontDescriptor(BaseModel):
    """Font reference with an inlined subset for first paint."""

    asset: str = Field(..., description="Hashed file name of the full font")
    weight: int
    inline: str = Field(..., description="Base64 payload of the trimmed font")
    inline_range: str = Field(..., description="unicode-range covered by the inline payload")

    model_config = ConfigDict(frozen=True)


# Rendering Models
class ShellRenderContext(BaseModel):
    """Every value the shell template may reference."""

    bootstrap_file: str
    worker_file: str
    fonts: List[FontDescriptor] = Field(..., min_length=2, max_length=2)
    theme_color: str
    favicon: str
    icon: str
    image_url: str
    image_alt: str
    image_width: str
    image_height: str
    image_type: str
    title: str
    description: str
    twitter_account: str
    url: str
    locale: str
    pkg: Dict[str, Any] = Field(default_factory=dict)
    dependency_graph: AssetGraph

    model_config = ConfigDict(frozen=True)

    def template_data(self) -> Dict[str, Any]:
        """Flat placeholder mapping, nested models kept as objects."""
        return {name: getattr(self, name) for name in type(self).model_fields}


# Result Models
class CorrectionResult(BaseModel):
    """Corrected markup with the number of rewrites each pass applied."""

    markup: str
    absolute_references: int = Field(0, ge=0)
    chunk_scripts: int = Field(0, ge=0)
    style_injections: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)


class PipelineResult(BaseModel):
    """Outcome of one prerender run."""

    shell_path: Path
    headers_path: Path
    port: int
    markup_length: int
    correction: CorrectionResult
