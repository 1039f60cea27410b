"""
Application Settings
===================

Build pipeline settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

from typing import Optional, List
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

from static_prerender.models.schemas import FontSpec


def _default_fonts() -> List[FontSpec]:
    return [
        FontSpec(
            logical_name="space-mono-normal.woff2",
            weight=400,
            inline_path=Path("src/assets/space-mono-inline.woff2"),
            characters="PROXXDifficultyHardEasyMediumCustomWidthHeightBlackholes 0123456789",
        ),
        # Needs a space, else Firefox gets confused.
        FontSpec(
            logical_name="space-mono-bold.woff2",
            weight=700,
            inline_path=Path("src/assets/space-mono-bold-inline.woff2"),
            characters="START ",
        ),
    ]


class Settings(BaseSettings):
    """Prerender pipeline settings with environment variable support."""

    # Application Configuration
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[Path] = Field(default=None, description="Optional rotating log file")

    # Build Inputs
    project_root: Path = Field(default=Path("."), description="Application project root")
    output_dir: Path = Field(default=Path("dist"), description="Bundler output directory")
    graph_path: Path = Field(
        default=Path("lib/dependencygraph.json"), description="Bundler asset graph JSON"
    )
    shell_template: Path = Field(
        default=Path(__file__).parent.parent / "core" / "rendering" / "templates" / "index.html.j2",
        description="HTML shell template",
    )
    headers_template: Path = Field(
        default=Path(__file__).parent.parent / "core" / "rendering" / "templates" / "_headers.j2",
        description="Response headers template",
    )
    package_manifest: Path = Field(
        default=Path("package.json"), description="Application package manifest"
    )

    # Asset Names
    bootstrap_module: str = Field(default="bootstrap.tsx", description="Bootstrap chunk module")
    worker_module: str = Field(default="worker.ts", description="Worker chunk module")
    favicon: str = Field(default="favicon.png", description="Favicon logical name")
    icon: str = Field(default="icon-maskable.png", description="Maskable icon logical name")
    social_image: str = Field(default="social-cover.jpg", description="Social card image")
    fonts: List[FontSpec] = Field(default_factory=_default_fonts, description="Inlined fonts")
    theme_color: str = Field(default="#0e0e23", description="Theme color")

    # Page Metadata
    title: str = Field(default="PROXX — a game", description="Page title")
    description: str = Field(
        default=(
            "Help your crew navigate space by marking out the black holes using proxx, "
            "your proximity scanner."
        ),
        description="Page description",
    )
    site_url: str = Field(default="https://proxx.app/", description="Canonical site URL")
    image_alt: str = Field(default="Game screen of the PROXX game")
    image_width: str = Field(default="1200")
    image_height: str = Field(default="675")
    image_type: str = Field(default="image/jpeg")
    twitter_account: str = Field(default="@chromiumdev")
    locale: str = Field(default="en_US")

    # Browser Configuration
    viewport_width: int = Field(default=1280, gt=0, description="Capture viewport width")
    viewport_height: int = Field(default=720, gt=0, description="Capture viewport height")
    settle_ms: int = Field(default=1000, ge=0, description="Post-navigation settle wait")
    navigation_timeout_ms: int = Field(
        default=30000, gt=0, description="Playwright navigation timeout in milliseconds"
    )
    headless: bool = Field(default=True, description="Run browser in headless mode")

    # Server Configuration
    server_bind_host: str = Field(default="127.0.0.1", description="Ephemeral server bind address")
    prerender_query: str = Field(default="prerender", description="Prerender mode marker")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("fonts")
    @classmethod
    def validate_fonts(cls, v: List[FontSpec]) -> List[FontSpec]:
        """The shell carries exactly one regular and one bold font."""
        if len(v) != 2:
            raise ValueError("Exactly two fonts (regular and bold) are required")
        return v

    @model_validator(mode="after")
    def resolve_paths(self) -> "Settings":
        """Anchor relative input and output paths at the project root."""
        root = self.project_root
        for name in (
            "output_dir",
            "graph_path",
            "shell_template",
            "headers_template",
            "package_manifest",
        ):
            value = getattr(self, name)
            if not value.is_absolute():
                setattr(self, name, root / value)
        self.fonts = [
            font
            if font.inline_path.is_absolute()
            else font.model_copy(update={"inline_path": root / font.inline_path})
            for font in self.fonts
        ]
        return self

    @property
    def shell_output(self) -> Path:
        return self.output_dir / "index.html"

    @property
    def headers_output(self) -> Path:
        return self.output_dir / "_headers"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="STATIC_PRERENDER_",
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings(**overrides: object) -> Settings:
    """Reload settings from environment, applying explicit overrides."""
    global settings
    settings = Settings(**overrides)  # type: ignore[arg-type]
    return settings
