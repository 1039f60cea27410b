"""
Pipeline Exceptions
===================

Error taxonomy for the prerender pipeline. Every fatal condition derives from
PrerenderError so the entry point can turn it into a non-zero exit status.
"""


class PrerenderError(Exception):
    """Base exception for all fatal pipeline errors."""

    pass


class AssetGraphError(PrerenderError):
    """Exception raised when the bundler asset graph cannot be loaded."""

    pass


class AssetResolutionError(PrerenderError):
    """Exception raised when a chunk or asset has no matching graph entry."""

    def __init__(self, name: str, kind: str = "asset"):
        self.name = name
        self.kind = kind
        super().__init__(f"No {kind} in the asset graph matches '{name}'")


class TemplateRenderError(PrerenderError):
    """Exception raised when a template or one of its inputs cannot be rendered."""

    pass


class ServerBindError(PrerenderError):
    """Exception raised when the ephemeral server cannot start."""

    pass


class CaptureError(PrerenderError):
    """Exception raised when the headless browser capture fails."""

    pass


class CorrectionNoOpWarning(UserWarning):
    """A markup rewrite pass matched nothing where a match was expected."""

    pass
