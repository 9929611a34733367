"""Exception hierarchy for staging, rendering, and presentation."""

from __future__ import annotations


class RenderError(Exception):
    """Base error for the render pipeline."""

    exit_code: int = 1


class StagingError(RenderError):
    """Bundled asset could not be staged to writable storage."""

    exit_code = 2


class InvalidRenderRequestError(RenderError):
    """Render parameters failed validation before invocation."""

    exit_code = 2


class RasterizerContractError(RenderError):
    """Rasterizer returned something other than an integer status code."""


class DependencyError(RenderError):
    """Optional dependency required by a backend is not installed."""


class BackendError(RenderError):
    """Rasterizer backend could not be registered, resolved, or loaded."""


class PresentationError(RenderError):
    """Rendered raster could not be decoded for presentation."""
