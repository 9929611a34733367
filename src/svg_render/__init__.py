"""Top-level API for staging and rasterizing the bundled SVG image."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from svg_render.types import StatusCode

__version__ = "0.1.0"


def render_svg_to_png(
    source_path: str,
    destination_path: str,
    scale: int | float = 1,
    width: int = -1,
    height: int = -1,
    *,
    backend: str | None = None,
    backend_modules: Iterable[str] | None = None,
) -> StatusCode:
    """Rasterize an SVG file to PNG with a registered backend.

    Parameters
    ----------
    source_path : str
        SVG file to read.
    destination_path : str
        PNG file to write.
    scale : int | float, default=1
        Multiplier applied to the intrinsic size when both dimensions are
        negative.
    width : int, default=-1
        Target width in pixels; negative derives it from ``height``.
    height : int, default=-1
        Target height in pixels; negative derives it from ``width``.
    backend : str, optional
        Backend name; defaults to ``cairosvg``.
    backend_modules : Iterable[str], optional
        Extra backend modules or file paths to register first.

    Returns
    -------
    int
        ``0`` on success, a backend-specific nonzero code otherwise.
    """
    from .backends.registry import create_default_registry

    registry = create_default_registry(backend_modules)
    return registry.get(backend).render_vector(
        source_path, destination_path, scale, width, height
    )


def render_bundled_image(
    data_directory: Path,
    width: int,
    height: int,
    *,
    fallback_directory: Path | None = None,
) -> Path | None:
    """Stage the packaged SVG and render it at ``width x height``.

    Returns
    -------
    Path | None
        Rendered PNG path, or ``None`` when the rasterizer failed.
    """
    from .api import render_file, stage_bundled_image

    source = stage_bundled_image(data_directory, fallback_directory=fallback_directory)
    result = render_file(source, width=width, height=height)
    return result.destination_path


__all__ = [
    "render_bundled_image",
    "render_svg_to_png",
]
