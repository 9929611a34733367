"""Application-layer use-cases, options, and results."""

from __future__ import annotations

from pathlib import Path

from svg_render.application.options import RenderOptions, StagingOptions
from svg_render.application.ports import (
    BundledAsset,
    DisplayMetrics,
    Presenter,
    Rasterizer,
)
from svg_render.application.results import DisplayOutcome, RenderResult, StagedAsset
from svg_render.infrastructure.locks import PathLockRegistry
from svg_render.types import PathLike


def ensure_staged(
    asset: BundledAsset,
    destination_directory: Path | None,
    *,
    fallback_directory: Path | None = None,
    options: StagingOptions | None = None,
    locks: PathLockRegistry | None = None,
) -> StagedAsset:
    """Stage bundled asset via lazy use-case import."""
    from svg_render.application.use_cases import ensure_staged as _impl

    return _impl(
        asset,
        destination_directory,
        fallback_directory=fallback_directory,
        options=options,
        locks=locks,
    )


def render_svg(
    *,
    source_path: PathLike,
    scale: int | float,
    width: int,
    height: int,
    rasterizer: Rasterizer | None = None,
    locks: PathLockRegistry | None = None,
) -> RenderResult:
    """Render vector file via lazy use-case import."""
    from svg_render.application.use_cases import render_svg as _impl

    return _impl(
        source_path=source_path,
        scale=scale,
        width=width,
        height=height,
        rasterizer=rasterizer,
        locks=locks,
    )


def show_bundled_image(
    *,
    asset: BundledAsset,
    data_directory: Path | None,
    fallback_directory: Path | None,
    display: DisplayMetrics,
    presenter: Presenter,
    rasterizer: Rasterizer | None = None,
    options: RenderOptions | None = None,
    locks: PathLockRegistry | None = None,
) -> DisplayOutcome:
    """Run the stage/render/present chain via lazy use-case import."""
    from svg_render.application.use_cases import show_bundled_image as _impl

    return _impl(
        asset=asset,
        data_directory=data_directory,
        fallback_directory=fallback_directory,
        display=display,
        presenter=presenter,
        rasterizer=rasterizer,
        options=options,
        locks=locks,
    )


__all__ = [
    "DisplayOutcome",
    "RenderOptions",
    "RenderResult",
    "StagedAsset",
    "StagingOptions",
    "ensure_staged",
    "render_svg",
    "show_bundled_image",
]
