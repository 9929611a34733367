"""Public file-based API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from svg_render.adapters.assets import FileAsset, PackageResourceAsset
from svg_render.adapters.display import StaticDisplay
from svg_render.adapters.presenters import PillowPresenter
from svg_render.application.ports import BundledAsset, Presenter, Rasterizer
from svg_render.application.results import DisplayOutcome, RenderResult
from svg_render.application.use_cases import ensure_staged
from svg_render.application.use_cases import render_svg
from svg_render.application.use_cases import show_bundled_image
from svg_render.backends.registry import create_default_registry


def _asset_for(source: Optional[Path]) -> BundledAsset:
    if source is None:
        return PackageResourceAsset()
    return FileAsset(source)


def resolve_rasterizer(
    backend: Optional[str] = None,
    backend_modules: Optional[Iterable[str]] = None,
) -> Rasterizer:
    """Return the named backend from a default registry."""
    return create_default_registry(backend_modules).get(backend)


def stage_bundled_image(
    data_directory: Optional[Path],
    fallback_directory: Optional[Path] = None,
    source: Optional[Path] = None,
) -> Path:
    """Stage the packaged SVG (or ``source``) and return its absolute path."""
    staged = ensure_staged(
        _asset_for(source),
        data_directory,
        fallback_directory=fallback_directory,
    )
    return staged.path


def render_file(
    source_path: Path,
    width: int,
    height: int,
    backend: Optional[str] = None,
    backend_modules: Optional[Iterable[str]] = None,
) -> RenderResult:
    """Render ``source_path`` to ``source_path + '.png'`` at scale 1."""
    return render_svg(
        source_path=source_path,
        scale=1,
        width=width,
        height=height,
        rasterizer=resolve_rasterizer(backend, backend_modules),
    )


def show_image(
    width: int,
    height: int,
    data_directory: Optional[Path],
    fallback_directory: Optional[Path] = None,
    source: Optional[Path] = None,
    backend: Optional[str] = None,
    backend_modules: Optional[Iterable[str]] = None,
    presenter: Optional[Presenter] = None,
) -> DisplayOutcome:
    """Stage, render for a ``width x height`` display, and decode the result."""
    return show_bundled_image(
        asset=_asset_for(source),
        data_directory=data_directory,
        fallback_directory=fallback_directory,
        display=StaticDisplay(width, height),
        presenter=presenter or PillowPresenter(),
        rasterizer=resolve_rasterizer(backend, backend_modules),
    )
