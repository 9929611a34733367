"""Integration tests rendering real SVG files with cairosvg and Pillow."""

from __future__ import annotations

from pathlib import Path

import pytest

try:
    import cairosvg  # noqa: F401
except (ImportError, OSError):
    pytest.skip("cairosvg with a working cairo library is required", allow_module_level=True)

Image = pytest.importorskip("PIL.Image")

from svg_render.adapters.assets import PackageResourceAsset  # noqa: E402
from svg_render.adapters.display import StaticDisplay  # noqa: E402
from svg_render.adapters.presenters import PillowPresenter  # noqa: E402
from svg_render.application.use_cases import (  # noqa: E402
    ensure_staged,
    render_svg,
    show_bundled_image,
)
from svg_render.backends.builtins import CairoSvgBackend  # noqa: E402
from svg_render.types import RasterStatus  # noqa: E402


def _size(path: Path) -> tuple[int, int]:
    with Image.open(path) as image:
        return image.size


def test_render_fills_requested_canvas(sample_svg: Path) -> None:
    """Produce a PNG exactly the requested size with the drawing centred."""
    result = render_svg(
        source_path=sample_svg,
        scale=1,
        width=1080,
        height=1920,
        rasterizer=CairoSvgBackend(),
    )

    assert result.succeeded
    assert result.destination_path == Path(f"{sample_svg}.png")
    with Image.open(result.destination_path) as image:
        rgba = image.convert("RGBA")
        assert rgba.size == (1080, 1920)
        assert rgba.getpixel((540, 10))[3] == 0
        assert rgba.getpixel((540, 960))[3] == 255


def test_render_without_letterbox_matches_aspect(sample_svg: Path) -> None:
    """Skip centring when the size matches the drawing's aspect ratio."""
    result = render_svg(
        source_path=sample_svg, scale=1, width=480, height=320, rasterizer=CairoSvgBackend()
    )
    assert result.destination_path is not None
    assert _size(result.destination_path) == (480, 320)


def test_second_render_overwrites_first(sample_svg: Path) -> None:
    """Keep only the latest dimensions at the shared destination."""
    backend = CairoSvgBackend()
    render_svg(source_path=sample_svg, scale=1, width=100, height=100, rasterizer=backend)
    result = render_svg(
        source_path=sample_svg, scale=1, width=200, height=50, rasterizer=backend
    )

    assert result.destination_path is not None
    assert _size(result.destination_path) == (200, 50)


def test_direct_backend_derives_missing_dimension(sample_svg: Path, tmp_path: Path) -> None:
    """Derive width from height when width is negative."""
    destination = tmp_path / "derived.png"
    status = CairoSvgBackend().render_vector(str(sample_svg), str(destination), 1, -1, 80)
    assert status == RasterStatus.SUCCESS
    assert _size(destination) == (120, 80)


def test_malformed_svg_fails_with_parse_status(tmp_path: Path) -> None:
    """Report PARSE_ERROR through the invoker for broken markup."""
    source = tmp_path / "image.svg"
    source.write_text("<svg><rect></svg>", encoding="utf-8")

    result = render_svg(
        source_path=source, scale=1, width=10, height=10, rasterizer=CairoSvgBackend()
    )

    assert result.status_code == RasterStatus.PARSE_ERROR
    assert result.destination_path is None


def test_bundled_image_end_to_end(tmp_path: Path) -> None:
    """Stage the packaged SVG, render for a portrait display, and decode it."""
    presenter = PillowPresenter()

    outcome = show_bundled_image(
        asset=PackageResourceAsset(),
        data_directory=tmp_path / "external",
        fallback_directory=tmp_path / "internal",
        display=StaticDisplay(1080, 1920),
        presenter=presenter,
        rasterizer=CairoSvgBackend(),
    )

    assert outcome.presented
    assert outcome.image.size == (1080, 1920)
    assert presenter.current is outcome.image
    assert sorted(p.name for p in (tmp_path / "external").iterdir()) == [
        "image.svg",
        "image.svg.png",
    ]
    assert ensure_staged(PackageResourceAsset(), tmp_path / "external").copied is False
