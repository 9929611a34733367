"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Protocol

from svg_render.types import RasterImage, StatusCode


class BundledAsset(Protocol):
    """Read-only vector resource shipped with the application."""

    name: str

    def open(self) -> BinaryIO:
        """Open the resource for binary reading."""


class Rasterizer(Protocol):
    """Render a vector file on disk to a raster file on disk."""

    def render_vector(
        self,
        source_path: str,
        destination_path: str,
        scale: int | float,
        width: int,
        height: int,
    ) -> StatusCode:
        """Render and return ``0`` on success, any other integer on failure."""


class DisplayMetrics(Protocol):
    """Query the current size of the viewing surface."""

    def size(self) -> tuple[int, int]:
        """Return ``(width, height)`` in pixels at call time."""


class Presenter(Protocol):
    """Decode and show a raster image file."""

    def present(self, raster_path: Path) -> RasterImage:
        """Present the raster at ``raster_path``; raise on decode failure."""
