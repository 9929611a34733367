"""Rasterizer adapters wrapping plain render functions."""

from __future__ import annotations

from collections.abc import Callable

from svg_render.types import StatusCode

type RenderFunction = Callable[[str, str, int | float, int, int], StatusCode]


class CallableRasterizer:
    """Expose a bare ``render_vector``-shaped function as a rasterizer."""

    def __init__(self, func: RenderFunction, name: str | None = None) -> None:
        self._func = func
        self.name = name or getattr(func, "__name__", "callable")

    def render_vector(
        self,
        source_path: str,
        destination_path: str,
        scale: int | float,
        width: int,
        height: int,
    ) -> StatusCode:
        return self._func(source_path, destination_path, scale, width, height)
