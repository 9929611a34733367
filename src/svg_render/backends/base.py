"""Backend protocol for pluggable rasterization engines."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from svg_render.types import StatusCode


@runtime_checkable
class RasterizerBackend(Protocol):
    """Named rasterizer implementation registered with a ``BackendRegistry``."""

    name: str

    def render_vector(
        self,
        source_path: str,
        destination_path: str,
        scale: int | float,
        width: int,
        height: int,
    ) -> StatusCode:
        """Render ``source_path`` into ``destination_path``.

        Parameters
        ----------
        source_path : str
            Vector file to read.
        destination_path : str
            Raster file to (over)write.
        scale : int | float
            Engine-defined multiplier, used when neither dimension is given.
        width : int
            Target width in pixels; negative derives it from ``height``.
        height : int
            Target height in pixels; negative derives it from ``width``.

        Returns
        -------
        int
            ``0`` on success, any other value on failure.
        """
