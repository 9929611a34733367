"""Presentation adapters that decode rendered rasters."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from svg_render.errors import DependencyError, PresentationError

logger = logging.getLogger(__name__)


class PillowPresenter:
    """Decode a raster with Pillow and keep it as the displayed image."""

    def __init__(self) -> None:
        self.current: Any = None

    def present(self, raster_path: Path) -> Any:
        """Decode ``raster_path`` fully and make it the current image.

        Parameters
        ----------
        raster_path : Path
            PNG produced by a successful render.

        Returns
        -------
        PIL.Image.Image
            Decoded image.

        Raises
        ------
        PresentationError
            If the file is missing, cannot be decoded, or exceeds Pillow's
            decompression-bomb limit.
        """
        try:
            from PIL import Image, UnidentifiedImageError
        except Exception as exc:
            raise DependencyError("Pillow is required to present rasters.") from exc

        try:
            with Image.open(raster_path) as handle:
                handle.load()
                image = handle.copy()
        except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
            raise PresentationError(f"Unable to decode raster {raster_path}: {exc}") from exc

        self.current = image
        logger.debug("presenting %s (%dx%d)", raster_path, *image.size)
        return image
