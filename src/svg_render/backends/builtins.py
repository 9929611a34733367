"""Built-in rasterizer backends."""

from __future__ import annotations

import io
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from svg_render.errors import DependencyError
from svg_render.types import RasterStatus, StatusCode

logger = logging.getLogger(__name__)

DEFAULT_INTRINSIC_SIZE = (100.0, 100.0)

# CSS absolute units at 96 dpi, matching cairosvg defaults.
_UNIT_TO_PX = {
    "px": 1.0,
    "pt": 96.0 / 72.0,
    "pc": 16.0,
    "in": 96.0,
    "cm": 96.0 / 2.54,
    "mm": 96.0 / 25.4,
}


@dataclass(frozen=True)
class RasterLayout:
    """Where the scaled drawing lands on the output canvas."""

    canvas_width: int
    canvas_height: int
    image_width: int
    image_height: int
    offset_x: int = 0
    offset_y: int = 0

    @property
    def centered(self) -> bool:
        return (
            self.image_width != self.canvas_width
            or self.image_height != self.canvas_height
            or self.offset_x != 0
            or self.offset_y != 0
        )


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def fit_layout(
    intrinsic: tuple[float, float],
    scale: float,
    width: int,
    height: int,
) -> RasterLayout:
    """Resolve output geometry from the intrinsic size and requested bounds.

    - both dimensions negative: intrinsic size times ``scale``;
    - one dimension negative: derived from the other, aspect preserved;
    - both given: uniform fit inside ``width x height``, drawing centred.

    Raises
    ------
    ValueError
        If the resulting canvas or drawing would be empty.
    """
    svg_width, svg_height = intrinsic
    if svg_width <= 0 or svg_height <= 0:
        raise ValueError(f"intrinsic size must be positive, got {intrinsic}")

    if width < 0 and height < 0:
        image_width = _round_half_up(svg_width * scale)
        image_height = _round_half_up(svg_height * scale)
        layout = RasterLayout(image_width, image_height, image_width, image_height)
    elif width < 0:
        factor = height / svg_height
        image_width = _round_half_up(svg_width * factor)
        layout = RasterLayout(image_width, height, image_width, height)
    elif height < 0:
        factor = width / svg_width
        image_height = _round_half_up(svg_height * factor)
        layout = RasterLayout(width, image_height, width, image_height)
    else:
        factor = min(width / svg_width, height / svg_height)
        image_width = _round_half_up(svg_width * factor)
        image_height = _round_half_up(svg_height * factor)
        layout = RasterLayout(
            canvas_width=width,
            canvas_height=height,
            image_width=image_width,
            image_height=image_height,
            offset_x=(width - image_width) // 2,
            offset_y=(height - image_height) // 2,
        )

    if min(
        layout.canvas_width,
        layout.canvas_height,
        layout.image_width,
        layout.image_height,
    ) <= 0:
        raise ValueError(f"empty raster for requested size {width}x{height}")
    return layout


def _parse_length(value: str | None) -> float | None:
    if not value:
        return None
    value = value.strip()
    if value.endswith("%"):
        return None
    factor = 1.0
    for unit, px in _UNIT_TO_PX.items():
        if value.endswith(unit):
            value = value[: -len(unit)]
            factor = px
            break
    try:
        return float(value) * factor
    except ValueError:
        return None


def _parse_viewbox(value: str | None) -> tuple[float, float] | None:
    if not value:
        return None
    parts = value.replace(",", " ").split()
    if len(parts) != 4:
        return None
    try:
        return float(parts[2]), float(parts[3])
    except ValueError:
        return None


def intrinsic_size(markup: bytes) -> tuple[float, float]:
    """Read the document size from the SVG root element.

    ``width``/``height`` win; missing values fall back to the ``viewBox``
    extent, then to 100x100.

    Raises
    ------
    xml.etree.ElementTree.ParseError
        If ``markup`` is not well-formed XML.
    """
    root = ET.fromstring(markup)
    viewbox = _parse_viewbox(root.attrib.get("viewBox"))
    default_width, default_height = viewbox or DEFAULT_INTRINSIC_SIZE
    width = _parse_length(root.attrib.get("width"))
    height = _parse_length(root.attrib.get("height"))
    return (
        width if width is not None else default_width,
        height if height is not None else default_height,
    )


def _compose_centered(png: bytes, layout: RasterLayout) -> bytes:
    try:
        from PIL import Image
    except Exception as exc:
        raise DependencyError("Pillow is required to center rendered output.") from exc

    with Image.open(io.BytesIO(png)) as drawing:
        drawing = drawing.convert("RGBA")
    canvas = Image.new("RGBA", (layout.canvas_width, layout.canvas_height), (0, 0, 0, 0))
    canvas.paste(drawing, (layout.offset_x, layout.offset_y), drawing)
    buffer = io.BytesIO()
    canvas.save(buffer, format="PNG")
    return buffer.getvalue()


class CairoSvgBackend:
    """Render SVG to PNG through cairosvg.

    Failures are reported as ``RasterStatus`` codes, never raised, except
    for a missing cairosvg/Pillow installation.
    """

    name = "cairosvg"

    def render_vector(
        self,
        source_path: str,
        destination_path: str,
        scale: int | float,
        width: int,
        height: int,
    ) -> StatusCode:
        """Render ``source_path`` to a PNG at ``destination_path``.

        Returns
        -------
        int
            A ``RasterStatus`` value.
        """
        try:
            import cairosvg
        except Exception as exc:
            raise DependencyError("cairosvg is required for the cairosvg backend.") from exc

        try:
            markup = Path(source_path).read_bytes()
        except OSError as exc:
            logger.error("failed to open %s: %s", source_path, exc)
            return RasterStatus.FILE_NOT_FOUND

        try:
            layout = fit_layout(intrinsic_size(markup), scale, width, height)
        except ET.ParseError as exc:
            logger.error("failed to parse %s: %s", source_path, exc)
            return RasterStatus.PARSE_ERROR
        except ValueError as exc:
            logger.error("invalid render size for %s: %s", source_path, exc)
            return RasterStatus.INVALID_VALUE

        try:
            png = cairosvg.svg2png(
                bytestring=markup,
                output_width=layout.image_width,
                output_height=layout.image_height,
            )
            if layout.centered:
                png = _compose_centered(png, layout)
        except DependencyError:
            raise
        except MemoryError:
            logger.error("out of memory rendering %s", source_path)
            return RasterStatus.NO_MEMORY
        except ET.ParseError as exc:
            logger.error("failed to render %s: %s", source_path, exc)
            return RasterStatus.PARSE_ERROR
        except ValueError as exc:
            logger.error("failed to render %s: %s", source_path, exc)
            return RasterStatus.INVALID_VALUE
        except Exception:
            # cairo surface errors, e.g. CairoError for sides above 32767 px
            logger.exception("rasterizer engine failed for %s", source_path)
            return RasterStatus.IO_ERROR

        try:
            handle = open(destination_path, "wb")
        except OSError as exc:
            logger.error("failed to open %s: %s", destination_path, exc)
            return RasterStatus.FILE_NOT_FOUND
        try:
            with handle:
                handle.write(png)
        except OSError as exc:
            logger.error("failed to write %s: %s", destination_path, exc)
            return RasterStatus.IO_ERROR

        return RasterStatus.SUCCESS
