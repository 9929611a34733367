"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from svg_render.types import RasterImage, RasterStatus, StatusCode


@dataclass(frozen=True)
class StagedAsset:
    """Location of the staged vector source."""

    path: Path
    copied: bool


@dataclass(frozen=True)
class RenderResult:
    """Outcome of one rasterizer invocation.

    ``destination_path`` is set only when the rasterizer reported success.
    Any nonzero ``status_code`` is an undifferentiated failure.
    """

    status_code: StatusCode
    source_path: Path
    destination_path: Path | None
    width: int
    height: int

    @property
    def succeeded(self) -> bool:
        return self.status_code == RasterStatus.SUCCESS


@dataclass(frozen=True)
class DisplayOutcome:
    """Summary of one pass through the stage, render, present chain."""

    staged: StagedAsset | None
    result: RenderResult | None
    image: RasterImage | None = None

    @property
    def presented(self) -> bool:
        return self.image is not None
