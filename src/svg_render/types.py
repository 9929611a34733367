"""Shared type aliases and protocols for render modules."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Protocol

type StatusCode = int
type PathLike = str | Path


class RasterStatus(IntEnum):
    """Status codes reported by the builtin rasterizer (svg-cairo numbering)."""

    SUCCESS = 0
    NO_MEMORY = 1
    IO_ERROR = 2
    FILE_NOT_FOUND = 3
    INVALID_VALUE = 4
    INVALID_CALL = 5
    PARSE_ERROR = 6


class RasterImage(Protocol):
    """Marker protocol for decoded raster objects handed to the host shell."""

    @property
    def size(self) -> tuple[int, int]:
        """Pixel dimensions as ``(width, height)``."""
