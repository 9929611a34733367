"""Typed option objects shared across render use-cases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StagingOptions:
    """Staged asset naming and copy configuration."""

    filename: str = "image.svg"
    chunk_size: int = 1024


@dataclass(frozen=True)
class RenderOptions:
    """Options passed through to the rasterizer unchanged."""

    scale: int | float = 1
