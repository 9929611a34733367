"""Rasterizer backend interfaces and registry."""

from .base import RasterizerBackend
from .registry import DEFAULT_BACKEND, BackendRegistry, create_default_registry

__all__ = [
    "DEFAULT_BACKEND",
    "BackendRegistry",
    "RasterizerBackend",
    "create_default_registry",
]
