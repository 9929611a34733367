"""Backend registry and discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from svg_render.adapters.rasterizers import CallableRasterizer
from svg_render.backends.base import RasterizerBackend
from svg_render.backends.builtins import CairoSvgBackend
from svg_render.errors import BackendError

DEFAULT_BACKEND = "cairosvg"


class BackendRegistry:
    """Registry for rasterizer backends."""

    def __init__(self) -> None:
        self._backends: dict[str, RasterizerBackend] = {}

    def register(self, backend: RasterizerBackend) -> None:
        """Register backend instance by unique name.

        Parameters
        ----------
        backend : RasterizerBackend
            Backend instance to register.

        Raises
        ------
        BackendError
            If backend has no usable name or no ``render_vector`` method.
        """
        name = str(getattr(backend, "name", "")).strip()
        if not name:
            raise BackendError("Backend must define a non-empty 'name'.")
        if not callable(getattr(backend, "render_vector", None)):
            raise BackendError(f"Backend '{name}' must implement render_vector().")
        self._backends[name] = backend

    def names(self) -> list[str]:
        """Return registered backend names, sorted."""
        return sorted(self._backends.keys())

    def get(self, name: str | None = None) -> RasterizerBackend:
        """Get backend by name.

        Parameters
        ----------
        name : str | None, default=None
            Backend name; ``None`` selects ``DEFAULT_BACKEND``.

        Returns
        -------
        RasterizerBackend
            Registered backend instance.

        Raises
        ------
        BackendError
            If backend name is not registered.
        """
        key = name or DEFAULT_BACKEND
        try:
            return self._backends[key]
        except KeyError as exc:
            raise BackendError(
                f"Unknown backend '{key}'. Available backends: {', '.join(self.names())}"
            ) from exc

    def load_module(self, module_or_path: str) -> None:
        """Load backends from module name or file path.

        .. warning::
            This method executes code from the specified module. Only load
            backends from trusted sources.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import a backend from a ``.py`` file or a dotted module name.

    Raises
    ------
    BackendError
        If the file is not a Python source file, or importing or executing
        it fails.
    """
    candidate = Path(module_or_path)
    if candidate.is_file():
        if candidate.suffix != ".py":
            raise BackendError(f"Backend file must be a .py module, got {candidate}.")
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise BackendError(f"Unable to load backend module from {candidate}.")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise BackendError(
                f"Unable to execute backend module {candidate}: {exc}"
            ) from exc
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise BackendError(
            f"Unable to import backend module '{module_or_path}': {exc}"
        ) from exc


def _register_from_module(module: ModuleType, registry: BackendRegistry) -> None:
    """Register the rasterizers a backend module exports.

    Checked in order: ``register_backends(registry)``, ``BACKENDS``,
    ``BACKEND``, then a bare module-level ``render_vector`` function, which
    is registered under ``BACKEND_NAME`` or the module's own name.
    """
    label = module.__name__
    hook = getattr(module, "register_backends", None)
    if callable(hook):
        try:
            hook(registry)
        except BackendError:
            raise
        except Exception as exc:
            raise BackendError(f"register_backends() in '{label}' failed: {exc}") from exc
        return

    backends_obj = getattr(module, "BACKENDS", None)
    if backends_obj is not None:
        for backend in backends_obj:
            registry.register(backend)
        return

    backend_obj = getattr(module, "BACKEND", None)
    if backend_obj is not None:
        registry.register(backend_obj)
        return

    render = getattr(module, "render_vector", None)
    if callable(render):
        name = getattr(module, "BACKEND_NAME", label.rpartition(".")[2])
        registry.register(CallableRasterizer(render, name=name))
        return

    raise BackendError(
        f"Backend module '{label}' must expose register_backends(registry), "
        "BACKENDS, BACKEND, or a render_vector() function."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> BackendRegistry:
    """Create registry holding the builtin backend plus any extra modules.

    Parameters
    ----------
    extra_modules : Iterable[str] | None, optional
        Additional backend modules to load.

    Returns
    -------
    BackendRegistry
        Registry with built-in and external backends.
    """
    registry = BackendRegistry()
    registry.register(CairoSvgBackend())
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
