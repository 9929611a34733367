#!/usr/bin/env python3
"""
svg_render.cli.cli

Typer-based CLI for staging the bundled SVG and rasterizing it to PNG.

Examples
--------
Install core + CLI + the cairo backend:

    uv pip install -e ".[cli,cairo]"

Render the bundled image for a 1080x1920 display:

    svg-render show --width 1080 --height 1920 --data-dir ./data
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import typer

from svg_render.errors import BackendError, RenderError

app = typer.Typer(
    name="svg-render",
    help="Stage a bundled SVG and rasterize it to PNG for display.",
    no_args_is_help=True,
)

DATA_DIR_HELP = "Preferred writable directory for the staged SVG."
FALLBACK_DIR_HELP = "Directory used when the preferred one is unavailable (default: current directory)."
SOURCE_HELP = "Stage this SVG file instead of the packaged image."
BACKEND_HELP = "Rasterizer backend name."
BACKEND_MODULE_HELP = "Backend module import path or file path (repeatable)."
CAIRO_PURPOSE = "SVG rasterization"


# -----------------------------
# Dependency checks / utilities
# -----------------------------
@dataclass(frozen=True)
class MissingDep:
    """Represent a missing optional dependency."""

    import_name: str
    extra_name: str
    purpose: str


def _is_importable(module: str) -> bool:
    """Check whether a module can be resolved."""
    try:
        import importlib.util

        return importlib.util.find_spec(module) is not None
    except Exception:
        return False


def _require_deps(missing: Sequence[MissingDep]) -> None:
    """Raise a Typer error if any required deps are missing.

    Parameters
    ----------
    missing : Sequence[MissingDep]
        Dependency requirements for a command.
    """
    not_found = [d for d in missing if not _is_importable(d.import_name)]
    if not not_found:
        return

    extras = sorted({d.extra_name for d in not_found})
    details = "\n".join(
        f"- Missing '{d.import_name}' ({d.purpose}). Install extra: [bold].[{d.extra_name}][/bold]"
        for d in not_found
    )

    uv_hint = f'uv pip install -e ".[cli,{",".join(extras)}]"'
    pip_hint = f'pip install "svg-render[cli,{",".join(extras)}]"'

    msg = (
        "[red]Missing optional dependencies for this command.[/red]\n\n"
        f"{details}\n\n"
        "Install with uv (recommended):\n"
        f"  {uv_hint}\n\n"
        "Or with pip:\n"
        f"  {pip_hint}\n"
    )
    raise typer.BadParameter(msg)


def _require_backend_deps(backend: str | None, backend_modules: list[str] | None) -> None:
    """Require cairo extras only when the builtin backend will be used."""
    if backend_modules or (backend and backend != "cairosvg"):
        return
    _require_deps(
        [
            MissingDep("cairosvg", "cairo", CAIRO_PURPOSE),
            MissingDep("PIL", "cairo", "PNG composition / decoding"),
        ]
    )


def _print_render_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code.

    Parameters
    ----------
    exc : Exception
        Exception raised while staging or rendering.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"[red]✗ {type(exc).__name__}:[/red] {exc}", err=True)
    if debug:
        typer.echo("\n[dim]Traceback:[/dim]", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks and debug logs."),
) -> None:
    """Initialize shared CLI state and logging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("stage")
def stage_cmd(
    ctx: typer.Context,
    data_dir: Path | None = typer.Option(None, "--data-dir", help=DATA_DIR_HELP),
    fallback_dir: Path | None = typer.Option(
        None, "--fallback-dir", help=FALLBACK_DIR_HELP
    ),
    source: Path | None = typer.Option(
        None, "--source", exists=True, dir_okay=False, readable=True, help=SOURCE_HELP
    ),
) -> None:
    """Copy the SVG into writable storage (no-op if already staged)."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from svg_render.api import stage_bundled_image

        out = stage_bundled_image(
            data_dir, fallback_directory=fallback_dir or Path.cwd(), source=source
        )
        typer.echo(f"[green]✓ Staged:[/green] {out}")
    except RenderError as exc:
        raise typer.Exit(code=_print_render_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_render_error(exc, debug))


@app.command("render")
def render_cmd(
    ctx: typer.Context,
    source_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="SVG file to rasterize. Output is written next to it as <source>.png.",
    ),
    width: int = typer.Option(..., "--width", min=1, help="Target width in pixels."),
    height: int = typer.Option(..., "--height", min=1, help="Target height in pixels."),
    backend: str | None = typer.Option(None, "--backend", help=BACKEND_HELP),
    backend_module: list[str] | None = typer.Option(
        None, "--backend-module", help=BACKEND_MODULE_HELP
    ),
) -> None:
    """Rasterize an SVG at the given pixel size."""
    debug: bool = bool(ctx.obj.get("debug", False))

    _require_backend_deps(backend, backend_module)

    try:
        from svg_render.api import render_file

        result = render_file(
            source_path,
            width=width,
            height=height,
            backend=backend,
            backend_modules=backend_module,
        )
    except RenderError as exc:
        raise typer.Exit(code=_print_render_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_render_error(exc, debug))

    if not result.succeeded:
        typer.echo(
            f"[red]✗ Rasterizer failed:[/red] status {result.status_code}", err=True
        )
        raise typer.Exit(code=1)
    typer.echo(f"[green]✓ Saved:[/green] {result.destination_path}")


@app.command("show")
def show_cmd(
    ctx: typer.Context,
    width: int = typer.Option(..., "--width", min=1, help="Display width in pixels."),
    height: int = typer.Option(..., "--height", min=1, help="Display height in pixels."),
    data_dir: Path | None = typer.Option(None, "--data-dir", help=DATA_DIR_HELP),
    fallback_dir: Path | None = typer.Option(
        None, "--fallback-dir", help=FALLBACK_DIR_HELP
    ),
    source: Path | None = typer.Option(
        None, "--source", exists=True, dir_okay=False, readable=True, help=SOURCE_HELP
    ),
    backend: str | None = typer.Option(None, "--backend", help=BACKEND_HELP),
    backend_module: list[str] | None = typer.Option(
        None, "--backend-module", help=BACKEND_MODULE_HELP
    ),
) -> None:
    """Stage, render for the display size, and decode the result."""
    debug: bool = bool(ctx.obj.get("debug", False))

    _require_backend_deps(backend, backend_module)
    _require_deps([MissingDep("PIL", "cairo", "raster decoding")])

    try:
        from svg_render.api import show_image

        outcome = show_image(
            width,
            height,
            data_dir,
            fallback_directory=fallback_dir or Path.cwd(),
            source=source,
            backend=backend,
            backend_modules=backend_module,
        )
    except RenderError as exc:
        raise typer.Exit(code=_print_render_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_render_error(exc, debug))

    if outcome.staged is None:
        typer.echo("[red]✗ Staging failed; nothing displayed.[/red]", err=True)
        raise typer.Exit(code=2)
    if not outcome.presented or outcome.result is None:
        # Rasterizer failure skips display without a user-facing error.
        raise typer.Exit(code=1)
    image_width, image_height = outcome.image.size
    typer.echo(
        f"[green]✓ Displaying:[/green] {outcome.result.destination_path} "
        f"({image_width}x{image_height})"
    )


@app.command("doctor")
def doctor_cmd(
    backend_module: list[str] | None = typer.Option(
        None, "--backend-module", help=BACKEND_MODULE_HELP
    ),
) -> None:
    """Print installed toolchain versions and registered backends."""
    import importlib.metadata as metadata

    modules = [
        "cairosvg",
        "cairocffi",
        "pillow",
        "pydantic",
        "typer",
    ]

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in modules:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    try:
        from svg_render.backends.registry import create_default_registry

        registry = create_default_registry(backend_module)
        typer.echo(f"backends: {', '.join(registry.names())}")
    except BackendError as exc:
        typer.echo(f"backends: <unavailable> ({exc})")


if __name__ == "__main__":
    app()
