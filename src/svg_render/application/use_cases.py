"""Application use-cases orchestrating staging, rendering, and presentation."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from svg_render.application.options import RenderOptions, StagingOptions
from svg_render.application.ports import (
    BundledAsset,
    DisplayMetrics,
    Presenter,
    Rasterizer,
)
from svg_render.application.results import DisplayOutcome, RenderResult, StagedAsset
from svg_render.errors import (
    InvalidRenderRequestError,
    PresentationError,
    RasterizerContractError,
    StagingError,
)
from svg_render.infrastructure.locks import PathLockRegistry, default_lock_registry
from svg_render.infrastructure.staging import (
    copy_asset_to_file,
    resolve_writable_directory,
)
from svg_render.schemas import RenderRequestConfig, StagingConfig
from svg_render.types import PathLike, RasterStatus

logger = logging.getLogger(__name__)

RASTER_SUFFIX = ".png"


def derive_destination_path(source_path: PathLike) -> Path:
    """Return ``source_path`` with ``.png`` appended.

    No per-size key: every render of a source overwrites the same file.
    """
    return Path(f"{source_path}{RASTER_SUFFIX}")


def ensure_staged(
    asset: BundledAsset,
    destination_directory: Path | None,
    *,
    fallback_directory: Path | None = None,
    options: StagingOptions | None = None,
    locks: PathLockRegistry | None = None,
) -> StagedAsset:
    """Use-case: make sure the bundled asset exists in writable storage.

    An existing file is never re-copied or re-validated.

    Raises
    ------
    StagingError
        If no directory is usable or the copy fails.
    """
    options = options or StagingOptions()
    try:
        config = StagingConfig(
            destination_directory=destination_directory,
            fallback_directory=fallback_directory,
            filename=options.filename,
            chunk_size=options.chunk_size,
        )
    except ValidationError as exc:
        raise StagingError(f"Invalid staging parameters: {exc}") from exc

    locks = locks or default_lock_registry()
    directory = resolve_writable_directory(
        config.destination_directory, config.fallback_directory
    )
    target = directory / config.filename

    with locks.hold(target):
        if target.exists():
            logger.debug("asset already staged at %s", target)
            return StagedAsset(path=target, copied=False)
        written = copy_asset_to_file(asset, target, chunk_size=config.chunk_size)

    logger.info("staged %s to %s (%d bytes)", asset.name, target, written)
    return StagedAsset(path=target, copied=True)


def _default_rasterizer() -> Rasterizer:
    from svg_render.backends.registry import create_default_registry

    return create_default_registry().get()


def render_svg(
    *,
    source_path: PathLike,
    scale: int | float,
    width: int,
    height: int,
    rasterizer: Rasterizer | None = None,
    locks: PathLockRegistry | None = None,
) -> RenderResult:
    """Use-case: rasterize one vector file at the requested pixel size.

    The rasterizer is called exactly once with the arguments unchanged.
    Status ``0`` is success; every other integer is a failure carrying that
    code. Concurrent renders targeting the same destination are serialized.

    Raises
    ------
    InvalidRenderRequestError
        If the parameters fail validation; the rasterizer is not called.
    RasterizerContractError
        If the rasterizer returns a non-integer status.
    """
    source = Path(source_path)
    try:
        request = RenderRequestConfig(
            source_path=source,
            destination_path=derive_destination_path(source),
            scale=scale,
            width=width,
            height=height,
        )
    except ValidationError as exc:
        raise InvalidRenderRequestError(f"Invalid render parameters: {exc}") from exc

    rasterizer = rasterizer or _default_rasterizer()
    locks = locks or default_lock_registry()

    logger.debug(
        "rendering %s -> %s at %dx%d (scale=%s)",
        request.source_path,
        request.destination_path,
        request.width,
        request.height,
        request.scale,
    )
    with locks.hold(request.destination_path):
        status = rasterizer.render_vector(
            str(request.source_path),
            str(request.destination_path),
            request.scale,
            request.width,
            request.height,
        )

    if isinstance(status, bool) or not isinstance(status, int):
        raise RasterizerContractError(
            f"Rasterizer returned {status!r}; expected an integer status code."
        )

    if status != RasterStatus.SUCCESS:
        logger.warning("rasterizer failed for %s with status %d", source, status)
        return RenderResult(
            status_code=int(status),
            source_path=source,
            destination_path=None,
            width=request.width,
            height=request.height,
        )

    logger.info("rendered %s", request.destination_path)
    return RenderResult(
        status_code=int(status),
        source_path=source,
        destination_path=request.destination_path,
        width=request.width,
        height=request.height,
    )


def show_bundled_image(
    *,
    asset: BundledAsset,
    data_directory: Path | None,
    fallback_directory: Path | None,
    display: DisplayMetrics,
    presenter: Presenter,
    rasterizer: Rasterizer | None = None,
    options: RenderOptions | None = None,
    locks: PathLockRegistry | None = None,
) -> DisplayOutcome:
    """Use-case: stage, render at the current display size, and present.

    Staging errors are logged and abort the attempt. A rasterizer failure
    skips presentation. A presenter decode failure is logged and leaves
    nothing presented.
    """
    options = options or RenderOptions()
    try:
        staged = ensure_staged(
            asset,
            data_directory,
            fallback_directory=fallback_directory,
            locks=locks,
        )
    except StagingError:
        logger.exception("staging failed; nothing will be displayed")
        return DisplayOutcome(staged=None, result=None)

    width, height = display.size()
    result = render_svg(
        source_path=staged.path,
        scale=options.scale,
        width=width,
        height=height,
        rasterizer=rasterizer,
        locks=locks,
    )
    if not result.succeeded or result.destination_path is None:
        logger.info("render failed with status %d; skipping display", result.status_code)
        return DisplayOutcome(staged=staged, result=result)

    try:
        image = presenter.present(result.destination_path)
    except PresentationError:
        logger.exception("rendered raster could not be presented")
        return DisplayOutcome(staged=staged, result=result)
    return DisplayOutcome(staged=staged, result=result, image=image)
