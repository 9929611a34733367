"""Copy a bundled asset into writable storage."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from svg_render.application.ports import BundledAsset
from svg_render.errors import StagingError

logger = logging.getLogger(__name__)


def resolve_writable_directory(
    preferred: Path | None,
    fallback: Path | None,
) -> Path:
    """Return the first candidate that is (or can be made) a writable directory.

    Parameters
    ----------
    preferred : Path | None
        Preferred data directory.
    fallback : Path | None
        Directory used when the preferred one is missing or unusable.

    Returns
    -------
    Path
        Absolute path of the resolved directory.

    Raises
    ------
    StagingError
        If neither candidate is usable.
    """
    for candidate in (preferred, fallback):
        if candidate is None:
            continue
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("data directory %s unavailable: %s", candidate, exc)
            continue
        if os.access(candidate, os.W_OK | os.X_OK):
            return candidate.absolute()
        logger.warning("data directory %s is not writable", candidate)
    raise StagingError(
        f"No writable data directory (preferred={preferred}, fallback={fallback})."
    )


def copy_asset_to_file(asset: BundledAsset, target: Path, *, chunk_size: int) -> int:
    """Stream-copy ``asset`` bytes into ``target``.

    A failed copy may leave a partial file behind; it is not removed.

    Returns
    -------
    int
        Number of bytes written.
    """
    try:
        with asset.open() as source, target.open("wb") as sink:
            shutil.copyfileobj(source, sink, chunk_size)
            sink.flush()
            written = sink.tell()
    except OSError as exc:
        raise StagingError(
            f"Unable to stage bundled asset '{asset.name}' to {target}: {exc}"
        ) from exc
    return written
