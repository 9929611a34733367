"""Unit tests for idempotent asset staging."""

from __future__ import annotations

import io
import threading
import time
from pathlib import Path

import pytest

from stubs import SpyAsset
from svg_render.application.options import StagingOptions
from svg_render.application.use_cases import ensure_staged
from svg_render.errors import StagingError
from svg_render.infrastructure.locks import PathLockRegistry

PAYLOAD = b"<svg xmlns='http://www.w3.org/2000/svg' width='4' height='4'/>" * 40


def test_fresh_install_copies_exactly_one_file(tmp_path: Path) -> None:
    """Create image.svg with the bundled byte length in an empty directory."""
    data_dir = tmp_path / "data"
    asset = SpyAsset(PAYLOAD)

    staged = ensure_staged(asset, data_dir)

    assert staged.copied is True
    assert staged.path == (data_dir / "image.svg").absolute()
    assert staged.path.is_absolute()
    assert [p.name for p in data_dir.iterdir()] == ["image.svg"]
    assert staged.path.stat().st_size == len(PAYLOAD)
    assert staged.path.read_bytes() == PAYLOAD


def test_second_call_performs_no_copy(tmp_path: Path) -> None:
    """Open the bundled asset once across repeated calls."""
    asset = SpyAsset(PAYLOAD)

    first = ensure_staged(asset, tmp_path)
    mtime = first.path.stat().st_mtime_ns
    second = ensure_staged(asset, tmp_path)

    assert asset.opens == 1
    assert second.copied is False
    assert second.path == first.path
    assert second.path.stat().st_mtime_ns == mtime


def test_existing_file_is_never_revalidated(tmp_path: Path) -> None:
    """Keep whatever bytes are already at the staged path."""
    (tmp_path / "image.svg").write_bytes(b"stale")
    asset = SpyAsset(PAYLOAD)

    staged = ensure_staged(asset, tmp_path)

    assert asset.opens == 0
    assert staged.path.read_bytes() == b"stale"


def test_missing_preferred_directory_uses_fallback(tmp_path: Path) -> None:
    """Fall back when the preferred directory is not given."""
    fallback = tmp_path / "internal"

    staged = ensure_staged(SpyAsset(PAYLOAD), None, fallback_directory=fallback)

    assert staged.path.parent == fallback.absolute()


def test_unusable_preferred_directory_uses_fallback(tmp_path: Path) -> None:
    """Fall back when the preferred directory cannot be created."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    fallback = tmp_path / "internal"

    staged = ensure_staged(
        SpyAsset(PAYLOAD), blocker / "external", fallback_directory=fallback
    )

    assert staged.path == (fallback / "image.svg").absolute()


def test_no_directory_raises_staging_error() -> None:
    """Raise when neither candidate directory is available."""
    with pytest.raises(StagingError, match="No writable data directory"):
        ensure_staged(SpyAsset(PAYLOAD), None, fallback_directory=None)


def test_unopenable_asset_raises_staging_error(tmp_path: Path) -> None:
    """Wrap resource open failures."""

    class _Missing:
        name = "missing.svg"

        def open(self) -> io.BytesIO:
            raise FileNotFoundError("no such resource")

    with pytest.raises(StagingError, match="missing.svg"):
        ensure_staged(_Missing(), tmp_path)
    assert not (tmp_path / "image.svg").exists()


def test_interrupted_copy_leaves_partial_file(tmp_path: Path) -> None:
    """A failed copy is not cleaned up and later calls treat it as staged."""

    class _Flaky(io.BytesIO):
        def __init__(self) -> None:
            super().__init__(PAYLOAD)
            self.reads = 0

        def read(self, size: int | None = -1) -> bytes:
            self.reads += 1
            if self.reads > 1:
                raise OSError("device error")
            return super().read(size)

    class _Asset:
        name = "flaky.svg"

        def open(self) -> _Flaky:
            return _Flaky()

    with pytest.raises(StagingError):
        ensure_staged(_Asset(), tmp_path, options=StagingOptions(chunk_size=16))

    partial = tmp_path / "image.svg"
    assert partial.exists()
    assert partial.stat().st_size == 16

    again = ensure_staged(SpyAsset(PAYLOAD), tmp_path)
    assert again.copied is False


@pytest.mark.parametrize("filename", ["", "nested/image.svg", ".."])
def test_invalid_filename_is_rejected(tmp_path: Path, filename: str) -> None:
    """Reject staged filenames that are not a single path component."""
    with pytest.raises(StagingError, match="Invalid staging parameters"):
        ensure_staged(SpyAsset(PAYLOAD), tmp_path, options=StagingOptions(filename=filename))


def test_custom_filename_is_honoured(tmp_path: Path) -> None:
    """Stage under a caller-chosen filename."""
    staged = ensure_staged(
        SpyAsset(PAYLOAD), tmp_path, options=StagingOptions(filename="logo.svg")
    )
    assert staged.path.name == "logo.svg"


def test_concurrent_first_runs_copy_once(tmp_path: Path) -> None:
    """Serialize racing first-run calls so the asset is copied once."""

    class _SlowAsset(SpyAsset):
        def open(self) -> io.BytesIO:
            time.sleep(0.05)
            return super().open()

    asset = _SlowAsset(PAYLOAD)
    locks = PathLockRegistry()
    barrier = threading.Barrier(4)
    results = []
    errors: list[BaseException] = []

    def stage() -> None:
        barrier.wait()
        try:
            results.append(ensure_staged(asset, tmp_path, locks=locks))
        except BaseException as exc:  # pragma: no cover - surfaced below
            errors.append(exc)

    threads = [threading.Thread(target=stage) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert asset.opens == 1
    assert sorted(r.copied for r in results) == [False, False, False, True]
    assert {r.path for r in results} == {(tmp_path / "image.svg").absolute()}
    assert (tmp_path / "image.svg").read_bytes() == PAYLOAD
