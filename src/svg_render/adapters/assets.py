"""Bundled asset sources."""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import BinaryIO

DEFAULT_PACKAGE = "svg_render.resources"
DEFAULT_RESOURCE = "image.svg"


class PackageResourceAsset:
    """Vector resource shipped as package data."""

    def __init__(
        self,
        package: str = DEFAULT_PACKAGE,
        resource: str = DEFAULT_RESOURCE,
    ) -> None:
        self.package = package
        self.resource = resource
        self.name = f"{package}/{resource}"

    def open(self) -> BinaryIO:
        """Open the packaged resource for binary reading.

        Returns
        -------
        BinaryIO
            Readable stream over the resource bytes.
        """
        return resources.files(self.package).joinpath(self.resource).open("rb")


class FileAsset:
    """Vector resource read from an existing local file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.name = str(path)

    def open(self) -> BinaryIO:
        return self.path.open("rb")
