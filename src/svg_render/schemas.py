"""Pydantic schemas for runtime validation of staging and render inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator


class RenderRequestConfig(BaseModel):
    """Validated input for a single rasterizer invocation.

    Width and height are taken exactly as supplied: no rounding, clamping, or
    default substitution. Booleans and floats are rejected.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_path: Path
    destination_path: Path
    scale: StrictInt | StrictFloat = 1
    width: StrictInt = Field(gt=0)
    height: StrictInt = Field(gt=0)

    @field_validator("destination_path")
    @classmethod
    def _validate_destination(cls, value: Path) -> Path:
        if not value.name:
            raise ValueError("destination_path must name a file.")
        return value


class StagingConfig(BaseModel):
    """Validated input for asset staging."""

    model_config = ConfigDict(extra="forbid")

    destination_directory: Path | None = None
    fallback_directory: Path | None = None
    filename: str = "image.svg"
    chunk_size: int = Field(default=1024, gt=0)

    @field_validator("filename")
    @classmethod
    def _validate_filename(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped or stripped in {".", ".."}:
            raise ValueError("filename cannot be empty.")
        if "/" in stripped or "\\" in stripped:
            raise ValueError("filename cannot contain path separators.")
        return stripped
