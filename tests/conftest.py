"""Shared pytest configuration, marker assignment, and SVG fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="240" height="160" '
    'viewBox="0 0 240 160">'
    '<rect x="0" y="0" width="240" height="160" fill="#336699"/>'
    "</svg>"
)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def sample_svg(tmp_path: Path) -> Path:
    """Write a 240x160 SVG into a temp directory and return its path."""
    path = tmp_path / "image.svg"
    path.write_text(SAMPLE_SVG, encoding="utf-8")
    return path
