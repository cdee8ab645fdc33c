"""The project manifest declares the vision stack and installs every demo package."""

from __future__ import annotations

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _manifest():
    with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
        return tomllib.load(f)


def test_runtime_dependencies():
    deps = set(_manifest()["project"]["dependencies"])
    assert deps == {"PySide6", "opencv-python", "numpy", "pyzbar", "tabulate", "tqdm"}


def test_demo_packages_are_present():
    for package in ("colors_thresholding", "barcode_reader", "multiple_objects"):
        assert (PROJECT_ROOT / "machine_vision" / package / "__init__.py").is_file()
