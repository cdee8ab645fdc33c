"""Tests for file validation, image loading and result reporting."""

from __future__ import annotations

import types

import cv2
import numpy as np
import pytest

from machine_vision.utils.file_selector import file_filter, select_file, validate_file
from machine_vision.utils.image_io import ImageLoadError, image_size, load_image
from machine_vision.utils.results import format_stats, format_table, save_results


@pytest.mark.parametrize("name", ["a.png", "b.JPG", "c.jpeg"])
def test_validate_accepts_image_extensions(tmp_path, name):
    path = tmp_path / name
    path.write_bytes(b"")
    assert validate_file(path)


def test_validate_rejects_other_extensions_and_missing_files(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    assert not validate_file(path)
    assert not validate_file(tmp_path / "missing.png")


def test_select_file_handles_cancel_and_invalid(tmp_path):
    assert select_file("") is None
    bad = tmp_path / "doc.bmp"
    bad.write_bytes(b"")
    assert select_file(str(bad)) is None

    good = tmp_path / "img.png"
    good.write_bytes(b"")
    assert select_file(str(good)) == good


def test_file_filter():
    assert file_filter(("png", "jpg")) == "Allowed Files (*.png *.jpg)"


def test_load_image_roundtrip(blank_image_path):
    image = load_image(blank_image_path)
    assert image_size(image) == (320, 240)


def test_load_image_missing(tmp_path):
    with pytest.raises(ImageLoadError):
        load_image(tmp_path / "none.png")


def _fake_result():
    return types.SimpleNamespace(summary=lambda: [("File Name", "x.png"), ("Detected Object Count", 3)])


def test_format_stats_one_line_per_entry():
    assert format_stats(_fake_result()) == "File Name: x.png\nDetected Object Count: 3\n"


def test_format_table_includes_values():
    table = format_table(_fake_result())
    assert "x.png" in table and "Detected Object Count" in table


def test_save_results_writes_report_and_image(tmp_path):
    image = np.zeros((10, 12, 3), dtype=np.uint8)
    report, image_path = save_results(tmp_path / "out" / "report.txt", "File Name: x\n", image)

    assert report.read_text(encoding="utf-8") == "File Name: x\n"
    assert image_path.name == "report_image.png"
    assert cv2.imread(str(image_path)).shape == (10, 12, 3)
