"""Tests for :mod:`machine_vision.barcode_reader`.

The real ZBar decoder is only used on a blank image; decoded symbols are
injected through ``monkeypatch`` so no barcode generator is needed.
"""

from __future__ import annotations

import types

import cv2
import numpy as np
import pytest

pytest.importorskip("pyzbar.pyzbar", exc_type=ImportError)

from pyzbar.pyzbar_error import PyZbarError

from machine_vision.barcode_reader import analyze_image, categorize
from machine_vision.barcode_reader import image_processor
from machine_vision.utils.image_io import ImageLoadError


def _symbol(data, kind="CODE128"):
    return types.SimpleNamespace(data=data.encode("utf-8"), type=kind)


@pytest.mark.parametrize(
    "data, category",
    [
        ("AAA-bbb-0000", "Sensors"),
        ("BBB-ccc-0001", "Cameras"),
        ("CCC-ddd-1000", "Batteries"),
        ("EEE-fff-9999", "Defective Parts"),
        ("ZZZ-zzz-0000", "Unknown"),
        (None, "Unknown"),
    ],
)
def test_categorize(data, category):
    assert categorize(data) == category


def test_blank_image_has_no_barcode(blank_image_path):
    original = cv2.imread(str(blank_image_path))
    result = analyze_image(blank_image_path)

    assert result.barcode_data is None
    assert result.category == "Unknown"
    assert not result.is_defective
    assert np.array_equal(result.annotated_image, original)


def test_known_barcode_is_categorized_and_annotated(monkeypatch, blank_image_path):
    monkeypatch.setattr(image_processor, "decode", lambda image: [_symbol("BBB-ccc-0001")])

    result = analyze_image(blank_image_path)

    assert result.barcode_data == "BBB-ccc-0001"
    assert result.barcode_type == "CODE128"
    assert result.category == "Cameras"
    assert result.annotated_image.min() < 255


def test_defective_part_is_flagged(monkeypatch, blank_image_path):
    monkeypatch.setattr(
        image_processor, "decode",
        lambda image: [_symbol("EEE-fff-9999"), _symbol("AAA-bbb-0000")],
    )

    result = analyze_image(blank_image_path)

    assert result.is_defective
    assert result.barcode_data == "EEE-fff-9999"
    # DEFECTIVE is drawn in red (BGR), so some pixels carry only the red channel
    red = result.annotated_image
    assert np.any((red[:, :, 2] == 255) & (red[:, :, 1] < 255))


def test_decoder_error_is_reported_as_no_barcode(monkeypatch, blank_image_path):
    def broken(image):
        raise PyZbarError("zbar failed")

    monkeypatch.setattr(image_processor, "decode", broken)

    result = analyze_image(blank_image_path)
    assert result.barcode_data is None
    assert result.category == "Unknown"


def test_unreadable_file_raises(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")
    with pytest.raises(ImageLoadError):
        analyze_image(path)


def test_summary_reports_missing_barcode(blank_image_path):
    summary = dict(analyze_image(blank_image_path).summary())
    assert summary["Barcode Data"] == "No Barcode Found"
    assert summary["Image Size"] == "320x240"
