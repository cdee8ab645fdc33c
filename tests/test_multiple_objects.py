"""Tests for :mod:`machine_vision.multiple_objects`."""

from __future__ import annotations

import cv2
import numpy as np
import pytest

from machine_vision.multiple_objects import analyze_image, find_objects
from machine_vision.multiple_objects.image_processor import (
    boxes_overlap,
    merge_bounding_boxes,
    transform_template,
    union_boxes,
)
from machine_vision.utils.image_io import ImageLoadError


def _contains(box, point):
    x, y, w, h = box
    px, py = point
    return x <= px < x + w and y <= py < y + h


def test_finds_both_template_copies(scene_with_template):
    scene_path, template_path, origins = scene_with_template

    result = analyze_image(scene_path, template_path)

    assert result.detected_objects_count == 2
    assert result.image_size == (320, 240)
    for origin in origins:
        assert any(_contains(box, origin) for box in result.boxes)


def _structured_template():
    template = np.full((50, 50, 3), 60, dtype=np.uint8)
    cv2.rectangle(template, (5, 5), (25, 18), (255, 255, 255), -1)
    cv2.circle(template, (34, 34), 10, (0, 0, 255), -1)
    cv2.line(template, (5, 45), (45, 25), (0, 200, 0), 3)
    return template


def test_finds_scaled_and_rotated_copy(tmp_path):
    template = _structured_template()
    planted = transform_template(template, 0.8, 30.0)
    h, w = planted.shape[:2]

    scene = np.random.default_rng(5).integers(0, 256, size=(200, 200, 3), dtype=np.uint8)
    x, y = 60, 100
    scene[y:y + h, x:x + w] = planted

    scene_path = tmp_path / "rotated_scene.png"
    template_path = tmp_path / "structured.png"
    cv2.imwrite(str(scene_path), scene)
    cv2.imwrite(str(template_path), template)

    result = analyze_image(scene_path, template_path)

    assert result.detected_objects_count == 1
    assert _contains(result.boxes[0], (x + w // 2, y + h // 2))


def test_missing_template_raises(scene_with_template, tmp_path):
    scene_path, _, _ = scene_with_template
    with pytest.raises(ImageLoadError):
        analyze_image(scene_path, tmp_path / "nope.png")


def test_template_larger_than_image_is_skipped():
    image = np.zeros((20, 20, 3), dtype=np.uint8)
    template = np.full((60, 60, 3), 200, dtype=np.uint8)
    assert find_objects(image, template, angles=[0.0]) == []


def test_transform_keeps_scaled_size():
    template = np.zeros((40, 50, 3), dtype=np.uint8)
    assert transform_template(template, 1.0, 30.0).shape == (40, 50, 3)
    assert transform_template(template, 0.6, 0.0).shape == (24, 30, 3)


def test_zero_angle_full_scale_is_identity():
    template = np.random.default_rng(3).integers(0, 256, size=(16, 16, 3), dtype=np.uint8)
    assert np.array_equal(transform_template(template, 1.0, 0.0), template)


def test_overlap_requires_both_axes():
    assert boxes_overlap((0, 0, 10, 10), (5, 5, 10, 10))
    assert not boxes_overlap((0, 0, 10, 10), (10, 0, 10, 10))
    assert not boxes_overlap((0, 0, 10, 10), (5, 20, 10, 10))


def test_union_covers_both_boxes():
    assert union_boxes((0, 0, 10, 10), (5, 5, 10, 10)) == (0, 0, 15, 15)


def test_merge_sweeps_left_to_right():
    boxes = [(50, 0, 10, 10), (0, 0, 10, 10), (4, 2, 10, 10), (12, 0, 10, 10)]
    assert merge_bounding_boxes(boxes) == [(0, 0, 22, 12), (50, 0, 10, 10)]


def test_merge_empty():
    assert merge_bounding_boxes([]) == []
