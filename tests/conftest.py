"""Shared fixtures: synthetic images written to temporary files."""

from __future__ import annotations

import cv2
import numpy as np
import pytest


def write_image(path, image):
    assert cv2.imwrite(str(path), image)
    return path


@pytest.fixture
def blank_image_path(tmp_path):
    image = np.full((240, 320, 3), 255, dtype=np.uint8)
    return write_image(tmp_path / "blank.png", image)


@pytest.fixture
def color_blocks_path(tmp_path):
    """White canvas with one solid red and one solid blue square."""
    image = np.full((300, 400, 3), 255, dtype=np.uint8)
    cv2.rectangle(image, (20, 20), (120, 120), (0, 0, 255), -1)
    cv2.rectangle(image, (200, 150), (300, 250), (255, 0, 0), -1)
    return write_image(tmp_path / "blocks.png", image)


@pytest.fixture
def scene_with_template(tmp_path):
    """Noise background with two copies of a noise template.

    Returns (scene path, template path, list of (x, y) template origins).
    """
    rng = np.random.default_rng(7)
    scene = rng.integers(0, 256, size=(240, 320, 3), dtype=np.uint8)
    template = np.random.default_rng(11).integers(0, 256, size=(40, 40, 3), dtype=np.uint8)

    origins = [(30, 40), (200, 150)]
    for x, y in origins:
        scene[y:y + 40, x:x + 40] = template

    scene_path = write_image(tmp_path / "scene.png", scene)
    template_path = write_image(tmp_path / "template.png", template)
    return scene_path, template_path, origins
