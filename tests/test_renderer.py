"""Tests for the headless parts of the renderer."""
import numpy as np
import pytest

from renderer import colors_to_bytes, project_points

VIEWPORT = (600, 600)
EYE = (0.0, 10.0, 20.0)


def test_origin_projects_to_viewport_centre():
    pixels, depths, mask = project_points(np.zeros((1, 3)), 0.0, VIEWPORT, EYE)
    assert mask[0]
    assert np.all(np.abs(pixels[0] - 300) <= 1)
    assert depths[0] == pytest.approx(np.sqrt(500.0))


def test_point_behind_camera_is_culled():
    _, _, mask = project_points(np.array([[0.0, 20.0, 40.0]]), 0.0, VIEWPORT, EYE)
    assert not mask[0]


def test_far_off_axis_point_is_culled():
    _, _, mask = project_points(np.array([[500.0, 0.0, 0.0]]), 0.0, VIEWPORT, EYE)
    assert not mask[0]


def test_positive_x_lands_right_of_centre():
    pixels, _, mask = project_points(np.array([[3.0, 0.0, 0.0]]), 0.0, VIEWPORT, EYE)
    assert mask[0]
    assert pixels[0, 0] > 300


def test_full_turn_matches_no_turn():
    positions = np.random.default_rng(0).uniform(-10, 10, (50, 3))
    a = project_points(positions, 0.0, VIEWPORT, EYE)
    b = project_points(positions, 360.0, VIEWPORT, EYE)
    np.testing.assert_array_equal(a[2], b[2])
    np.testing.assert_allclose(a[1], b[1])


def test_empty_positions():
    pixels, depths, mask = project_points(np.zeros((0, 3)), 12.0, VIEWPORT, EYE)
    assert pixels.shape == (0, 2)
    assert depths.shape == (0,)
    assert mask.shape == (0,)


def test_colors_to_bytes_sanitizes():
    colors = np.array([[0.0, 0.5, 1.0], [np.nan, np.inf, -np.inf], [2.0, -1.0, 0.25]])
    result = colors_to_bytes(colors)
    assert result.dtype == np.uint8
    np.testing.assert_array_equal(result, [[0, 127, 255], [0, 255, 0], [255, 0, 63]])
