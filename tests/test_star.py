"""Tests for the Star read view."""
import numpy as np
import pytest

from star import Star


def _star(velocity=(0.3, 0.0, 0.4), shifted=(0.0, 1.0, 0.5)):
    return Star(
        position=np.array([1.0, 0.0, 2.0]),
        velocity=np.array(velocity),
        base_color=np.array([0.0, 1.0, 1.0 / 3.0]),
        shifted_color=np.array(shifted),
    )


def test_speed():
    assert _star().speed == pytest.approx(0.5)


def test_display_color():
    assert _star().display_color == (0, 255, 128)


def test_display_color_is_clipped():
    assert _star(shifted=(1.5, -0.2, 1.0)).display_color == (255, 0, 255)


def test_repr_mentions_position():
    assert "position=[1.0, 0.0, 2.0]" in repr(_star())
