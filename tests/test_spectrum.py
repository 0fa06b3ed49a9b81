"""Tests for the wavelength to RGB mapping."""
import numpy as np
import pytest

from spectrum import SPECTRUM_BREAKPOINTS, wavelength_to_rgb


@pytest.mark.parametrize("wavelength", np.linspace(0.0, 1.0, 201))
def test_channels_stay_in_unit_range(wavelength):
    rgb = wavelength_to_rgb(wavelength)
    assert len(rgb) == 3
    for channel in rgb:
        assert 0.0 <= channel <= 1.0


@pytest.mark.parametrize("breakpoint", SPECTRUM_BREAKPOINTS[1:-1])
def test_continuous_at_breakpoints(breakpoint):
    below = wavelength_to_rgb(breakpoint - 1e-9)
    above = wavelength_to_rgb(breakpoint + 1e-9)
    assert below == pytest.approx(above, abs=1e-6)


@pytest.mark.parametrize("wavelength, expected", [
    (0.0, (0.5, 0.0, 0.5)),     # violet
    (0.25, (0.0, 0.0, 1.0)),    # blue
    (0.4, (0.0, 1.0, 1.0)),     # cyan
    (0.55, (0.0, 1.0, 0.0)),    # green
    (0.6, (1.0, 1.0, 0.0)),     # yellow
    (0.75, (1.0, 0.0, 0.0)),    # red
    (1.0, (1.0, 0.0, 0.0)),
])
def test_named_colors_at_breakpoints(wavelength, expected):
    assert wavelength_to_rgb(wavelength) == pytest.approx(expected)


def test_mid_spectrum_is_cyan_green():
    r, g, b = wavelength_to_rgb(0.5)
    assert r == 0.0
    assert g == 1.0
    assert b == pytest.approx(1.0 / 3.0)


def test_red_end_is_flat():
    assert wavelength_to_rgb(0.8) == wavelength_to_rgb(0.95)


def test_deterministic():
    assert wavelength_to_rgb(0.37) == wavelength_to_rgb(0.37)
