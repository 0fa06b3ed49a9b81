# spectrum.py

import numba

# Upper bound of each segment of the visible band, normalized so that
# 0.0 is ~400nm (violet) and 1.0 is ~700nm (red).
VIOLET_BLUE_END = 0.25   # ~475nm
BLUE_CYAN_END = 0.4      # ~500nm
CYAN_GREEN_END = 0.55    # ~570nm
GREEN_YELLOW_END = 0.6   # ~590nm
YELLOW_RED_END = 0.75    # ~650nm

SPECTRUM_BREAKPOINTS = (0.0, VIOLET_BLUE_END, BLUE_CYAN_END, CYAN_GREEN_END,
                        GREEN_YELLOW_END, YELLOW_RED_END, 1.0)


@numba.jit(nopython=True)
def wavelength_to_rgb(wavelength):
    """
    Maps a normalized wavelength to an (r, g, b) triple with channels in [0, 1].

    The visible band is split into six linear segments. Within each segment at
    most two channels ramp while the rest are held, so adjacent segments meet
    at the same color and the ramp has no jumps.

    Data Contract:
    - Inputs: wavelength (float) - Normalized wavelength, expected in [0, 1].
    - Outputs: tuple of three floats.
    - Invariants: Values outside [0, 1] are not clamped here; callers must
      clamp first or the outer segments are extrapolated.
    """
    if wavelength <= VIOLET_BLUE_END:
        # Violet to blue: red fades out while blue saturates.
        t = wavelength / VIOLET_BLUE_END
        return (0.5 - 0.5 * t, 0.0, 0.5 + 0.5 * t)
    elif wavelength <= BLUE_CYAN_END:
        t = (wavelength - VIOLET_BLUE_END) / (BLUE_CYAN_END - VIOLET_BLUE_END)
        return (0.0, t, 1.0)
    elif wavelength <= CYAN_GREEN_END:
        t = (wavelength - BLUE_CYAN_END) / (CYAN_GREEN_END - BLUE_CYAN_END)
        return (0.0, 1.0, 1.0 - t)
    elif wavelength <= GREEN_YELLOW_END:
        t = (wavelength - CYAN_GREEN_END) / (GREEN_YELLOW_END - CYAN_GREEN_END)
        return (t, 1.0, 0.0)
    elif wavelength <= YELLOW_RED_END:
        t = (wavelength - GREEN_YELLOW_END) / (YELLOW_RED_END - GREEN_YELLOW_END)
        return (1.0, 1.0 - t, 0.0)
    else:
        return (1.0, 0.0, 0.0)
