"""Turning compass and accelerometer readings into a 5x5 LED image."""

from __future__ import annotations

import enum
from typing import Sequence

COMPASS_SCALE = 30000
ACCELEROMETER_SCALE = 700
GRID_SIZE = 5
LIT = 255


class Mode(enum.Enum):
    """What the display shows."""

    COMPASS = "compass"
    ACCELEROMETER = "accelerometer"

    def next(self) -> Mode:
        """The mode to switch to when the button is pressed."""
        return Mode.ACCELEROMETER if self is Mode.COMPASS else Mode.COMPASS


def _div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def cap(value: int, min_value: int, max_value: int) -> int:
    """Clamp value into the range [min_value, max_value]."""
    return max(min_value, min(value, max_value))


def scale(value: int, min_in: int, max_in: int, min_out: int, max_out: int) -> int:
    """Map value linearly from the input range to the output range, clamped."""
    range_in = max_in - min_in
    range_out = max_out - min_out
    return cap(min_out + _div(range_out * (value - min_in), range_in), min_out, max_out)


def render_image(
    mode: Mode, magnetic_field: Sequence[int], acceleration: Sequence[int]
) -> list[list[int]]:
    """Return a 5x5 image with one lit pixel for the reading that mode selects.

    ``magnetic_field`` is (x, y, z) in nanotesla and ``acceleration`` is
    (x, y, z) in milli-g; rows of the result are indexed by y.
    """
    top = GRID_SIZE - 1
    if mode is Mode.COMPASS:
        x = scale(-magnetic_field[0], -COMPASS_SCALE, COMPASS_SCALE, 0, top)
        y = scale(magnetic_field[1], -COMPASS_SCALE, COMPASS_SCALE, 0, top)
    else:
        x = scale(acceleration[0], -ACCELEROMETER_SCALE, ACCELEROMETER_SCALE, 0, top)
        y = scale(-acceleration[1], -ACCELEROMETER_SCALE, ACCELEROMETER_SCALE, 0, top)
    image = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    image[y][x] = LIT
    return image