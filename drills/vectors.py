"""Vector magnitude and normalisation."""

from __future__ import annotations

import math
from typing import Sequence


def magnitude(vector: Sequence[float]) -> float:
    """Calculate the magnitude of the given vector."""
    return math.sqrt(sum(coord * coord for coord in vector))


def normalize(vector: Sequence[float]) -> list[float]:
    """Return the vector scaled to magnitude 1.0 with the same direction.

    A zero vector has no direction; its components come back as NaN.
    """
    mag = magnitude(vector)
    if mag == 0:
        return [math.nan for _ in vector]
    return [coord / mag for coord in vector]