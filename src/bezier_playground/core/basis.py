from typing import Sequence

import numpy as np
from scipy.special import comb

from .geometry import Point, InvalidInputError


def bernstein(n: int, t) -> np.ndarray:
    """
    Bernstein basis polynomials of degree n.

    B_i,n(t) = C(n, i) t^i (1-t)^(n-i)

    For scalar t the result has shape (n+1,), for an array of t values
    it has shape (n+1, len(t)).
    """
    t = np.asarray(t, dtype=float)
    i = np.arange(n + 1).reshape((-1,) + (1,) * t.ndim)
    return comb(n, i) * t ** i * (1 - t) ** (n - i)


def bernstein_point(t: float, points: Sequence[Point]) -> Point:
    """Closed form evaluation of the curve, sum of B_i,n(t) * P_i."""
    if len(points) == 0:
        raise InvalidInputError("cannot evaluate a Bezier curve with no control points")
    coords = np.array([p.to_tuple() for p in points])
    weights = bernstein(len(points) - 1, t)
    x, y = weights @ coords
    return Point(float(x), float(y))
