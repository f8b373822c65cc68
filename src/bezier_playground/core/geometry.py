from dataclasses import dataclass
from typing import List, Sequence, Tuple


class InvalidInputError(ValueError):
    """Raised when a curve is evaluated without any control points."""


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


class BezierCurve:
    @staticmethod
    def lerp(p0: Point, p1: Point, t: float) -> Point:
        """
        Linear interpolation (1-t)*p0 + t*p1, applied to x and y.
        """
        return Point((1 - t) * p0.x + t * p1.x,
                     (1 - t) * p0.y + t * p1.y)

    @staticmethod
    def reduce(t: float, points: Sequence[Point]) -> List[Point]:
        """One De Casteljau step: interpolate every adjacent pair at t."""
        return [BezierCurve.lerp(points[i], points[i + 1], t)
                for i in range(len(points) - 1)]

    @staticmethod
    def evaluate(t: float, points: Sequence[Point]) -> Point:
        """
        Point on the Bezier curve at parameter t (De Casteljau).

        Works on a single buffer, overwriting entry i with the interpolation
        of entries i and i+1 until one point remains. Cost is O(n^2) in the
        number of control points.
        """
        if len(points) == 0:
            raise InvalidInputError("cannot evaluate a Bezier curve with no control points")

        buffer = list(points)
        for size in range(len(buffer) - 1, 0, -1):
            for i in range(size):
                buffer[i] = BezierCurve.lerp(buffer[i], buffer[i + 1], t)
        return buffer[0]

    @staticmethod
    def construction_levels(t: float, points: Sequence[Point]) -> List[List[Point]]:
        """
        All intermediate levels of the De Casteljau reduction at t.

        Level 0 is the input itself; every following level has one point less
        and the last one holds the curve point. Inputs with 0 or 1 points come
        back as a single level.
        """
        current = list(points)
        levels = [current]
        while len(current) > 1:
            current = BezierCurve.reduce(t, current)
            levels.append(current)
        return levels


def evaluate(t: float, points: Sequence[Point]) -> Point:
    return BezierCurve.evaluate(t, points)


def construction_levels(t: float, points: Sequence[Point]) -> List[List[Point]]:
    return BezierCurve.construction_levels(t, points)
