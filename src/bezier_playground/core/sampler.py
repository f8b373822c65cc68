import logging
from typing import List, Optional, Sequence

from .geometry import Point, BezierCurve
from .. import config

logger = logging.getLogger(__name__)


def sample(points: Sequence[Point], resolution: int = config.CURVE_RESOLUTION) -> List[Point]:
    """
    Polyline approximation of the curve at uniform t = i / (resolution - 1).
    Returns an empty list when there is nothing to draw.
    """
    if len(points) == 0:
        return []
    if resolution == 1:
        return [BezierCurve.evaluate(0.0, points)]

    last = resolution - 1
    return [BezierCurve.evaluate(i / last, points) for i in range(resolution)]


class CurveSampler:
    """
    Keeps the last sampled curve and only re-samples when it is handed a
    different control point sequence object.
    """

    def __init__(self, resolution: int = config.CURVE_RESOLUTION):
        self.resolution = resolution
        self._source: Optional[Sequence[Point]] = None
        self._curve: List[Point] = []
        self.sample_count = 0

    def curve(self, points: Sequence[Point]) -> List[Point]:
        if points is not self._source:
            self._curve = sample(points, self.resolution)
            self._source = points
            self.sample_count += 1
            logger.debug("Resampled curve from %d control points", len(points))
        return self._curve
