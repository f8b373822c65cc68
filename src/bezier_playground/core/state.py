from typing import List, Optional, Sequence, Tuple

from .geometry import Point, BezierCurve
from .control_points import ControlPointModel, clamp
from .sampler import CurveSampler
from .. import config


class CurveState:
    """
    Everything the canvas draws, derived from the control points and t.

    The sampled curve only depends on the control points and is recomputed
    when the point sequence is replaced. The construction pyramid also
    depends on t and is recomputed when either changes.
    """

    def __init__(self, order: int = config.DEFAULT_ORDER, t: float = 0.0):
        self.model = ControlPointModel(order)
        self.t = clamp(t, 0.0, 1.0)
        self.sampler = CurveSampler(config.CURVE_RESOLUTION)
        self._levels: List[List[Point]] = []
        self._levels_key: Optional[Tuple[Sequence[Point], float]] = None

    @property
    def points(self) -> Tuple[Point, ...]:
        return self.model.points

    @property
    def order(self) -> int:
        return self.model.order

    def set_t(self, t: float) -> float:
        self.t = clamp(t, 0.0, 1.0)
        return self.t

    def set_order(self, order: int) -> int:
        return self.model.set_order(order)

    def curve(self) -> List[Point]:
        return self.sampler.curve(self.model.points)

    def construction(self) -> List[List[Point]]:
        points = self.model.points
        key = self._levels_key
        if key is None or key[0] is not points or key[1] != self.t:
            self._levels = BezierCurve.construction_levels(self.t, points)
            self._levels_key = (points, self.t)
        return self._levels

    def point_at_t(self) -> Optional[Point]:
        levels = self.construction()
        if not levels[-1]:
            return None
        return levels[-1][0]
