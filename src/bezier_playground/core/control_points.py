import logging
import math
from typing import Optional, Tuple, Union

from .geometry import Point
from .. import config

logger = logging.getLogger(__name__)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_order(order: int) -> int:
    return int(clamp(order, config.MIN_ORDER, config.MAX_ORDER))


def parse_order(value: Union[str, int, float]) -> Optional[int]:
    """
    Turns raw order input into a usable order.

    Numbers are truncated toward zero and clamped to the allowed range.
    Anything that is not a finite number gives None and should be ignored.
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            number = float(text)
        except ValueError:
            logger.debug("Ignoring non-numeric order %r", value)
            return None
    else:
        number = float(value)

    if not math.isfinite(number):
        logger.debug("Ignoring non-finite order %r", value)
        return None

    truncated = int(number)
    order = clamp_order(truncated)
    if order != truncated:
        logger.warning("Order %s clamped to %d", value, order)
    return order


def layout_points(order: int) -> Tuple[Point, ...]:
    """
    order + 1 points on a half-sine arc spanning x in [50, 750].
    """
    return tuple(
        Point(config.LAYOUT_X_START + i * config.LAYOUT_X_SPAN / order,
              config.LAYOUT_BASELINE_Y - math.sin(i * math.pi / order) * config.LAYOUT_AMPLITUDE)
        for i in range(order + 1)
    )


class ControlPointModel:
    """
    Ordered control points of the curve.

    The sequence is stored as a tuple and replaced on every change, so the
    identity of ``points`` tells consumers whether anything moved.
    """

    def __init__(self, order: int = config.DEFAULT_ORDER):
        self.order = config.DEFAULT_ORDER
        self.points: Tuple[Point, ...] = ()
        self.set_order(order)

    def __len__(self):
        return len(self.points)

    def set_order(self, new_order: int) -> int:
        """
        Regenerates every control point for the clamped order.
        Previous positions, dragged or not, are discarded.
        """
        order = clamp_order(new_order)
        if order != new_order:
            logger.warning("Order %s out of range, using %d", new_order, order)
        self.order = order
        self.points = layout_points(order)
        logger.info("Curve order set to %d (%d control points)", order, len(self.points))
        return order

    def move_point(self, index: int, position: Point) -> bool:
        """
        Replaces the point at index with position clamped to the canvas.
        Returns False without touching anything for an unknown index.
        """
        if not 0 <= index < len(self.points):
            logger.debug("Ignoring move of unknown control point %s", index)
            return False

        clamped = Point(clamp(position.x, 0.0, config.CANVAS_WIDTH),
                        clamp(position.y, 0.0, config.CANVAS_HEIGHT))
        points = list(self.points)
        points[index] = clamped
        self.points = tuple(points)
        return True
