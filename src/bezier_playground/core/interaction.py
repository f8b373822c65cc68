import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .geometry import Point
from .control_points import ControlPointModel
from .. import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewTransform:
    """
    Uniform screen <- logical mapping: screen = logical * scale + offset.
    The offset carries any letterboxing of the fitted view.
    """
    scale: float
    offset_x: float = 0.0
    offset_y: float = 0.0

    def to_logical(self, screen_x: float, screen_y: float) -> Point:
        return Point((screen_x - self.offset_x) / self.scale,
                     (screen_y - self.offset_y) / self.scale)

    def to_screen(self, point: Point) -> Point:
        return Point(point.x * self.scale + self.offset_x,
                     point.y * self.scale + self.offset_y)


# Returns None while the drawing surface has not been laid out yet
TransformProvider = Callable[[], Optional[ViewTransform]]


def find_handle(points: Sequence[Point], position: Point,
                radius: float = config.HANDLE_HIT_RADIUS) -> Optional[int]:
    """Index of the control point closest to position, if within radius."""
    best = None
    best_d = float("inf")
    for i, p in enumerate(points):
        d = math.hypot(p.x - position.x, p.y - position.y)
        if d <= radius and d < best_d:
            best = i
            best_d = d
    return best


class InteractionController:
    """
    Routes pointer events from the drawing surface to the control points.

    Two states: idle (``dragging_index is None``) and dragging a level-0
    control point. Leaving the surface ends a drag like releasing the button.
    """

    def __init__(self, model: ControlPointModel, transform_provider: TransformProvider,
                 on_change: Optional[Callable[[], None]] = None):
        self.model = model
        self.transform_provider = transform_provider
        self.on_change = on_change
        self.dragging_index: Optional[int] = None

    @property
    def is_dragging(self) -> bool:
        return self.dragging_index is not None

    def pointer_down(self, index: int, level: int = 0) -> bool:
        # Only original control points are draggable
        if level != 0 or not 0 <= index < len(self.model.points):
            return False
        self.dragging_index = index
        logger.debug("Start dragging control point %d", index)
        return True

    def pointer_down_at(self, screen_x: float, screen_y: float) -> bool:
        transform = self.transform_provider()
        if transform is None:
            return False
        index = find_handle(self.model.points, transform.to_logical(screen_x, screen_y),
                            config.HANDLE_HIT_RADIUS)
        if index is None:
            return False
        return self.pointer_down(index)

    def pointer_move(self, screen_x: float, screen_y: float) -> bool:
        if self.dragging_index is None:
            return False

        transform = self.transform_provider()
        if transform is None:
            logger.debug("No view transform yet, dropping move event")
            return False

        position = transform.to_logical(screen_x, screen_y)
        moved = self.model.move_point(self.dragging_index, position)
        if moved and self.on_change is not None:
            self.on_change()
        return moved

    def pointer_up(self):
        if self.dragging_index is not None:
            logger.debug("Stop dragging control point %d", self.dragging_index)
        self.dragging_index = None

    def pointer_leave(self):
        self.pointer_up()

    def reset(self):
        """Drops any drag, used when the control points are regenerated."""
        self.dragging_index = None
