from PyQt6.QtWidgets import QGraphicsView, QGraphicsScene, QGraphicsEllipseItem, QGraphicsPathItem
from PyQt6.QtCore import Qt, pyqtSignal, QRectF
from PyQt6.QtGui import QPainter, QPen, QPainterPath, QBrush, QColor
import logging

from ..core.interaction import InteractionController, ViewTransform
from .. import config

logger = logging.getLogger(__name__)


class ControlPoint(QGraphicsEllipseItem):
    """Marker for one point of the construction. Only level 0 can be dragged."""

    def __init__(self, x, y, index, level=0, parent=None):
        r = config.CONTROL_POINT_RADIUS if level == 0 else config.DERIVED_POINT_RADIUS
        color = config.CONTROL_POINT_COLOR if level == 0 else config.DERIVED_POINT_COLOR
        super().__init__(-r, -r, 2*r, 2*r, parent)
        self.index = index
        self.level = level
        self.setPos(x, y)
        self.setBrush(QBrush(QColor(color)))
        self.setPen(QPen(QColor("white"), 2))
        if level == 0:
            self.setCursor(Qt.CursorShape.SizeAllCursor)
            self.setZValue(10)  # keep handles above derived markers
        else:
            self.setZValue(1)


def polyline(points):
    path = QPainterPath()
    if not points:
        return path
    path.moveTo(points[0].x, points[0].y)
    for p in points[1:]:
        path.lineTo(p.x, p.y)
    return path


class Canvas(QGraphicsView):
    geometryChanged = pyqtSignal(list) # Emits list of Point objects after a drag

    def __init__(self, state, parent=None):
        super().__init__(parent)
        self.state = state
        self.controller = InteractionController(state.model, self.current_transform,
                                                on_change=self.on_points_moved)

        self.scene = QGraphicsScene(self)
        self.setScene(self.scene)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setBackgroundBrush(QBrush(QColor("white")))
        self.setMouseTracking(True)

        # Fixed logical surface, scaled uniformly to fit the widget
        self.scene.setSceneRect(QRectF(0, 0, config.CANVAS_WIDTH, config.CANVAS_HEIGHT))

        self.curve_item = QGraphicsPathItem()
        self.curve_item.setPen(QPen(QColor(config.CURVE_COLOR), 2))
        self.curve_item.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        self.scene.addItem(self.curve_item)

        self.level_paths = []
        self.markers = []

        self.refresh()

    # --- Coordinate mapping ---

    def current_transform(self):
        """Scale and offset of the scene inside the viewport, None until laid out."""
        viewport = self.viewport()
        if not self.isVisible() or viewport.width() <= 0 or viewport.height() <= 0:
            return None
        vt = self.viewportTransform()
        if vt.m11() == 0:
            return None
        return ViewTransform(vt.m11(), vt.dx(), vt.dy())

    def fit_scene(self):
        self.fitInView(self.scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.fit_scene()

    def showEvent(self, event):
        super().showEvent(event)
        self.fit_scene()

    def wheelEvent(self, event):
        # The view always shows the whole surface
        event.ignore()

    # --- Pointer events ---

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            return
        item = self.itemAt(event.position().toPoint())
        if isinstance(item, ControlPoint):
            self.controller.pointer_down(item.index, item.level)

    def mouseMoveEvent(self, event):
        if self.controller.is_dragging:
            pos = event.position()
            self.controller.pointer_move(pos.x(), pos.y())

    def mouseReleaseEvent(self, event):
        self.controller.pointer_up()

    def leaveEvent(self, event):
        self.controller.pointer_leave()
        super().leaveEvent(event)

    def on_points_moved(self):
        self.refresh()
        self.geometryChanged.emit(list(self.state.points))

    # --- Drawing ---

    def reset_interaction(self):
        self.controller.reset()

    def _rebuild_items(self, levels):
        for item in self.level_paths:
            self.scene.removeItem(item)
        for row in self.markers:
            for marker in row:
                self.scene.removeItem(marker)
        self.level_paths = []
        self.markers = []

        for level, level_points in enumerate(levels):
            path_item = QGraphicsPathItem()
            path_item.setPen(QPen(QColor(config.CONSTRUCTION_COLOR), 1))
            path_item.setBrush(QBrush(QColor(config.CONSTRUCTION_FILL)))
            path_item.setOpacity(config.CONSTRUCTION_OPACITY)
            path_item.setVisible(len(level_points) > 1)
            self.scene.addItem(path_item)
            self.level_paths.append(path_item)

            row = []
            for index, p in enumerate(level_points):
                marker = ControlPoint(p.x, p.y, index, level)
                self.scene.addItem(marker)
                row.append(marker)
            self.markers.append(row)

    def refresh(self):
        """Redraws curve, construction lines and markers from the current state."""
        self.curve_item.setPath(polyline(self.state.curve()))

        levels = self.state.construction()
        shape = [len(level) for level in levels]
        if shape != [len(row) for row in self.markers]:
            logger.debug("Rebuilding construction items for %d levels", len(levels))
            self._rebuild_items(levels)

        for level_points, path_item, row in zip(levels, self.level_paths, self.markers):
            if len(level_points) > 1:
                path_item.setPath(polyline(level_points))
            for p, marker in zip(level_points, row):
                marker.setPos(p.x, p.y)
