"""Test module for pointer handling in bezier_playground.core.interaction

The tests are run using pytest.
"""

import pytest

from bezier_playground.core.control_points import ControlPointModel, layout_points
from bezier_playground.core.geometry import Point
from bezier_playground.core.interaction import InteractionController, ViewTransform, find_handle

# Surface shown at twice its logical size, letterboxed by (10, 20)
LETTERBOXED = ViewTransform(scale=2.0, offset_x=10.0, offset_y=20.0)


def make_controller(transform=LETTERBOXED, order=3):
    model = ControlPointModel(order)
    changes = []
    controller = InteractionController(model, lambda: transform,
                                       on_change=lambda: changes.append(model.points))
    return controller, model, changes


###############################################################################
# Coordinate mapping
###############################################################################


class TestViewTransform:
    """Tests for the screen to logical mapping."""

    def test_identity(self):
        assert ViewTransform(1.0).to_logical(12.0, 34.0) == Point(12.0, 34.0)

    def test_scale_and_offset(self):
        assert LETTERBOXED.to_logical(610.0, 520.0) == Point(300.0, 250.0)

    def test_to_screen_inverts_to_logical(self):
        transform = ViewTransform(0.75, 40.0, 0.0)
        p = transform.to_logical(*transform.to_screen(Point(123.0, 45.0)).to_tuple())
        assert p.x == pytest.approx(123.0)
        assert p.y == pytest.approx(45.0)


class TestFindHandle:
    """Tests for hit testing control points."""

    def test_hit_within_radius(self):
        points = layout_points(3)
        assert find_handle(points, Point(points[2].x + 3.0, points[2].y - 3.0)) == 2

    def test_miss_outside_radius(self):
        points = layout_points(3)
        assert find_handle(points, Point(400.0, 390.0)) is None

    def test_nearest_wins(self):
        points = [Point(0.0, 0.0), Point(6.0, 0.0)]
        assert find_handle(points, Point(4.0, 0.0), radius=10.0) == 1


###############################################################################
# Drag state machine
###############################################################################


class TestInteractionController:
    """Tests for idle / dragging transitions and point updates."""

    def test_starts_idle(self):
        controller, _, _ = make_controller()
        assert not controller.is_dragging
        assert controller.dragging_index is None

    def test_move_while_idle_is_noop(self):
        controller, model, changes = make_controller()
        before = model.points
        assert not controller.pointer_move(610.0, 520.0)
        assert model.points is before
        assert changes == []

    def test_drag_scenario(self):
        controller, model, changes = make_controller()
        before = model.points

        assert controller.pointer_down(1)
        assert controller.dragging_index == 1
        assert controller.pointer_move(610.0, 520.0)

        assert model.points[1] == Point(300.0, 250.0)
        assert model.points[0] == Point(50.0, 200.0)
        assert model.points[2] is before[2]
        assert model.points[3] is before[3]
        assert len(changes) == 1

    def test_drag_is_clamped_to_canvas(self):
        controller, model, _ = make_controller()
        controller.pointer_down(0)
        controller.pointer_move(-500.0, 5000.0)
        assert model.points[0] == Point(0.0, 400.0)

    def test_pointer_up_ends_drag(self):
        controller, model, _ = make_controller()
        controller.pointer_down(2)
        controller.pointer_up()
        assert not controller.is_dragging
        before = model.points
        assert not controller.pointer_move(610.0, 520.0)
        assert model.points is before

    def test_pointer_leave_ends_drag(self):
        controller, _, _ = make_controller()
        controller.pointer_down(2)
        controller.pointer_leave()
        assert controller.dragging_index is None

    def test_derived_points_are_not_draggable(self):
        controller, _, _ = make_controller()
        assert not controller.pointer_down(0, level=1)
        assert not controller.is_dragging

    def test_unknown_index_is_not_draggable(self):
        controller, _, _ = make_controller()
        assert not controller.pointer_down(4)
        assert not controller.is_dragging

    def test_missing_transform_drops_move(self):
        controller, model, changes = make_controller(transform=None)
        before = model.points
        controller.pointer_down(1)
        assert not controller.pointer_move(610.0, 520.0)
        assert model.points is before
        assert changes == []
        # Still dragging, later moves can land once the surface is measured
        assert controller.is_dragging

    def test_pointer_down_at_hits_handle(self):
        controller, model, _ = make_controller()
        screen = LETTERBOXED.to_screen(model.points[3])
        assert controller.pointer_down_at(screen.x, screen.y)
        assert controller.dragging_index == 3

    def test_pointer_down_at_misses(self):
        controller, _, _ = make_controller()
        assert not controller.pointer_down_at(0.0, 0.0)
        assert not controller.is_dragging

    def test_pointer_down_at_without_transform(self):
        controller, _, _ = make_controller(transform=None)
        assert not controller.pointer_down_at(110.0, 420.0)

    def test_reset(self):
        controller, _, _ = make_controller()
        controller.pointer_down(1)
        controller.reset()
        assert not controller.is_dragging
