"""
Tests for the interaction state machine.

Covers:
- Two-click creation, default radius and finalization clamp
- Edit mode toggling and clicks outside the box
- Shear, rotate and anchored resize drags
- Hide/show through the secondary action
- Presses during a live drag
- Purity of transition(), drag-step logging and the snapshot export
"""
import logging
import pytest

from constants import MIN_RADIUS
from models.transform import EditMode, HandleRole, CORNER_ROLES
from services.bbox_sampler import shape_bounding_box
from services.interaction_controller import (
    InteractionController, InteractionPhase, InteractionState,
    PointerDown, PointerMove, PointerUp, SecondaryAction, transition
)


def _drag(controller, start, *moves):
    """Press at start, move through each point, release at the last one."""
    controller.pointer_down(*start)
    for point in moves:
        controller.pointer_move(*point)
    end = moves[-1] if moves else start
    controller.pointer_up(*end)


# ══════════════════════════════════════════════════════════════════════════
# Creation
# ══════════════════════════════════════════════════════════════════════════

class TestCreation:

    def test_starts_idle(self, controller):
        assert controller.phase is InteractionPhase.IDLE
        assert not controller.has_shape
        assert not controller.box_visible

    def test_first_click_sets_center(self, controller):
        assert controller.pointer_down(100, 100)
        assert controller.phase is InteractionPhase.CREATING
        assert controller.is_creating
        assert (controller.shape.center_x, controller.shape.center_y) == (100, 100)
        assert (controller.shape.radius_x, controller.shape.radius_y) == (0, 0)

    def test_move_sets_radii_from_pointer(self, controller):
        controller.pointer_down(100, 100)
        controller.pointer_move(60, 145)
        assert controller.shape.radius_x == 40
        assert controller.shape.radius_y == 45

    def test_scenario_creation(self, created_controller):
        shape = created_controller.shape
        assert created_controller.phase is InteractionPhase.VISIBLE
        assert created_controller.edit_mode is EditMode.RESIZE_SHEAR
        assert (shape.radius_x, shape.radius_y) == (50, 30)
        assert (shape.rotation, shape.shear_x, shape.shear_y) == (0, 0, 0)

        box = created_controller.bounding_box()
        assert box.x == pytest.approx(50.0)
        assert box.y == pytest.approx(70.0)
        assert box.width == pytest.approx(100.0)
        assert box.height == pytest.approx(60.0)

    def test_second_click_without_move_uses_default_radius(self, controller):
        controller.pointer_down(100, 100)
        controller.pointer_down(100, 100)
        assert controller.phase is InteractionPhase.VISIBLE
        assert (controller.shape.radius_x, controller.shape.radius_y) == (10, 10)

    def test_finalization_clamps_small_radius(self, controller):
        controller.pointer_down(100, 100)
        controller.pointer_move(102, 160)
        controller.pointer_down(102, 160)
        assert controller.shape.radius_x == MIN_RADIUS
        assert controller.shape.radius_y == 60

    def test_pointer_up_during_creation_keeps_creating(self, controller):
        controller.pointer_down(100, 100)
        assert not controller.pointer_up(100, 100)
        assert controller.is_creating

    def test_reset_returns_to_idle(self, created_controller):
        created_controller.reset()
        assert created_controller.phase is InteractionPhase.IDLE
        assert created_controller.shape.radius_x == 0


# ══════════════════════════════════════════════════════════════════════════
# Visible box clicks
# ══════════════════════════════════════════════════════════════════════════

class TestBoxClicks:

    def test_click_inside_box_toggles_mode(self, created_controller):
        assert created_controller.pointer_down(100, 100)
        assert created_controller.edit_mode is EditMode.ROTATE
        created_controller.pointer_up(100, 100)
        created_controller.pointer_down(100, 100)
        assert created_controller.edit_mode is EditMode.RESIZE_SHEAR

    def test_click_inside_box_outside_ellipse_toggles(self, created_controller):
        created_controller.pointer_down(60, 78)
        assert created_controller.edit_mode is EditMode.ROTATE

    def test_click_outside_box_changes_nothing(self, created_controller):
        before = created_controller.state
        assert not created_controller.pointer_down(300, 300)
        after = created_controller.state
        assert after.phase is before.phase
        assert after.edit_mode is before.edit_mode
        assert after.shape == before.shape

    def test_handle_press_starts_drag(self, created_controller):
        created_controller.pointer_down(150, 130)
        assert created_controller.is_dragging
        assert created_controller.active_handle.role is HandleRole.BOTTOM_RIGHT
        anchor = created_controller.active_anchor
        assert anchor.role is HandleRole.TOP_LEFT
        assert anchor.point.x == pytest.approx(50.0)
        assert anchor.point.y == pytest.approx(70.0)

    def test_handle_press_does_not_toggle_mode(self, created_controller):
        created_controller.pointer_down(150, 100)
        assert created_controller.edit_mode is EditMode.RESIZE_SHEAR


# ══════════════════════════════════════════════════════════════════════════
# Drags
# ══════════════════════════════════════════════════════════════════════════

class TestDrags:

    def test_top_middle_shears_x(self, created_controller):
        _drag(created_controller, (100, 70), (110, 70))
        shape = created_controller.shape
        assert shape.shear_x == pytest.approx(0.1)
        assert shape.shear_y == 0
        assert (shape.radius_x, shape.radius_y) == (50, 30)
        assert (shape.center_x, shape.center_y) == (100, 100)

    def test_bottom_middle_shears_x_and_ignores_dy(self, created_controller):
        _drag(created_controller, (100, 130), (90, 180))
        assert created_controller.shape.shear_x == pytest.approx(-0.1)
        assert created_controller.shape.shear_y == 0

    def test_left_middle_shears_y(self, created_controller):
        _drag(created_controller, (50, 100), (50, 120))
        assert created_controller.shape.shear_y == pytest.approx(0.2)
        assert created_controller.shape.shear_x == 0

    def test_shear_accumulates_per_move(self, created_controller):
        _drag(created_controller, (150, 100), (150, 110), (150, 125), (150, 115))
        assert created_controller.shape.shear_y == pytest.approx(0.15)

    def test_shear_drag_anchors_on_center(self, created_controller):
        created_controller.pointer_down(100, 70)
        anchor = created_controller.active_anchor
        assert anchor.role is None
        assert tuple(anchor.point) == (100, 100)

    def test_rotate_uses_only_dx(self, created_controller):
        created_controller.pointer_down(100, 100)
        created_controller.pointer_up(100, 100)
        assert created_controller.edit_mode is EditMode.ROTATE

        _drag(created_controller, (150, 130), (160, 200))
        shape = created_controller.shape
        assert shape.rotation == pytest.approx(0.1)
        assert (shape.radius_x, shape.radius_y) == (50, 30)
        assert (shape.shear_x, shape.shear_y) == (0, 0)

    def test_rotate_corner_anchors_on_center(self, created_controller):
        created_controller.pointer_down(100, 100)
        created_controller.pointer_up(100, 100)
        created_controller.pointer_down(50, 70)
        anchor = created_controller.active_anchor
        assert anchor.role is None
        assert tuple(anchor.point) == (100, 100)

    def test_corner_resize_scenario(self, created_controller):
        _drag(created_controller, (150, 130), (170, 130))
        shape = created_controller.shape
        assert shape.radius_x == pytest.approx(70.0)
        assert shape.radius_y == pytest.approx(30.0)
        assert shape.center_x == pytest.approx(120.0)
        assert shape.center_y == pytest.approx(100.0)
        box = created_controller.bounding_box()
        assert box.x == pytest.approx(50.0)
        assert box.y == pytest.approx(70.0)

    @pytest.mark.parametrize("role", CORNER_ROLES)
    def test_anchor_holds_for_every_corner_on_skewed_shape(self, skewed_controller, role):
        box = skewed_controller.bounding_box()
        start = box.corner(role)
        skewed_controller.pointer_down(start.x, start.y)
        anchor = skewed_controller.active_anchor
        assert anchor.role is role.opposite()

        x, y = start.x, start.y
        for dx, dy in [(15, 4), (-6, 22), (30, -12), (-50, -50)]:
            x, y = x + dx, y + dy
            skewed_controller.pointer_move(x, y)
            corner = skewed_controller.bounding_box().corner(anchor.role)
            assert corner.x == pytest.approx(anchor.point.x, abs=1e-9)
            assert corner.y == pytest.approx(anchor.point.y, abs=1e-9)

    def test_repeated_shrink_respects_radius_floor(self, created_controller):
        created_controller.pointer_down(150, 130)
        x, y = 150, 130
        for _ in range(8):
            x, y = x - 20, y - 20
            created_controller.pointer_move(x, y)
            assert created_controller.shape.radius_x >= MIN_RADIUS
            assert created_controller.shape.radius_y >= MIN_RADIUS
        assert created_controller.shape.radius_x == MIN_RADIUS
        assert created_controller.shape.radius_y == MIN_RADIUS

    def test_press_during_rotate_drag_keeps_mode(self, created_controller):
        created_controller.pointer_down(100, 100)
        assert created_controller.edit_mode is EditMode.ROTATE
        created_controller.pointer_down(50, 70)
        assert created_controller.is_dragging

        # Release was lost; a press inside the box must not toggle the mode
        assert not created_controller.pointer_down(110, 100)
        assert created_controller.edit_mode is EditMode.ROTATE
        assert created_controller.is_dragging

        created_controller.pointer_move(115, 100)
        assert created_controller.shape.rotation == pytest.approx(0.05)
        assert created_controller.shape.radius_x == 50

    def test_press_during_drag_while_hidden_keeps_mode(self, created_controller):
        created_controller.pointer_down(100, 100)
        created_controller.pointer_up(100, 100)
        created_controller.pointer_down(150, 130)
        created_controller.secondary_action()

        assert not created_controller.pointer_down(100, 100)
        assert created_controller.phase is InteractionPhase.HIDDEN
        assert created_controller.edit_mode is EditMode.ROTATE

        created_controller.pointer_move(120, 100)
        assert created_controller.shape.rotation == pytest.approx(0.2)

    def test_press_during_drag_keeps_handle(self, created_controller):
        created_controller.pointer_down(100, 70)
        created_controller.pointer_down(150, 130)
        assert created_controller.active_handle.role is HandleRole.TOP_MIDDLE

    def test_move_without_drag_changes_nothing(self, created_controller):
        before = created_controller.shape
        assert not created_controller.pointer_move(400, 400)
        assert created_controller.shape == before

    def test_pointer_up_ends_drag(self, created_controller):
        created_controller.pointer_down(150, 130)
        assert created_controller.pointer_up(150, 130)
        assert not created_controller.is_dragging
        assert created_controller.active_handle is None
        assert created_controller.active_anchor is None

    def test_pointer_up_without_drag(self, created_controller):
        assert not created_controller.pointer_up(10, 10)


# ══════════════════════════════════════════════════════════════════════════
# Secondary action
# ══════════════════════════════════════════════════════════════════════════

class TestSecondaryAction:

    def test_hides_box(self, created_controller):
        assert created_controller.secondary_action()
        assert created_controller.phase is InteractionPhase.HIDDEN
        assert created_controller.has_shape
        assert not created_controller.box_visible

    def test_click_outside_shape_stays_hidden(self, created_controller):
        created_controller.secondary_action()
        # Inside the box but outside the ellipse
        assert not created_controller.pointer_down(55, 75)
        assert created_controller.phase is InteractionPhase.HIDDEN

    def test_click_inside_shape_shows_in_resize_mode(self, created_controller):
        created_controller.pointer_down(100, 100)
        created_controller.pointer_up(100, 100)
        assert created_controller.edit_mode is EditMode.ROTATE

        created_controller.secondary_action()
        assert created_controller.pointer_down(100, 100)
        assert created_controller.phase is InteractionPhase.VISIBLE
        assert created_controller.edit_mode is EditMode.RESIZE_SHEAR

    def test_ignored_when_idle(self, controller):
        assert not controller.secondary_action()
        assert controller.phase is InteractionPhase.IDLE

    def test_ignored_while_creating(self, controller):
        controller.pointer_down(100, 100)
        assert not controller.secondary_action()
        assert controller.is_creating

    def test_drag_survives_hide(self, created_controller):
        created_controller.pointer_down(100, 70)
        created_controller.secondary_action()
        assert created_controller.is_dragging
        created_controller.pointer_move(120, 70)
        assert created_controller.shape.shear_x == pytest.approx(0.2)
        created_controller.pointer_up(120, 70)
        assert not created_controller.is_dragging
        assert created_controller.phase is InteractionPhase.HIDDEN

    def test_does_not_update_last_position(self, created_controller):
        before = created_controller.state.last_pos
        created_controller.secondary_action(400, 400)
        assert created_controller.state.last_pos == before


# ══════════════════════════════════════════════════════════════════════════
# transition() and snapshot
# ══════════════════════════════════════════════════════════════════════════

class TestTransition:

    def test_does_not_mutate_input_state(self):
        state = InteractionState()
        result = transition(state, PointerDown(10, 20))
        assert state.phase is InteractionPhase.IDLE
        assert result.state.phase is InteractionPhase.CREATING
        assert result.redraw

    def test_records_last_position(self):
        state = transition(InteractionState(), PointerDown(10, 20)).state
        state = transition(state, PointerMove(30, 45)).state
        assert tuple(state.last_pos) == (30, 45)
        state = transition(state, PointerUp(31, 46)).state
        assert tuple(state.last_pos) == (31, 46)

    def test_same_input_same_output(self, created_controller):
        state = created_controller.state
        first = transition(state, PointerDown(150, 130))
        second = transition(state, PointerDown(150, 130))
        assert first == second

    def test_unknown_event_rejected(self):
        with pytest.raises(TypeError):
            transition(InteractionState(), object())

    def test_does_not_log_drag_steps(self, created_controller, caplog):
        state = transition(created_controller.state, PointerDown(100, 70)).state
        with caplog.at_level(logging.DEBUG, logger='services.interaction_controller'):
            for i in range(25):
                state = transition(state, PointerMove(100 + i, 70)).state
        assert not [r for r in caplog.records if r.getMessage().startswith("Drag step")]

    def test_drag_context_comes_from_models(self):
        from models.drag_context import DragContext
        from services import interaction_controller
        assert interaction_controller.DragContext is DragContext

    def test_dispatch_accepts_event_objects(self, controller):
        assert controller.dispatch(PointerDown(5, 5))
        assert not controller.dispatch(SecondaryAction())


class TestDragLogging:

    def _drag_steps(self, caplog):
        return [r for r in caplog.records if r.getMessage().startswith("Drag step")]

    def test_drag_steps_are_throttled(self, created_controller, caplog):
        with caplog.at_level(logging.DEBUG, logger='services.interaction_controller'):
            created_controller.pointer_down(100, 70)
            for i in range(1, 21):
                created_controller.pointer_move(100 + i, 70)
        assert len(self._drag_steps(caplog)) == 2

    def test_throttle_count_is_per_controller(self, plain_shape, caplog):
        first = InteractionController(InteractionState(phase=InteractionPhase.VISIBLE, shape=plain_shape))
        second = InteractionController(InteractionState(phase=InteractionPhase.VISIBLE, shape=plain_shape))
        with caplog.at_level(logging.DEBUG, logger='services.interaction_controller'):
            first.pointer_down(100, 70)
            second.pointer_down(100, 70)
            for i in range(1, 6):
                first.pointer_move(100 + i, 70)
                second.pointer_move(100 + i, 70)
        assert self._drag_steps(caplog) == []

    def test_new_drag_restarts_count(self, created_controller, caplog):
        with caplog.at_level(logging.DEBUG, logger='services.interaction_controller'):
            created_controller.pointer_down(100, 70)
            for i in range(1, 10):
                created_controller.pointer_move(100 + i, 70)
            created_controller.pointer_up(109, 70)
            created_controller.pointer_down(150, 100)
            created_controller.pointer_move(150, 101)
        assert self._drag_steps(caplog) == []


class TestSnapshot:

    def test_idle_has_no_geometry(self, controller):
        data = controller.snapshot()
        assert data['phase'] == 'idle'
        assert data['edit_mode'] == 'resize-shear'
        assert not data['dragging']
        assert 'bounding_box' not in data

    def test_visible_includes_box_and_handles(self, created_controller):
        data = created_controller.snapshot()
        assert data['phase'] == 'visible'
        assert data['shape']['radius_x'] == 50
        assert data['bounding_box']['x'] == pytest.approx(50.0)
        assert [h['role'] for h in data['handles']][:4] == [
            'top-left', 'top-right', 'bottom-left', 'bottom-right'
        ]
        assert len(data['handles']) == 8

    def test_shape_restores_from_snapshot(self, created_controller):
        from models.ellipse import EllipseShape
        created_controller.pointer_down(150, 130)
        data = created_controller.snapshot()
        assert data['dragging']
        assert data['shape']['active_handle']['role'] == 'bottom-right'
        assert EllipseShape.from_dict(data['shape']) == created_controller.shape

    def test_box_matches_sampler(self, skewed_controller):
        box = shape_bounding_box(skewed_controller.shape)
        assert skewed_controller.snapshot()['bounding_box'] == box.to_dict()
