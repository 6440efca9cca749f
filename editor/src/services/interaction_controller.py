"""Interaction state machine for creating and editing the ellipse.

Pointer events are delivered one at a time and fully processed before the
next. Each event is handled by transition(), a pure function from the
current InteractionState and the event to the next state plus a redraw
request. InteractionController owns the single live state and is what the
canvas widget and the headless replay talk to.

Phases:
    IDLE      no shape yet
    CREATING  center fixed, radii follow the pointer
    HIDDEN    shape exists, box and handles not shown
    VISIBLE   shape exists, box and handles shown

While VISIBLE, the edit mode (RESIZE_SHEAR or ROTATE) decides what a
handle drag does. A drag in progress is tracked by a DragContext and is
orthogonal to the phase: hiding the box does not end it.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional

from constants import DEFAULT_RADIUS, MIN_RADIUS, ROTATION_SPEED, SHEAR_SPEED
from models.ellipse import EllipseShape
from models.drag_context import DragContext
from models.transform import Anchor, BoundingBox, EditMode, Handle, Vec2
from services.anchor_resize import resize_from_corner
from services.bbox_sampler import handles_of, opposite_corner, shape_bounding_box
from services.hit_tester import find_handle_hit, point_in_box, point_in_shape
from utils.logger import ThrottledLogger

logger = logging.getLogger(__name__)


class InteractionPhase(str, Enum):
    IDLE = 'idle'
    CREATING = 'creating'
    HIDDEN = 'hidden'
    VISIBLE = 'visible'


# ── Pointer events ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class PointerDown:
    """Primary button pressed."""
    x: float
    y: float


@dataclass(frozen=True)
class PointerMove:
    x: float
    y: float


@dataclass(frozen=True)
class PointerUp:
    """Primary button released."""
    x: float
    y: float


@dataclass(frozen=True)
class SecondaryAction:
    """Context / alternate click. Hides the box and handles."""
    x: float = 0.0
    y: float = 0.0


# ── State ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class InteractionState:
    phase: InteractionPhase = InteractionPhase.IDLE
    edit_mode: EditMode = EditMode.RESIZE_SHEAR
    shape: EllipseShape = field(default_factory=EllipseShape)
    drag: Optional[DragContext] = None
    last_pos: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))

    @property
    def has_shape(self):
        return self.phase in (InteractionPhase.HIDDEN, InteractionPhase.VISIBLE)

    @property
    def is_dragging(self):
        return self.drag is not None


@dataclass(frozen=True)
class TransitionResult:
    state: InteractionState
    redraw: bool = False


def transition(state: InteractionState, event) -> TransitionResult:
    """Apply one pointer event to a state.

    The input state is never mutated; the returned state is a fresh value.

    Raises:
        TypeError: If event is not one of the pointer event types
    """
    if isinstance(event, PointerDown):
        result = _on_pointer_down(state, event.x, event.y)
    elif isinstance(event, PointerMove):
        result = _on_pointer_move(state, event.x, event.y)
    elif isinstance(event, PointerUp):
        result = _on_pointer_up(state)
    elif isinstance(event, SecondaryAction):
        return _on_secondary_action(state)
    else:
        raise TypeError(f"Unsupported pointer event: {event!r}")

    # Every primary pointer event records the pointer position
    pos = Vec2(float(event.x), float(event.y))
    return TransitionResult(replace(result.state, last_pos=pos), result.redraw)


def _on_pointer_down(state, mx, my):
    phase = state.phase

    # A press while a drag is live (its release was lost) changes nothing
    if state.drag is not None:
        return TransitionResult(state)

    if phase is InteractionPhase.IDLE:
        shape = state.shape.copy(center_x=mx, center_y=my, radius_x=0.0, radius_y=0.0)
        return TransitionResult(replace(state, phase=InteractionPhase.CREATING, shape=shape), True)

    if phase is InteractionPhase.CREATING:
        shape = state.shape
        if shape.radius_x == 0 and shape.radius_y == 0:
            shape = shape.copy(radius_x=DEFAULT_RADIUS, radius_y=DEFAULT_RADIUS)
        shape = shape.clamp_radii(MIN_RADIUS)
        logger.debug("Shape finalized: center=(%.2f, %.2f) radii=(%.2f, %.2f)",
                     shape.center_x, shape.center_y, shape.radius_x, shape.radius_y)
        return TransitionResult(replace(state, phase=InteractionPhase.VISIBLE,
                                        edit_mode=EditMode.RESIZE_SHEAR, shape=shape), True)

    if phase is InteractionPhase.HIDDEN:
        if point_in_shape(mx, my, state.shape):
            return TransitionResult(replace(state, phase=InteractionPhase.VISIBLE,
                                            edit_mode=EditMode.RESIZE_SHEAR), True)
        return TransitionResult(state)

    box = shape_bounding_box(state.shape)
    handle = find_handle_hit(handles_of(box), mx, my)
    if handle is not None:
        anchor = _anchor_for(state, box, handle)
        logger.debug("Drag start: handle=%s mode=%s anchor=(%.2f, %.2f)",
                     handle.role.value, state.edit_mode.value, anchor.point.x, anchor.point.y)
        shape = state.shape.copy(active_handle=handle)
        return TransitionResult(replace(state, shape=shape, drag=DragContext(handle, anchor)), True)

    if point_in_box(mx, my, box):
        edit_mode = state.edit_mode.toggled()
        logger.debug("Edit mode toggled to %s", edit_mode.value)
        return TransitionResult(replace(state, edit_mode=edit_mode), True)

    return TransitionResult(state)


def _anchor_for(state, box, handle):
    """Screen point held fixed while dragging handle."""
    shape = state.shape
    if state.edit_mode is EditMode.ROTATE or handle.role.is_middle:
        return Anchor(Vec2(shape.center_x, shape.center_y))
    point, role = opposite_corner(box, handle.role)
    return Anchor(point, role)


def _on_pointer_move(state, mx, my):
    if state.phase is InteractionPhase.CREATING:
        shape = state.shape.copy(radius_x=abs(mx - state.shape.center_x),
                                 radius_y=abs(my - state.shape.center_y))
        return TransitionResult(replace(state, shape=shape), True)

    if state.drag is None or not state.has_shape:
        return TransitionResult(state)

    dx = mx - state.last_pos.x
    dy = my - state.last_pos.y
    shape = _drag_step(state.shape, state.edit_mode, state.drag, dx, dy)
    return TransitionResult(replace(state, shape=shape), True)


def _drag_step(shape, edit_mode, drag, dx, dy):
    """Shape after one move step of a handle drag."""
    if edit_mode is EditMode.ROTATE:
        # Vertical motion has no effect on rotation
        return shape.copy(rotation=shape.rotation + dx * ROTATION_SPEED)

    operation = drag.operation
    if operation == 'shear_x':
        return shape.copy(shear_x=shape.shear_x + dx * SHEAR_SPEED)
    if operation == 'shear_y':
        return shape.copy(shear_y=shape.shear_y + dy * SHEAR_SPEED)
    return resize_from_corner(shape, drag.handle.role, dx, dy, drag.anchor)


def _on_pointer_up(state):
    if state.drag is None:
        return TransitionResult(state)
    shape = state.shape.copy(active_handle=None)
    logger.debug("Drag end: box=%s", shape_bounding_box(shape))
    return TransitionResult(replace(state, shape=shape, drag=None), True)


def _on_secondary_action(state):
    if not state.has_shape:
        return TransitionResult(state)
    return TransitionResult(replace(state, phase=InteractionPhase.HIDDEN), True)


# ── Controller ───────────────────────────────────────────────────────────

class InteractionController:
    """Owns the interaction state and exposes read access for rendering."""

    def __init__(self, state: InteractionState = None):
        self._state = state if state is not None else InteractionState()
        self._move_log = ThrottledLogger(logger)

    @property
    def state(self) -> InteractionState:
        return self._state

    def dispatch(self, event) -> bool:
        """Process one pointer event.

        Returns:
            bool: True if the view should be redrawn
        """
        was_dragging = self._state.is_dragging
        result = transition(self._state, event)
        self._state = result.state

        if self._state.is_dragging:
            if not was_dragging:
                self._move_log.reset()
            elif isinstance(event, PointerMove):
                shape = self._state.shape
                self._move_log.log(
                    "Drag step: center=(%.2f, %.2f) radii=(%.2f, %.2f) rotation=%.4f shear=(%.4f, %.4f)",
                    shape.center_x, shape.center_y, shape.radius_x, shape.radius_y,
                    shape.rotation, shape.shear_x, shape.shear_y)
        return result.redraw

    def pointer_down(self, x, y):
        return self.dispatch(PointerDown(x, y))

    def pointer_move(self, x, y):
        return self.dispatch(PointerMove(x, y))

    def pointer_up(self, x, y):
        return self.dispatch(PointerUp(x, y))

    def secondary_action(self, x=0.0, y=0.0):
        return self.dispatch(SecondaryAction(x, y))

    def reset(self):
        """Discard the shape and return to IDLE."""
        self._state = InteractionState()

    # Read access for the renderer

    @property
    def shape(self) -> EllipseShape:
        return self._state.shape

    @property
    def phase(self) -> InteractionPhase:
        return self._state.phase

    @property
    def edit_mode(self) -> EditMode:
        return self._state.edit_mode

    @property
    def is_creating(self):
        return self._state.phase is InteractionPhase.CREATING

    @property
    def has_shape(self):
        return self._state.has_shape

    @property
    def box_visible(self):
        return self._state.phase is InteractionPhase.VISIBLE

    @property
    def is_dragging(self):
        return self._state.is_dragging

    @property
    def active_handle(self) -> Optional[Handle]:
        return self._state.shape.active_handle

    @property
    def active_anchor(self) -> Optional[Anchor]:
        drag = self._state.drag
        return drag.anchor if drag else None

    def bounding_box(self) -> BoundingBox:
        return shape_bounding_box(self._state.shape)

    def handles(self) -> List[Handle]:
        return handles_of(self.bounding_box())

    def snapshot(self) -> dict:
        """JSON-friendly summary of the current state."""
        data = {
            'phase': self.phase.value,
            'edit_mode': self.edit_mode.value,
            'dragging': self.is_dragging,
            'shape': self.shape.to_dict(),
        }
        if self.has_shape or self.is_creating:
            box = self.bounding_box()
            data['bounding_box'] = box.to_dict()
            data['handles'] = [h.to_dict() for h in handles_of(box)]
        return data
