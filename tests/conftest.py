"""
Shared fixtures for Ellipse Transform Editor tests.

Provides reusable shapes, controllers in each interaction phase, and
pointer-event helpers.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widget tests run without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


# ── Shapes ───────────────────────────────────────────────────────────────

@pytest.fixture
def plain_shape():
    """Untransformed ellipse centered at (100, 100) with radii (50, 30)"""
    from models.ellipse import EllipseShape
    return EllipseShape(center_x=100.0, center_y=100.0, radius_x=50.0, radius_y=30.0)


@pytest.fixture
def skewed_shape():
    """Ellipse with shear and rotation applied"""
    from models.ellipse import EllipseShape
    return EllipseShape(center_x=220.0, center_y=180.0, radius_x=60.0, radius_y=35.0,
                        rotation=0.45, shear_x=0.25, shear_y=-0.15)


# ── Controllers ──────────────────────────────────────────────────────────

@pytest.fixture
def controller():
    """Fresh controller in the IDLE phase"""
    from services.interaction_controller import InteractionController
    return InteractionController()


@pytest.fixture
def created_controller(controller):
    """Controller after creating the (100,100) / (50,30) ellipse by pointer"""
    controller.pointer_down(100, 100)
    controller.pointer_move(150, 130)
    controller.pointer_down(150, 130)
    controller.pointer_up(150, 130)
    return controller


@pytest.fixture
def skewed_controller(skewed_shape):
    """Controller with a sheared, rotated shape and the box visible"""
    from services.interaction_controller import (
        InteractionController, InteractionState, InteractionPhase
    )
    state = InteractionState(phase=InteractionPhase.VISIBLE, shape=skewed_shape)
    return InteractionController(state)
