"""Headless event replay - CLI entry point.

Reads a JSON list of pointer events, replays them through the interaction
controller without a window, and writes the resulting state as JSON.

Event format:
    [{"type": "down", "x": 100, "y": 100},
     {"type": "move", "x": 150, "y": 130},
     {"type": "down", "x": 150, "y": 130},
     {"type": "secondary"}]

The file may instead be an object that also gives a starting shape, which
is then shown with its box visible before the events are replayed:
    {"shape": {"center_x": 100, "center_y": 100, "radius_x": 50, "radius_y": 30},
     "events": [...]}

Usage:
    python editor/src/headless.py <events.json> [-o OUTPUT_FILE] [-v]
"""

import sys
import os
import argparse
import json
import logging

# Add editor/src to path so imports work
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from models.ellipse import EllipseShape
from services.interaction_controller import (
    InteractionController, InteractionPhase, InteractionState,
    PointerDown, PointerMove, PointerUp, SecondaryAction
)
from utils.logger import configure_logging

logger = logging.getLogger(__name__)

EVENT_TYPES = {
    'down': PointerDown,
    'move': PointerMove,
    'up': PointerUp,
    'secondary': SecondaryAction,
}


def parse_events(data) -> list:
    """Convert decoded JSON into pointer event objects.

    Args:
        data: List of {"type": ..., "x": ..., "y": ...} dicts

    Returns:
        List of PointerDown/PointerMove/PointerUp/SecondaryAction

    Raises:
        ValueError: On a non-list document, unknown event type or missing coordinate
    """
    if not isinstance(data, list):
        raise ValueError("Event file must contain a JSON list of events")

    events = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Event #{index} is not an object")
        kind = item.get('type')
        event_class = EVENT_TYPES.get(kind)
        if event_class is None:
            raise ValueError(f"Event #{index} has unknown type {kind!r}")
        if event_class is SecondaryAction:
            events.append(SecondaryAction(float(item.get('x', 0.0)), float(item.get('y', 0.0))))
            continue
        try:
            events.append(event_class(float(item['x']), float(item['y'])))
        except KeyError as e:
            raise ValueError(f"Event #{index} is missing coordinate {e.args[0]!r}")
    return events


def load_document(data):
    """Split a decoded event file into a starting controller and its events.

    Args:
        data: Either a list of events, or {"shape": {...}, "events": [...]}

    Returns:
        (InteractionController, list of events)

    Raises:
        ValueError: On a malformed document, shape or event
    """
    if not isinstance(data, dict):
        return InteractionController(), parse_events(data)

    shape_data = data.get('shape')
    if not isinstance(shape_data, dict):
        raise ValueError("Event file object must contain a 'shape' object")
    try:
        shape = EllipseShape.from_dict(shape_data)
    except (TypeError, KeyError) as e:
        raise ValueError(f"Invalid shape: {e}")

    # A loaded shape is finalized and not being dragged
    shape = shape.copy(active_handle=None).clamp_radii()
    state = InteractionState(phase=InteractionPhase.VISIBLE, shape=shape)
    logger.debug("Starting from shape %s", shape.to_dict())
    return InteractionController(state), parse_events(data.get('events', []))


def replay(events, controller=None) -> InteractionController:
    """Feed events through a controller and return it."""
    controller = controller if controller else InteractionController()
    for event in events:
        controller.dispatch(event)
    logger.debug("Replayed %d events, final phase %s", len(events), controller.phase.value)
    return controller


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Replay pointer events through the ellipse editor (headless).',
    )
    parser.add_argument(
        'input_file',
        help='Path to a JSON file with pointer events (and optionally a starting shape).',
    )
    parser.add_argument(
        '-o', '--output',
        default=None,
        help='Write the resulting state to this file instead of stdout.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    input_path = os.path.abspath(args.input_file)
    if not os.path.isfile(input_path):
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            controller, events = load_document(json.load(f))
    except (json.JSONDecodeError, ValueError) as e:
        print(f"Error: Invalid event file {input_path}: {e}", file=sys.stderr)
        return 1

    replay(events, controller)
    output = json.dumps(controller.snapshot(), indent=2)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output + '\n')
    else:
        print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
