"""Cue events published on the elevator's cue topic, one per phase boundary."""

DOOR_CLOSED = "door_closed"
DOOR_OPENED = "door_opened"
DIRECTION_CHANGED = "direction_changed"
FLOOR_PASSED = "floor_passed"
FLOOR_ARRIVED = "floor_arrived"

ALL_CUES = (DOOR_CLOSED, DIRECTION_CHANGED, FLOOR_PASSED, FLOOR_ARRIVED, DOOR_OPENED)


def make_cue(timestamp: float, elevator_name: str, event: str, floor: str, direction=None) -> dict:
    """Build a cue message. direction is only carried by direction_changed."""
    message = {
        "timestamp": timestamp,
        "elevator_name": elevator_name,
        "event": event,
        "floor": floor,
    }
    if direction is not None:
        message["direction"] = direction.value
    return message
