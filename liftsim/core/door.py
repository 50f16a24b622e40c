import simpy

from . import cues
from ..infrastructure.message_broker import MessageBroker


class Door:
    """
    Cabin door: a two-state controller (OPEN/CLOSED) with a motion interlock.

    The door is the only writer of cabin.door_open. Any transition requested
    while the cabin is moving is ignored, since the doors are mechanically
    locked in transit. The door owns no timing; the elevator waits out the
    mechanical open/close time itself.
    """
    OPEN = "OPEN"
    CLOSED = "CLOSED"

    def __init__(self, env: simpy.Environment, name: str, broker: MessageBroker = None, elevator=None):
        self.env = env
        self.name = name
        self.broker = broker
        self.elevator = elevator
        self.rejected_requests = 0

    def set_broker_and_elevator(self, broker: MessageBroker, elevator):
        """Attach the broker and parent elevator after construction."""
        self.broker = broker
        self.elevator = elevator

    @property
    def state(self) -> str:
        return self.OPEN if self.is_open else self.CLOSED

    @property
    def is_open(self) -> bool:
        return self.elevator.cabin.door_open

    def request_open(self) -> bool:
        """
        Open the door and emit door_opened.

        Returns:
            bool: True if the door changed state, False if ignored
        """
        return self._transition(True)

    def request_close(self) -> bool:
        """
        Close the door and emit door_closed.

        Returns:
            bool: True if the door changed state, False if ignored
        """
        return self._transition(False)

    def _transition(self, open_door: bool) -> bool:
        cabin = self.elevator.cabin
        action = "open" if open_door else "close"

        if cabin.moving:
            self.rejected_requests += 1
            print(f"{self.env.now:.2f} [{self.name}] Request to {action} ignored: cabin is moving.")
            return False
        if cabin.door_open == open_door:
            return False

        cabin.door_open = open_door
        print(f"{self.env.now:.2f} [{self.name}] Door {'opened' if open_door else 'closed'} at {cabin.current_floor}.")

        event = cues.DOOR_OPENED if open_door else cues.DOOR_CLOSED
        self.elevator.publish_cue(event, cabin.current_floor)
        self.elevator.report_status()
        return True
