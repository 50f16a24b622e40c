from liftsim.core.direction import Direction
from liftsim.core.elevator import Elevator
from liftsim.infrastructure.message_broker import MessageBroker


class CallRouter:
    """
    Turns hall calls into queue insertions for the single cabin.

    A hall call jumps ahead of every queued cabin selection, so a caller
    waiting on another floor is served next. A steady stream of hall calls
    can keep pushing inside selections back.

    The caller's direction only drives the hall lamp and the audible
    prompt; it never changes the routing order.
    """
    def __init__(self, name: str, elevator: Elevator, hall_buttons: dict = None):
        self.name = name
        self.elevator = elevator
        self.hall_buttons = hall_buttons or {}
        self.last_call = None  # (floor, direction) of the most recent call, for display
        self.calls_received = 0
        self.calls_ignored = 0
        self.call_topic = MessageBroker.elevator_topic(elevator.name, "hall_call")

    def _now(self) -> float:
        return self.elevator.broker.get_current_time()

    def _publish_call(self, caller_floor: str, direction: Direction):
        """Announce every call on the cabin's hall_call topic, routed or not."""
        self.elevator.broker.put(self.call_topic, {
            "timestamp": self._now(),
            "floor": caller_floor,
            "direction": direction.value,
        })

    def route_call(self, caller_floor: str, direction) -> bool:
        """
        Route a hall call from caller_floor.

        The call is always published for the landing prompt. It is not
        routed when the cabin is already standing at caller_floor with its
        door open. Otherwise the floor is pushed to the head of the queue and
        the scheduler is started if it is idle.

        Returns:
            bool: True if the call was routed to the cabin

        Raises:
            InvalidFloor: If caller_floor is not in the building
            ValueError: If direction is not UP or DOWN
        """
        direction = Direction.parse(direction)
        self.elevator.building.index(caller_floor)
        self.calls_received += 1
        self.last_call = (caller_floor, direction)
        self._publish_call(caller_floor, direction)

        if self.elevator.cabin.is_parked_at(caller_floor):
            self.calls_ignored += 1
            print(f"{self._now():.2f} [{self.name}] Call at {caller_floor} ({direction.value}) ignored: cabin is here with door open.")
            return False

        button = self.hall_buttons.get(caller_floor, {}).get(direction)
        if button is not None:
            button.press()

        queued = self.elevator.add_priority_request(caller_floor)
        print(f"{self._now():.2f} [{self.name}] Call at {caller_floor} ({direction.value}) routed to {self.elevator.name}"
              f"{'' if queued else ' (already queued)'}.")
        return True
