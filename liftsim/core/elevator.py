import simpy
from dataclasses import dataclass, replace
from typing import Optional

from .entity import Entity
from .building import Building
from .direction import Direction
from .door import Door
from .request_queue import RequestQueue
from .travel_planner import TravelPlanner
from . import cues
from ..infrastructure.message_broker import MessageBroker


@dataclass
class CabinState:
    """
    Authoritative snapshot of the cabin.

    current_floor, moving, direction and target are written only by the
    trip scheduler (Elevator); door_open only by the Door.
    """
    current_floor: str
    door_open: bool = True
    moving: bool = False
    direction: Optional[Direction] = None
    target: Optional[str] = None

    def is_parked_at(self, floor: str) -> bool:
        """True when standing at floor, not moving, with the door open."""
        return self.current_floor == floor and not self.moving and self.door_open

    def to_dict(self) -> dict:
        return {
            "current_floor": self.current_floor,
            "door_open": self.door_open,
            "moving": self.moving,
            "direction": self.direction.value if self.direction else None,
            "target": self.target,
        }


class Elevator(Entity):
    """
    Single cabin driven by a sequential trip scheduler.

    Requests land in a RequestQueue. The scheduler is edge-triggered: an
    enqueue kicks it, and it then drains the queue one trip at a time
    (close door, announce direction, travel floor by floor, arrive, open
    door, dwell) before going back to sleep. The trip_in_progress flag
    guarantees at most one drive is active.
    """

    def __init__(self, env: simpy.Environment, name: str, broker: MessageBroker, building: Building, door: Door,
                 home_floor: str = None, hall_buttons=None,
                 door_close_time: float = 1.5, direction_announce_time: float = 1.0,
                 floor_travel_time: float = 1.2, arrival_pause: float = 0.5, door_dwell_time: float = 2.0):
        self.broker = broker
        self.building = building
        self.door = door
        self.hall_buttons = hall_buttons

        self.door_close_time = door_close_time
        self.direction_announce_time = direction_announce_time
        self.floor_travel_time = floor_travel_time
        self.arrival_pause = arrival_pause
        self.door_dwell_time = door_dwell_time

        self.home_floor = home_floor if home_floor is not None else building.all_floors[0]
        building.index(self.home_floor)

        self.cabin = CabinState(current_floor=self.home_floor)
        self.request_queue = RequestQueue(building, parked_at=self.cabin.is_parked_at)
        self.selected_floors = set()
        self.planner = TravelPlanner(building)
        self.trip_in_progress = False
        self.trips_completed = 0
        self._wakeup = env.event()

        self.cue_topic = MessageBroker.elevator_topic(name, "cue")
        self.status_topic = MessageBroker.elevator_topic(name, "status")
        self.selected_topic = MessageBroker.elevator_topic(name, "selected_floors")

        self.door.set_broker_and_elevator(broker, self)

        super().__init__(env, name)
        self.set_state("IDLE")

    # --- Notifications ---

    def publish_cue(self, event: str, floor: str, direction: Direction = None):
        self.broker.put(self.cue_topic, cues.make_cue(self.env.now, self.name, event, floor, direction))

    def report_status(self):
        status_message = {"timestamp": self.env.now, "elevator_name": self.name, "state": self.state}
        status_message.update(self.cabin.to_dict())
        status_message["display_floor"] = self.building.get_display_name(self.cabin.current_floor)
        status_message["queue"] = self.request_queue.items()
        self.broker.put(self.status_topic, status_message)

    def _broadcast_selected_floors(self):
        self.broker.put(self.selected_topic, {
            "timestamp": self.env.now,
            "elevator_name": self.name,
            "selected_floors": sorted(self.selected_floors, key=self.building.index),
        })

    def _on_state_changed(self, old_state: str, new_state: str):
        super()._on_state_changed(old_state, new_state)
        self.report_status()

    def snapshot(self) -> CabinState:
        """Read-only copy of the cabin state for collaborators."""
        return replace(self.cabin)

    # --- Requests ---

    def select_floor(self, floor: str) -> bool:
        """
        Cabin button press. Appends the floor to the queue.

        A floor that is already lit (queued or being travelled to) and the
        floor the cabin is parked at with its door open are ignored.

        Returns:
            bool: True if a new request was registered

        Raises:
            InvalidFloor: If floor is not in the building
        """
        self.building.index(floor)
        if floor in self.selected_floors:
            print(f"{self.env.now:.2f} [{self.name}] Floor {floor} already selected.")
            return False

        # Already on its way there because of a hall call: only light the button
        en_route = self.state != "DWELLING" and floor == self.cabin.target
        already_served = en_route or floor in self.request_queue
        if not already_served and not self.request_queue.enqueue_append(floor):
            print(f"{self.env.now:.2f} [{self.name}] Floor {floor} request ignored: cabin is here with door open.")
            return False

        print(f"{self.env.now:.2f} [{self.name}] Car call registered: {floor}.")
        self.selected_floors.add(floor)
        self._broadcast_selected_floors()
        self.kick()
        return True

    def add_priority_request(self, floor: str) -> bool:
        """
        Push floor to the head of the queue (hall call).

        Returns:
            bool: True if the floor was queued

        Raises:
            InvalidFloor: If floor is not in the building
        """
        if not self.request_queue.enqueue_priority(floor):
            print(f"{self.env.now:.2f} [{self.name}] Priority request for {floor} ignored.")
            return False
        print(f"{self.env.now:.2f} [{self.name}] Priority request registered: {floor}.")
        self.kick()
        return True

    def kick(self):
        """Start draining the queue unless a drive is already in progress."""
        if self.trip_in_progress or self.request_queue.is_empty():
            return
        self.trip_in_progress = True
        self._wakeup.succeed()

    # --- Trip scheduler ---

    def run(self):
        print(f"{self.env.now:.2f} [{self.name}] Operational at floor {self.cabin.current_floor}.")
        while True:
            yield self._wakeup
            self._wakeup = self.env.event()
            yield from self._process_queue()
            self.trip_in_progress = False
            self.cabin.target = None
            self.set_state("IDLE")
            print(f"{self.env.now:.2f} [{self.name}] IDLE. Waiting for new requests...")

    def _process_queue(self):
        while True:
            target = self.request_queue.dequeue_next()
            if target is None:
                return
            self.cabin.target = target
            self.set_state("SERVING")
            print(f"{self.env.now:.2f} [{self.name}] Next target: {target} (queue: {self.request_queue.items()})")

            if target == self.cabin.current_floor:
                yield from self._serve_current_floor()
            else:
                yield from self._travel_to(target)
            self.trips_completed += 1

    def _serve_current_floor(self):
        """Target equals current floor: no travel, only cycle the door if it is closed."""
        if self.door.request_open():
            self._finish_stop(self.cabin.current_floor)
            yield self.env.timeout(self.door_dwell_time)
        else:
            self._finish_stop(self.cabin.current_floor)

    def _close_door(self):
        if self.door.request_close():
            yield self.env.timeout(self.door_close_time)

    def _travel_to(self, target: str):
        # Door close; the door may be reopened by hand during the close hold
        while self.cabin.door_open:
            yield from self._close_door()

        # Direction announcement
        plan = self.planner.plan(self.cabin.current_floor, target)
        self.cabin.direction = plan.direction
        self.publish_cue(cues.DIRECTION_CHANGED, self.cabin.current_floor, plan.direction)
        self.report_status()
        yield self.env.timeout(self.direction_announce_time)

        # Same while announcing
        while self.cabin.door_open:
            yield from self._close_door()

        # Travel
        self.cabin.moving = True
        self.set_state("MOVING")
        print(f"{self.env.now:.2f} [{self.name}] Moving {plan.direction.value} from {plan.origin} to {target} ({len(plan)} floors).")
        for floor in plan.floors:
            yield self.env.timeout(self.floor_travel_time)
            self.cabin.current_floor = floor
            self.publish_cue(cues.FLOOR_PASSED, floor)
            self.report_status()

        # Arrival
        self.cabin.moving = False
        self.cabin.direction = None
        self.set_state("ARRIVED")
        print(f"{self.env.now:.2f} [{self.name}] Arrived at floor {target}.")
        self.publish_cue(cues.FLOOR_ARRIVED, target)
        yield self.env.timeout(self.arrival_pause)

        # Door open and dwell
        self.door.request_open()
        self._finish_stop(target)
        yield self.env.timeout(self.door_dwell_time)

    def _finish_stop(self, floor: str):
        self.set_state("DWELLING")
        if floor in self.selected_floors:
            self.selected_floors.discard(floor)
            self._broadcast_selected_floors()
        if self.hall_buttons and floor in self.hall_buttons:
            for button in self.hall_buttons[floor].values():
                button.serve(self.name)
