"""
Lift system wiring

Builds every component of one simulated lift on a SimPy environment and
exposes the operations that the outside world (cabin panel, landing
buttons) can perform.
"""

import simpy
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from config.simulation import SimulationConfig, ScheduledRequest
from controller.call_router import CallRouter
from analyzer.trip_recorder import TripRecorder

from .core.building import Building
from .core.direction import Direction
from .core.door import Door
from .core.elevator import Elevator, CabinState
from .core.hall_button import create_hall_buttons
from .infrastructure.message_broker import MessageBroker
from .peripherals.announcer import Announcer
from .peripherals.display import CabinDisplay


@dataclass
class LiftSystem:
    """All components of one simulated lift."""
    env: simpy.Environment
    broker: MessageBroker
    building: Building
    hall_buttons: dict
    door: Door
    elevator: Elevator
    router: CallRouter
    announcer: Announcer
    display: CabinDisplay
    recorder: TripRecorder

    def select_floor(self, floor: str) -> bool:
        """Cabin button press."""
        return self.elevator.select_floor(floor)

    def call_from_outside(self, floor: str, direction) -> bool:
        """Hall call from a caller standing on floor."""
        return self.router.route_call(floor, direction)

    def request_door_open(self) -> bool:
        """Door-open button in the cabin; ignored while moving."""
        return self.door.request_open()

    def request_door_close(self) -> bool:
        """Door-close button in the cabin; ignored while moving."""
        return self.door.request_close()

    def snapshot(self) -> CabinState:
        return self.elevator.snapshot()

    def apply(self, request: ScheduledRequest):
        """Perform one scripted request now."""
        if request.action == "select":
            self.select_floor(request.floor)
        elif request.action == "call":
            self.call_from_outside(request.floor, Direction.parse(request.direction))
        elif request.action == "door_open":
            self.request_door_open()
        elif request.action == "door_close":
            self.request_door_close()
        else:
            raise ValueError(f"Unknown request action: {request.action}")

    def replay(self, requests: Iterable[ScheduledRequest]):
        """Process that performs scripted requests at their scheduled times."""
        for request in sorted(requests, key=lambda r: r.time):
            if request.time > self.env.now:
                yield self.env.timeout(request.time - self.env.now)
            self.apply(request)


def build_building(sim_config: SimulationConfig) -> Building:
    return Building.from_floor_ids(sim_config.building.floors, sim_config.building.display_names)


def build_lift_system(env: simpy.Environment, sim_config: Optional[SimulationConfig] = None,
                      player: Callable[[str], None] = None) -> LiftSystem:
    """
    Create and connect broker, building, hall buttons, door, elevator,
    call router, announcer, display and recorder. Listener processes are
    started; nothing moves until a request arrives.

    Args:
        env: SimPy environment to run on
        sim_config: Layout and timings; defaults apply when omitted
        player: Optional audio player handed to the announcer
    """
    sim_config = sim_config or SimulationConfig()
    timing = sim_config.timing
    name = sim_config.elevator_name

    broker = MessageBroker(env, verbose=sim_config.verbose)
    building = build_building(sim_config)

    recorder = TripRecorder(env, broker.get_broadcast_pipe(), building)
    env.process(recorder.start_listening())

    hall_buttons = create_hall_buttons(env, building.all_floors, broker)
    door = Door(env, f"{name}_Door")
    elevator = Elevator(
        env, name, broker, building, door,
        home_floor=sim_config.building.home_floor,
        hall_buttons=hall_buttons,
        door_close_time=timing.door_close_time,
        direction_announce_time=timing.direction_announce_time,
        floor_travel_time=timing.floor_travel_time,
        arrival_pause=timing.arrival_pause,
        door_dwell_time=timing.door_dwell_time
    )
    router = CallRouter("CallRouter", elevator, hall_buttons)

    announcer = Announcer(env, broker, name, player=player)
    announcer.start_listening()

    display = CabinDisplay(env, broker, name)
    display.start_listening(building.all_floors)

    return LiftSystem(env, broker, building, hall_buttons, door, elevator, router, announcer, display, recorder)
