"""
Lift Simulator - single-cabin simulation engine

This package provides the floor registry, request queue, door controller,
travel planner and trip scheduler of a single simulated lift, together
with the message broker that carries their events.
"""

__version__ = "0.1.0"

from .core.building import Building, FloorDefinition, InvalidFloor
from .core.direction import Direction
from .core.door import Door
from .core.elevator import Elevator, CabinState
from .core.hall_button import HallButton
from .core.request_queue import RequestQueue
from .core.travel_planner import TravelPlanner, TravelPlan

from .infrastructure.message_broker import MessageBroker

__all__ = [
    'Building',
    'FloorDefinition',
    'InvalidFloor',
    'Direction',
    'Door',
    'Elevator',
    'CabinState',
    'HallButton',
    'RequestQueue',
    'TravelPlanner',
    'TravelPlan',
    'MessageBroker',
]
