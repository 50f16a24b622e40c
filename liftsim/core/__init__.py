"""Core lift entities"""

from .building import Building, FloorDefinition, InvalidFloor
from .direction import Direction
from .door import Door
from .elevator import Elevator, CabinState
from .entity import Entity
from .hall_button import HallButton, create_hall_buttons
from .request_queue import RequestQueue
from .travel_planner import TravelPlanner, TravelPlan

__all__ = [
    'Building',
    'FloorDefinition',
    'InvalidFloor',
    'Direction',
    'Door',
    'Elevator',
    'CabinState',
    'Entity',
    'HallButton',
    'create_hall_buttons',
    'RequestQueue',
    'TravelPlanner',
    'TravelPlan',
]
