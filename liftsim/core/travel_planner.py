from dataclasses import dataclass
from typing import Tuple

from .building import Building
from .direction import Direction


@dataclass(frozen=True)
class TravelPlan:
    """
    Route for one trip.

    Attributes:
        origin: Floor the cabin departs from
        destination: Floor the cabin stops at
        direction: Direction of travel, derived from the endpoints
        floors: Floors reached in order; the last one is the destination
    """
    origin: str
    destination: str
    direction: Direction
    floors: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.floors)


class TravelPlanner:
    """Computes direction and the floor-by-floor route between two floors."""

    def __init__(self, building: Building):
        self.building = building

    def plan(self, from_floor: str, to_floor: str) -> TravelPlan:
        """
        Plan a trip from from_floor to to_floor.

        Direction is UP only when the destination sits above the origin.
        Adjacent floors give a single-element route.

        Raises:
            InvalidFloor: If either floor is unknown
            ValueError: If both floors are the same
        """
        if self.building.compare(from_floor, to_floor) == 0:
            raise ValueError(f"No travel needed: already at {to_floor}")

        if self.building.index(to_floor) > self.building.index(from_floor):
            direction = Direction.UP
        else:
            direction = Direction.DOWN

        floors = self.building.floors_between(from_floor, to_floor, direction)
        return TravelPlan(from_floor, to_floor, direction, tuple(floors))
