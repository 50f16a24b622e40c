"""
Building - Floor registry for the lift

This module provides the Building class which manages:
- The fixed, totally ordered list of floor identifiers
- Floor identifier to display name mapping
- Index distance and adjacency used for direction and travel planning
"""

from typing import List, Dict, Optional
from dataclasses import dataclass

from .direction import Direction


DEFAULT_FLOOR_IDS = ['B2', 'B1', 'F1', 'F2', 'F3', 'F4', 'F5', 'F6', 'F7', 'F8', 'F9', 'F10']


class InvalidFloor(ValueError):
    """Raised when a floor identifier is not part of the building."""

    def __init__(self, floor):
        super().__init__(f"Invalid floor: {floor!r}")
        self.floor = floor


def default_display_name(floor_id: str) -> str:
    """
    Derive the indicator text for a floor identifier.

    Basement floors show as negative numbers ("B2" -> "-2"), above-ground
    floors drop their prefix ("F5" -> "5"). Anything else is shown as-is.
    """
    if floor_id.startswith('B') and floor_id[1:].isdigit():
        return f"-{floor_id[1:]}"
    if floor_id.startswith('F') and floor_id[1:].isdigit():
        return floor_id[1:]
    return floor_id


@dataclass(frozen=True)
class FloorDefinition:
    """
    Defines a single floor in the building.

    Attributes:
        floor_id: Identifier used everywhere in the lift (e.g., "B1", "F3")
        display_name: Text shown on the floor indicator (e.g., "-1", "3")
    """
    floor_id: str
    display_name: Optional[str] = None

    def __post_init__(self):
        if not self.floor_id:
            raise ValueError("floor_id must be a non-empty string")
        if self.display_name is None:
            object.__setattr__(self, 'display_name', default_display_name(self.floor_id))


class Building:
    """
    Represents the building the cabin serves.

    Floors are kept in the order given, lowest first. The registry is fixed
    after construction; asking about an identifier that is not in it is a
    programming error and raises InvalidFloor.
    """

    def __init__(self, floors: List[FloorDefinition]):
        """
        Args:
            floors: FloorDefinition objects, ordered from lowest to highest
        """
        if len(floors) < 2:
            raise ValueError("Building must have at least two floors")

        self.floors = list(floors)
        self._index: Dict[str, int] = {}
        for position, floor in enumerate(self.floors):
            if floor.floor_id in self._index:
                raise ValueError(f"Duplicate floor id: {floor.floor_id}")
            self._index[floor.floor_id] = position

        self._display: Dict[str, str] = {f.floor_id: f.display_name for f in self.floors}

        self.num_floors = len(self.floors)
        self.all_floors = [f.floor_id for f in self.floors]
        self.min_floor = self.all_floors[0]
        self.max_floor = self.all_floors[-1]

    @classmethod
    def from_floor_ids(cls, floor_ids: List[str], display_names: Optional[Dict[str, str]] = None) -> 'Building':
        """Build a registry from bare identifiers, with optional display overrides."""
        display_names = display_names or {}
        return cls([FloorDefinition(floor_id, display_names.get(floor_id)) for floor_id in floor_ids])

    @classmethod
    def default(cls) -> 'Building':
        """The shopping-mall layout: two basements and ten floors above ground."""
        return cls.from_floor_ids(DEFAULT_FLOOR_IDS)

    def index(self, floor: str) -> int:
        """
        Position of a floor in the total order (0 = lowest).

        Raises:
            InvalidFloor: If floor is not in this building
        """
        try:
            return self._index[floor]
        except (KeyError, TypeError):
            raise InvalidFloor(floor) from None

    def compare(self, a: str, b: str) -> int:
        """Return -1, 0 or 1 as floor a is below, level with, or above floor b."""
        ia, ib = self.index(a), self.index(b)
        return (ia > ib) - (ia < ib)

    def distance(self, a: str, b: str) -> int:
        """Number of floor-to-floor hops between a and b."""
        return abs(self.index(a) - self.index(b))

    def floors_between(self, from_floor: str, to_floor: str, direction: Direction) -> List[str]:
        """
        Floors reached when travelling from from_floor to to_floor.

        Excludes from_floor, includes to_floor, ordered in the direction of
        travel. Equal endpoints give an empty list.

        Raises:
            InvalidFloor: If either floor is unknown
            ValueError: If direction disagrees with the endpoints
        """
        start, end = self.index(from_floor), self.index(to_floor)
        if start == end:
            return []
        if (end > start) != (direction == Direction.UP):
            raise ValueError(f"Cannot travel {direction.value} from {from_floor} to {to_floor}")
        if direction == Direction.UP:
            return self.all_floors[start + 1:end + 1]
        return self.all_floors[end:start][::-1]

    def get_display_name(self, floor: str) -> str:
        """Indicator text for a floor (e.g., "-2" for "B2")."""
        self.index(floor)
        return self._display[floor]

    def is_valid_floor(self, floor) -> bool:
        return floor in self._index

    def __contains__(self, floor) -> bool:
        return self.is_valid_floor(floor)

    def __repr__(self) -> str:
        return f"Building(floors={self.num_floors}, range={self.min_floor}-{self.max_floor})"
