"""
Request Queue - ordered set of floors waiting for service.

Two insertion lanes over one double-ended sequence:
- Cabin selections are appended (served first come, first served)
- Hall calls are pushed to the head (served next)

A floor is never queued twice, and a request for the floor where the cabin
is already standing with its door open is dropped.
"""

from collections import deque
from typing import Callable, List, Optional

from .building import Building


class RequestQueue:
    """
    Pending destination floors for the cabin.

    The queue does not know about the cabin directly; it asks the
    `parked_at` callable, which returns True when the cabin is standing at
    the given floor, not moving, with its door open.
    """

    def __init__(self, building: Building, parked_at: Optional[Callable[[str], bool]] = None):
        """
        Args:
            building: Floor registry used to validate identifiers
            parked_at: Predicate telling whether a request for a floor is redundant
                because the cabin is already there with its door open
        """
        self.building = building
        self.parked_at = parked_at
        self._floors = deque()

    def _is_redundant(self, floor: str) -> bool:
        self.building.index(floor)
        if floor in self._floors:
            return True
        return self.parked_at is not None and self.parked_at(floor)

    def enqueue_append(self, floor: str) -> bool:
        """
        Add floor at the tail.

        Returns:
            bool: True if the floor was queued, False if the request was redundant

        Raises:
            InvalidFloor: If floor is not in the building
        """
        if self._is_redundant(floor):
            return False
        self._floors.append(floor)
        return True

    def enqueue_priority(self, floor: str) -> bool:
        """
        Add floor at the head so it is served next.

        A floor that is already queued keeps its current position.

        Returns:
            bool: True if the floor was queued, False if the request was redundant

        Raises:
            InvalidFloor: If floor is not in the building
        """
        if self._is_redundant(floor):
            return False
        self._floors.appendleft(floor)
        return True

    def dequeue_next(self) -> Optional[str]:
        """Pop and return the head floor, or None when nothing is waiting."""
        if not self._floors:
            return None
        return self._floors.popleft()

    def contains(self, floor: str) -> bool:
        return floor in self._floors

    def items(self) -> List[str]:
        """Snapshot of the queue, head first."""
        return list(self._floors)

    def is_empty(self) -> bool:
        return not self._floors

    def __contains__(self, floor) -> bool:
        return self.contains(floor)

    def __len__(self) -> int:
        return len(self._floors)

    def __repr__(self) -> str:
        return f"RequestQueue({list(self._floors)})"
