from enum import Enum


class Direction(str, Enum):
    """Travel direction of the cabin, or the direction a hall caller wants."""
    UP = "UP"
    DOWN = "DOWN"

    @classmethod
    def parse(cls, value) -> "Direction":
        """Accept a Direction or a case-insensitive 'up'/'down' string."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Direction must be 'UP' or 'DOWN', got '{value}'") from None
