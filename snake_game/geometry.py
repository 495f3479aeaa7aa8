from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def step(self, direction):
        """Neighbouring cell along direction, clamped at 0 on both axes."""
        dx, dy = direction.delta
        return Point(max(0, self.x + dx), max(0, self.y + dy))


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self):
        return self.value

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))
