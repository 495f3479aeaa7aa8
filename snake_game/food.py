import logging
import random

from .config import MAX_SPAWN_ATTEMPTS
from .geometry import Point

logger = logging.getLogger(__name__)


class FoodSet:
    """
    Active food positions on the interior of a width x height board.

    Food only ever lands on [1, width - 1] x [1, height - 1], never on the
    wall ring. `rng` is any random source with randrange(low, high).
    """

    def __init__(self, width, height, rng=None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.items = []

    def __contains__(self, point):
        return point in self.items

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def remove(self, point):
        self.items.remove(point)

    def _is_free(self, point, snake):
        return point not in self.items and not snake.occupies(point)

    def _random_interior(self):
        return Point(self.rng.randrange(1, self.width), self.rng.randrange(1, self.height))

    def generate_food(self, snake):
        """
        Place one food on a free interior cell and return it.

        Rejection sampling is fast while the board is mostly empty; after
        MAX_SPAWN_ATTEMPTS misses the free cells are listed and one is picked
        from those. Returns None when no free cell is left.
        """
        for _ in range(MAX_SPAWN_ATTEMPTS):
            candidate = self._random_interior()
            if self._is_free(candidate, snake):
                self.items.append(candidate)
                return candidate

        free = [
            Point(x, y)
            for y in range(1, self.height)
            for x in range(1, self.width)
            if self._is_free(Point(x, y), snake)
        ]
        logger.info("Food spawn fell back to a scan, %d free cells", len(free))
        if not free:
            return None
        food = free[self.rng.randrange(0, len(free))]
        self.items.append(food)
        return food
