from .geometry import Direction


class Snake:
    """Body is head first and never empty."""

    def __init__(self, start, direction=Direction.RIGHT):
        self.body = [start]
        self.direction = direction

    @property
    def head(self):
        return self.body[0]

    def __len__(self):
        return len(self.body)

    def occupies(self, point):
        return point in self.body

    def move_forward(self):
        # Saturating step: a head pushed against 0 stays on the wall ring,
        # the game reports that as a wall hit.
        self.body.insert(0, self.head.step(self.direction))
        self.body.pop()

    def grow(self):
        """Duplicate the tail; the next move_forward turns it into a real segment."""
        self.body.append(self.body[-1])

    def change_direction(self, new_direction):
        # reverse guard, ignored silently (key repeats hit this a lot)
        if new_direction is self.direction.opposite:
            return
        self.direction = new_direction
