import logging
import time
from enum import Enum

from .config import FOOD_COUNT, HEIGHT, TIME_LIMIT, WIDTH, WIN_SCORE
from .food import FoodSet
from .geometry import Point
from .snake import Snake

logger = logging.getLogger(__name__)


class Status(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    WON = "won"
    LOST = "lost"


class LossReason(Enum):
    TIME_UP = "time's up"
    WALL = "wall"
    SELF = "self"

    @property
    def message(self):
        return _LOSS_MESSAGES[self]


_LOSS_MESSAGES = {
    LossReason.TIME_UP: "You ran out of time!",
    LossReason.WALL: "You hit the wall!",
    LossReason.SELF: "You hit yourself!",
}


class Game:
    """
    One play of snake: the snake, the food, the score and the clock.

    `clock` returns monotonic seconds and `rng` is the random source handed
    to the food set; both are injectable so a game can be replayed exactly.
    """

    def __init__(self, clock=time.monotonic, rng=None):
        self.clock = clock
        self.snake = Snake(Point(WIDTH // 2, HEIGHT // 2))
        self.food = FoodSet(WIDTH, HEIGHT, rng)
        for _ in range(FOOD_COUNT):
            self.food.generate_food(self.snake)

        self.score = 0
        self.game_over = False
        self.game_won = False
        self.paused = False
        self.start_time = clock()
        self.pause_start_time = None
        self.total_pause_duration = 0.0
        self.end_reason = None

    # ----- State queries -----
    @property
    def is_finished(self):
        return self.game_over or self.game_won

    @property
    def status(self):
        if self.game_won:
            return Status.WON
        if self.game_over:
            return Status.LOST
        if self.paused:
            return Status.PAUSED
        return Status.RUNNING

    @property
    def game_over_message(self):
        return self.end_reason.message if self.end_reason is not None else None

    def active_elapsed(self, now=None):
        """Seconds of unpaused play; frozen at the pause instant while paused."""
        if self.paused and self.pause_start_time is not None:
            now = self.pause_start_time
        elif now is None:
            now = self.clock()
        return now - self.start_time - self.total_pause_duration

    def remaining_time(self, now=None):
        return max(0.0, TIME_LIMIT - self.active_elapsed(now))

    # ----- Simulation -----
    def update(self):
        if self.is_finished or self.paused:
            return

        if self.active_elapsed() >= TIME_LIMIT:
            self._lose(LossReason.TIME_UP)
            return

        self.snake.move_forward()
        head = self.snake.head

        if head.x == 0 or head.y == 0 or head.x == WIDTH or head.y == HEIGHT:
            self._lose(LossReason.WALL)
        elif head in self.snake.body[1:]:
            self._lose(LossReason.SELF)

        # food is still eaten on the tick the snake dies
        if head in self.food:
            self.food.remove(head)
            self.snake.grow()
            self.score += 1
            self.food.generate_food(self.snake)

            if self.score >= WIN_SCORE:
                self.game_won = True
                logger.info("Game won with score %d", self.score)

    def _lose(self, reason):
        self.game_over = True
        self.end_reason = reason
        logger.info("Game lost (%s) with score %d", reason.value, self.score)

    def toggle_pause(self):
        # a finished game keeps its final clock
        if self.is_finished:
            return
        now = self.clock()
        if self.paused:
            if self.pause_start_time is not None:
                self.total_pause_duration += now - self.pause_start_time
            self.paused = False
            self.pause_start_time = None
        else:
            self.paused = True
            self.pause_start_time = now
        logger.debug("Pause toggled, paused=%s", self.paused)
