"""Single-player terminal snake: eat 20 food within a minute without crashing."""
from .food import FoodSet
from .game import Game, LossReason, Status
from .geometry import Direction, Point
from .loop import InputListener, end_message, play, run
from .render import render_frame
from .snake import Snake

__all__ = [
    "Direction",
    "FoodSet",
    "Game",
    "InputListener",
    "LossReason",
    "Point",
    "Snake",
    "Status",
    "end_message",
    "play",
    "render_frame",
    "run",
]
