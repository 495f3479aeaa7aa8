from .config import EMPTY_CHAR, FOOD_CHAR, HEIGHT, SNAKE_CHAR, WALL_CHAR, WIDTH
from .geometry import Point

PAUSE_NOTICE = "Game Paused. Press 'p' to resume."


def win_banner(score):
    return f"Congratulations! You've won the game with a score of {score}!"


def format_clock(seconds):
    whole = int(seconds)
    return f"{whole // 60:02d}:{whole % 60:02d}"


def cell_char(game, x, y):
    point = Point(x, y)
    if game.snake.occupies(point):
        return SNAKE_CHAR
    if point in game.food:
        return FOOD_CHAR
    if x == 0 or y == 0 or x == WIDTH or y == HEIGHT:
        return WALL_CHAR
    return EMPTY_CHAR


def render_frame(game, now=None):
    """Full frame for the current game: the board, then the status lines."""
    lines = [
        "".join(cell_char(game, x, y) for x in range(WIDTH + 1))
        for y in range(HEIGHT + 1)
    ]
    lines.append(f"Score: {game.score}")
    lines.append(f"Time left: {format_clock(game.remaining_time(now))}")
    if game.paused:
        lines.append(PAUSE_NOTICE)
    if game.game_won:
        lines.append(win_banner(game.score))
    return lines


def draw(game, terminal):
    terminal.draw(render_frame(game))
