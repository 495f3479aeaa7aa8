"""
Real-time loop: keyboard input, simulation ticks and redraws.

Controls
- Arrow keys: steer
- P: pause / resume
- Esc: give up the current game
- After a game: R to play again, Enter to quit
"""
import logging
import queue
import threading
import time

from .config import (
    FRAME_DURATION,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_PAUSE,
    KEY_RETRY,
    KEY_RIGHT,
    KEY_UP,
    LISTENER_TIMEOUT,
    POLL_TIMEOUT,
)
from .game import Game
from .geometry import Direction
from .render import draw, win_banner

logger = logging.getLogger(__name__)

RETRY_PROMPT = "Press 'r' to retry or Enter to exit..."
FAREWELL = "Thanks for playing!"

KEY_TO_DIR = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}
COMMAND_KEYS = (KEY_ESCAPE, KEY_PAUSE)


class InputListener(threading.Thread):
    """
    Sole reader of the keyboard while a game is on.

    Arrow keys go to `directions`, Esc and P go to `commands`; everything
    else is dropped. Reads are cut into LISTENER_TIMEOUT slices so stop()
    is honoured promptly.
    """

    def __init__(self, terminal, timeout=LISTENER_TIMEOUT):
        super().__init__(name="snake-input", daemon=True)
        self.terminal = terminal
        self.timeout = timeout
        self.directions = queue.SimpleQueue()
        self.commands = queue.SimpleQueue()
        self._stop_event = threading.Event()

    def run(self):
        logger.debug("Input listener started")
        while not self._stop_event.is_set():
            key = self.terminal.poll_key(self.timeout)
            if key in KEY_TO_DIR:
                self.directions.put(KEY_TO_DIR[key])
            elif key in COMMAND_KEYS:
                self.commands.put(key)
        logger.debug("Input listener stopped")

    def stop(self):
        self._stop_event.set()
        if self.is_alive():
            self.join()


def _wait_for(q, timeout):
    try:
        return q.get(timeout=timeout)
    except queue.Empty:
        return None


def _take_nowait(q):
    try:
        return q.get_nowait()
    except queue.Empty:
        return None


def play(terminal, game, listener=None, clock=time.monotonic):
    """Run one game until it is won, lost or abandoned with Esc; returns it."""
    if listener is None:
        listener = InputListener(terminal)
    listener.start()
    last_update = clock()
    try:
        while True:
            command = _wait_for(listener.commands, POLL_TIMEOUT)
            if command == KEY_ESCAPE:
                logger.info("Game abandoned with score %d", game.score)
                break
            if command == KEY_PAUSE:
                game.toggle_pause()

            # one queued turn per pass, so quick key presses land on separate polls
            direction = _take_nowait(listener.directions)
            if direction is not None:
                game.snake.change_direction(direction)

            if clock() - last_update >= FRAME_DURATION:
                game.update()
                draw(game, terminal)
                last_update = clock()

            if game.is_finished:
                break
    finally:
        listener.stop()
    return game


def end_message(game):
    if game.game_won:
        return win_banner(game.score)
    if game.game_over_message is not None:
        return f"Game Over! {game.game_over_message} Your final score was: {game.score}"
    return None


def wait_for_retry(terminal):
    """Block until R (True) or Enter (False); other keys are ignored."""
    while True:
        key = terminal.read_key()
        if key == KEY_RETRY:
            return True
        if key == KEY_ENTER:
            return False


def run(terminal=None, new_game=Game):
    if terminal is None:
        from .terminal import TerminalIO

        terminal = TerminalIO()

    while True:
        with terminal.interactive():
            game = play(terminal, new_game())

        message = end_message(game)
        if message is not None:
            print(message)
        print(RETRY_PROMPT)
        if not wait_for_retry(terminal):
            break

    print(FAREWELL)
