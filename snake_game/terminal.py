"""
Terminal I/O for the game, on top of blessed.

Keys come back as names: KEY_UP / KEY_DOWN / KEY_LEFT / KEY_RIGHT,
KEY_ESCAPE, KEY_ENTER, or the typed character itself.
"""
import sys
from contextlib import contextmanager

# Friendly error if blessed is missing, same as the pygame games do.
try:
    import blessed
except ImportError:
    print("This game requires the 'blessed' package.\n"
          "Install it with:\n\n    pip install blessed\n")
    sys.exit(1)

from .config import KEY_ENTER


def key_name(keystroke):
    """Normalise a blessed Keystroke; None for an empty (timed out) read."""
    if not keystroke:
        return None
    if keystroke.is_sequence:
        return keystroke.name
    if str(keystroke) in ("\n", "\r"):
        return KEY_ENTER
    return str(keystroke)


class TerminalIO:
    def __init__(self, term=None):
        self.term = term if term is not None else blessed.Terminal()

    @contextmanager
    def interactive(self):
        """Alternate screen, unbuffered keys, hidden cursor; all undone on exit."""
        with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor():
            yield self

    def poll_key(self, timeout):
        return key_name(self.term.inkey(timeout=timeout))

    def read_key(self):
        # outside interactive() the tty is line buffered, so switch for the read
        with self.term.cbreak():
            return key_name(self.term.inkey())

    def draw(self, lines):
        print(self.term.home + self.term.clear + "\n".join(lines), end="", flush=True)
