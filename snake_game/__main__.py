"""
Snake — terminal version
Controls: Arrow keys to move, P to pause, Esc to give up. R to retry afterwards.
"""
import sys

from .loop import FAREWELL, run


def main():
    try:
        run()
    except KeyboardInterrupt:
        print(FAREWELL)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
