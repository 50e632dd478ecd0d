import contextlib
import pygame
import sys
from square_space.game import Game, display

def main():
    with contextlib.ExitStack() as stack:
        try:
            screen = stack.enter_context(display())
        except pygame.error as e:
            print(f"Could not open display: {e}")
            sys.exit(1)
        Game(screen).run()

if __name__ == "__main__":
    main()
