import contextlib
import pygame
from .world import World
from .components import Position, Velocity, Acceleration, HeldKeys, Marker
from .systems import InputSystem, MovementSystem, RenderSystem
from . import config as cfg

@contextlib.contextmanager
def display(size=(cfg.SCREEN_WIDTH, cfg.SCREEN_HEIGHT), caption=cfg.WINDOW_CAPTION):
    """Initialize pygame and open the window; pygame is shut down on every exit path."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(caption)
        yield screen
    finally:
        pygame.quit()

def make_ship(world, x, y):
    ship = world.add_entity()
    world.add_component(ship, Position(x, y))
    world.add_component(ship, Velocity(max_speed=cfg.SHIP_MAX_SPEED))
    world.add_component(ship, Acceleration(rate=cfg.SHIP_ACCELERATION, slowdown=cfg.SHIP_SLOWDOWN))
    world.add_component(ship, HeldKeys())
    world.add_component(ship, Marker(cfg.SHIP_SIZE, cfg.SHIP_COLOR))
    return ship

class Game:
    def __init__(self, screen):
        self.screen = screen
        self.clock = pygame.time.Clock()
        self.running = True

        # Don't care about mouse movement
        pygame.event.set_blocked(pygame.MOUSEMOTION)

        self.world = World()
        self.ship = make_ship(self.world, screen.get_width() / 2, screen.get_height() / 2)

        # Key events reach HeldKeys through dispatch(), before the systems run
        self.input_system = InputSystem(self.world)
        # Order matters: movement before drawing the new position
        self.world.add_system(MovementSystem(self.world))
        self.world.add_system(RenderSystem(self.world, screen))

        self.handlers = {
            pygame.QUIT: self.on_quit_requested,
            pygame.KEYDOWN: self.on_key_pressed,
            pygame.KEYUP: self.on_key_released,
        }

    def dispatch(self, event):
        handler = self.handlers.get(event.type)
        if handler:
            handler(event)

    def on_quit_requested(self, event):
        self.quit()

    def on_key_pressed(self, event):
        if event.key in cfg.QUIT_KEYS:
            self.quit()
        else:
            self.input_system.handle(event)

    def on_key_released(self, event):
        self.input_system.handle(event)

    def quit(self):
        print("Quitting!")
        self.running = False

    def step(self):
        """Do everything needed for one frame."""
        dt = self.clock.tick(cfg.TARGET_FPS) / 1000.0

        # Apply every pending press/release before this frame's movement
        for event in pygame.event.get():
            self.dispatch(event)

        self.world.update(dt)
        pygame.display.flip()

    def run(self):
        while self.running:
            self.step()
