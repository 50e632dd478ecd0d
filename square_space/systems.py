import pygame
from .components import Position, Velocity, Acceleration, HeldKeys, Marker
from . import config as cfg
from .physics import Body, step

class InputSystem:
    def __init__(self, world, key_map=None):
        self.world = world
        self.key_map = key_map if key_map is not None else cfg.DIRECTION_KEYS

    def handle(self, event):
        direction = self.key_map.get(event.key)
        if direction is None:
            return  # Not a direction key
        for _, held in self.world.query(HeldKeys):
            if event.type == pygame.KEYDOWN:
                held.keys.add(direction)
            elif event.type == pygame.KEYUP:
                held.keys.discard(direction)

class MovementSystem:
    def __init__(self, world):
        self.world = world

    def process(self, dt):
        for _, position, velocity, acceleration, held in self.world.query(Position, Velocity, Acceleration, HeldKeys):
            step(Body(position, velocity, acceleration), held.keys, dt)

class RenderSystem:
    def __init__(self, world, screen):
        self.world = world
        self.screen = screen

    def _draw_centered(self, marker, center_pos):
        """Helper to draw a marker square centered at a given position."""
        rect = pygame.Rect(0, 0, marker.size, marker.size)
        rect.center = (round(center_pos[0]), round(center_pos[1]))
        pygame.draw.rect(self.screen, marker.color, rect)

    def process(self, dt=0):
        self.screen.fill(cfg.BACKGROUND_COLOR)

        for _, position, marker in self.world.query(Position, Marker):
            self._draw_centered(marker, (position.x, position.y))
