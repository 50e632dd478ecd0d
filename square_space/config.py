import pygame

# Game Constants

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480

WINDOW_CAPTION = "Square! In! Space!"

TARGET_FPS = 50

# Ship movement
SHIP_MAX_SPEED = 400.0     # Max speed on an axis, pixels per second
SHIP_ACCELERATION = 1200.0 # Pixels per second squared while a key is held
SHIP_SLOWDOWN = 800.0      # Deceleration when not accelerating on an axis

# Ship appearance
SHIP_SIZE = 20
SHIP_COLOR = (255, 255, 255)
BACKGROUND_COLOR = (0, 0, 0)

# Input
DIRECTION_KEYS = {
    pygame.K_LEFT: 'left',
    pygame.K_RIGHT: 'right',
    pygame.K_UP: 'up',      # up is down in screen coordinates
    pygame.K_DOWN: 'down',
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)
