class Position:
    def __init__(self, x, y):
        self.x = x
        self.y = y

class Velocity:
    def __init__(self, dx=0.0, dy=0.0, max_speed=0.0):
        self.dx = dx
        self.dy = dy
        self.max_speed = max_speed

class Acceleration:
    def __init__(self, ax=0.0, ay=0.0, rate=0.0, slowdown=0.0):
        """ Initializes the Acceleration component.

        Args:
            ax (float): Current acceleration on the x axis.
            ay (float): Current acceleration on the y axis.
            rate (float): Magnitude applied on an axis while its key is held.
            slowdown (float): Deceleration toward zero on an idle axis.
        """
        self.ax = ax
        self.ay = ay
        self.rate = rate
        self.slowdown = slowdown

class HeldKeys:
    def __init__(self, keys=None):
        self.keys = set(keys or ())  # Direction tokens: 'left', 'right', 'up', 'down'

# Drawn as a filled square centered on the entity's Position
class Marker:
    def __init__(self, size, color):
        self.size = size
        self.color = color
