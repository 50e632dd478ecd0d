"""Motion integration for a single ship moved by acceleration.

Input never sets velocity directly: held keys choose an acceleration on each
axis, velocity follows the acceleration, and an idle axis slows down to a stop.
"""


class Body:
    """The motion components of one entity, grouped for a single step."""

    def __init__(self, position, velocity, acceleration):
        self.position = position
        self.velocity = velocity
        self.acceleration = acceleration


def axis_acceleration(held, negative, positive, rate):
    a = 0.0
    if negative in held:
        a -= rate
    if positive in held:
        a += rate
    return a


def derive_acceleration(held, rate):
    """Acceleration (ax, ay) for the set of held direction tokens.

    Axes are independent, so a diagonal reaches `rate` on both axes and the
    combined magnitude is rate * sqrt(2). Opposite keys cancel out.
    """
    ax = axis_acceleration(held, 'left', 'right', rate)
    ay = axis_acceleration(held, 'up', 'down', rate)  # up is negative y on screen
    return ax, ay


def update_velocity_axis(v, a, dt, max_speed, slowdown):
    """
    Returns the new velocity on one axis.

    Args:
        v (float): Current velocity on the axis.
        a (float): Current acceleration on the axis.
        dt (float): Seconds since the last update.
        max_speed (float): Speed limit in either direction.
        slowdown (float): Deceleration applied while a is zero.
    """
    # Slow down toward zero if not accelerating, never past it
    if a == 0:
        if v > 0:
            v = max(0.0, v - slowdown * dt)
        elif v < 0:
            v = min(0.0, v + slowdown * dt)

    v += a * dt

    if v > max_speed:
        v = max_speed
    elif v < -max_speed:
        v = -max_speed
    return v


def step(body, held, dt):
    """Advance body by dt seconds for the given held direction tokens.

    Updates acceleration, then velocity, then position (using the new
    velocity). Returns the same body.
    """
    if not dt >= 0:  # also rejects NaN
        raise ValueError(f"dt must be a non-negative number, got {dt}")

    pos = body.position
    vel = body.velocity
    acc = body.acceleration

    acc.ax, acc.ay = derive_acceleration(held, acc.rate)

    vel.dx = update_velocity_axis(vel.dx, acc.ax, dt, vel.max_speed, acc.slowdown)
    vel.dy = update_velocity_axis(vel.dy, acc.ay, dt, vel.max_speed, acc.slowdown)

    pos.x += vel.dx * dt
    pos.y += vel.dy * dt
    return body
