import math
from dataclasses import dataclass
from enum import Enum

from .settings import (
    ALIEN_BASE_SPEED,
    ALIEN_HEIGHT,
    ALIEN_SPEED_INTERVAL,
    ALIEN_SPEED_STEP,
    ALIEN_SPEED_THRESHOLD,
    ALIEN_WALL,
    ALIEN_WIDTH,
    BOOST,
    GRAVITY,
    MOVE_SPEED,
    PLAYER_HEIGHT,
    PLAYER_SPAWN_LIFT,
    PLAYER_WIDTH,
)


# ------------------------
# Utility dataclasses
# ------------------------
@dataclass
class Vec2:
    x: float
    y: float


@dataclass(frozen=True)
class Controls:
    """Keys held down during a tick."""
    left: bool = False
    right: bool = False
    ascend: bool = False


class Locomotion(Enum):
    NORMAL = 'normal'
    FAILING = 'failing'


# ------------------------
# Game Entities
# ------------------------
class Player:
    def __init__(self, x, y, width=PLAYER_WIDTH, height=PLAYER_HEIGHT):
        self.pos = Vec2(x, y)
        self.vel = Vec2(0.0, 0.0)
        self.width = width
        self.height = height
        self.locomotion = Locomotion.NORMAL

    @classmethod
    def spawn(cls, field):
        return cls(ALIEN_WALL, field.ground_y - PLAYER_SPAWN_LIFT)

    @property
    def facing_right(self):
        return self.vel.x > 0

    def update(self, controls, field):
        # Velocities are per tick, so there is no dt here.
        if self.locomotion is Locomotion.FAILING:
            self._fall(field)
            return

        if controls.left:
            self.vel.x = -MOVE_SPEED
        elif controls.right:
            self.vel.x = MOVE_SPEED
        else:
            self.vel.x = 0.0
        if controls.ascend:
            self.vel.y -= BOOST
        self.vel.y += GRAVITY
        self.pos.x += self.vel.x
        self.pos.y += self.vel.y

        # clamp
        self.pos.x = max(field.player_min_x, min(field.player_max_x, self.pos.x))
        if self.pos.y < 0:
            self.pos.y = 0.0
            self.vel.y = 0.0
        if self.pos.y > field.ground_y:
            self.pos.y = field.ground_y
            self.vel.y = 0.0

    def _fall(self, field):
        self.vel.x = 0.0
        self.vel.y += GRAVITY
        self.pos.y += self.vel.y
        # landing is the only way out of FAILING
        if self.pos.y > field.ground_y:
            self.pos.y = field.ground_y
            self.vel.y = 0.0
            self.locomotion = Locomotion.NORMAL

    def fail(self):
        self.locomotion = Locomotion.FAILING


def alien_speed(score):
    """Descent speed in px/s: flat below the threshold, then a staircase."""
    if score < ALIEN_SPEED_THRESHOLD:
        return ALIEN_BASE_SPEED
    increments = 1 + math.floor((score - ALIEN_SPEED_THRESHOLD) / ALIEN_SPEED_INTERVAL)
    return ALIEN_BASE_SPEED + increments * ALIEN_SPEED_STEP


class Alien:
    def __init__(self, x=0.0, y=0.0, width=ALIEN_WIDTH, height=ALIEN_HEIGHT):
        self.pos = Vec2(x, y)
        self.width = width
        self.height = height
        self._speed = ALIEN_BASE_SPEED

    @property
    def speed(self):
        return self._speed

    def update(self, dt, score, field):
        """Descend for `dt` seconds. Returns True once the bottom edge reaches the ground."""
        self._speed = alien_speed(score)
        self.pos.y += self._speed * dt
        return self.pos.y + self.height >= field.ground_y

    def reset(self):
        self.pos.y = 0.0
