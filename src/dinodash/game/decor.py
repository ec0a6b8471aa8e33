"""Scrolling scenery: the ground strip and a fixed pool of clouds."""

from dataclasses import dataclass
from typing import List
import math

from dinodash.game.spawner import RandomSource

GROUND_PERIOD = 50.0

CLOUD_WIDTH = 40
CLOUD_HEIGHT = 20
CLOUD_MIN_Y = 30
CLOUD_Y_RANGE = 70
CLOUD_MIN_SPEED = 0.5
CLOUD_SPEED_RANGE = 1.5


@dataclass
class Ground:
    """Ground strip offset, always in (-period, 0]."""

    x: float = 0.0


@dataclass
class Cloud:
    """A cloud drifting at its own constant speed."""

    x: float
    y: float
    speed: float
    width: float = CLOUD_WIDTH
    height: float = CLOUD_HEIGHT


def _cloud_y(rng: RandomSource) -> float:
    return CLOUD_MIN_Y + rng.random() * CLOUD_Y_RANGE


def create_clouds(count: int, field_width: float, rng: RandomSource) -> List[Cloud]:
    """Build the cloud pool, spread evenly across the field."""
    clouds = []
    for i in range(count):
        y = _cloud_y(rng)
        speed = CLOUD_MIN_SPEED + rng.random() * CLOUD_SPEED_RANGE
        clouds.append(Cloud(x=(field_width / count) * i, y=y, speed=speed))
    return clouds


def advance_ground(ground: Ground, speed: float, period: float = GROUND_PERIOD) -> None:
    """Scroll the ground, wrapping the offset modulo ``period``."""
    ground.x = math.fmod(ground.x - speed, period)


def advance_clouds(clouds: List[Cloud], field_width: float, rng: RandomSource) -> None:
    """Drift every cloud; recycle the ones that left the field on the left."""
    for cloud in clouds:
        cloud.x -= cloud.speed
        if cloud.x + cloud.width < 0:
            cloud.x = field_width
            cloud.y = _cloud_y(rng)
