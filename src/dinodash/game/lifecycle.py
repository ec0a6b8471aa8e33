"""Obstacle advance, collision check and culling in a single sweep."""

from dataclasses import dataclass
from typing import List, Optional
import logging

from dinodash.game.geometry import Box, overlaps
from dinodash.game.spawner import Obstacle

logger = logging.getLogger(__name__)


@dataclass
class ObstacleSweep:
    """Outcome of one sweep over the active obstacles."""

    pruned: int = 0
    hit: Optional[Obstacle] = None

    @property
    def collided(self) -> bool:
        return self.hit is not None


def is_off_screen(obstacle: Obstacle) -> bool:
    """True once the right edge has passed the left field boundary."""
    return obstacle.x + obstacle.width < 0


def advance_obstacles(obstacles: List[Obstacle], speed: float, player: Box) -> ObstacleSweep:
    """Move, collide and cull obstacles in place.

    Each obstacle is moved left by ``speed`` and tested against the player
    before it can be culled, so an obstacle touching the player is never
    counted as cleared. The sweep stops at the first hit; obstacles culled
    before it in this sweep are still reported in ``pruned``.
    """
    sweep = ObstacleSweep()
    i = 0
    while i < len(obstacles):
        obstacle = obstacles[i]
        obstacle.x -= speed

        if overlaps(player, obstacle):
            sweep.hit = obstacle
            return sweep

        if is_off_screen(obstacle):
            # Do not advance i: the next obstacle shifts into this slot
            del obstacles[i]
            sweep.pruned += 1
            logger.debug(f"Obstacle cleared ({obstacle.kind.value})")
            continue

        i += 1

    return sweep
