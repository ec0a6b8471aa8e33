"""Naive jump policy for headless play."""

from dinodash.game.world import FrameSnapshot
from dinodash.game.spawner import ObstacleKind


class Autopilot:
    """Jumps when a ground obstacle is about to reach the player.

    Flying obstacles are ignored: standing still passes beneath them.
    """

    def __init__(self, lead_ticks: float = 5.0) -> None:
        self.lead_ticks = lead_ticks

    def wants_jump(self, frame: FrameSnapshot) -> bool:
        if frame.is_jumping:
            return False

        front = frame.player.right
        reach = frame.speed * self.lead_ticks
        for obstacle in frame.obstacles:
            if obstacle.kind is not ObstacleKind.GROUND:
                continue
            gap = obstacle.rect.x - front
            if 0 <= gap <= reach:
                return True
        return False
