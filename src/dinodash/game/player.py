"""Player character: vertical-only kinematics with a ground clamp."""

from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)


@dataclass
class Player:
    """The runner.

    x never changes. y is the top edge; it only ever moves between the
    jump apex and the resting position ``ground_y - height``.
    """

    ground_y: float
    gravity: float = 0.8
    jump_impulse: float = -13.0

    x: float = 80.0
    width: float = 50.0
    height: float = 60.0

    y: float = 0.0
    velocity_y: float = 0.0
    is_jumping: bool = False

    # Cosmetic leg swing, read by the renderer only
    leg_phase: float = 0.0
    leg_direction: int = 1

    LEG_STEP = 0.15
    LEG_LIMIT = 0.3

    def __post_init__(self) -> None:
        self.y = self.resting_y

    @property
    def resting_y(self) -> float:
        return self.ground_y - self.height

    @property
    def on_ground(self) -> bool:
        return not self.is_jumping and self.y == self.resting_y

    def reset(self) -> None:
        """Put the player back on the ground, standing still."""
        self.y = self.resting_y
        self.velocity_y = 0.0
        self.is_jumping = False
        self.leg_phase = 0.0
        self.leg_direction = 1

    def jump(self) -> bool:
        """Apply the jump impulse unless already airborne.

        Returns:
            True if the impulse was applied
        """
        if self.is_jumping:
            logger.debug("Jump ignored: already airborne")
            return False

        self.velocity_y = self.jump_impulse
        self.is_jumping = True
        return True

    def update(self) -> None:
        """Advance one tick: gravity, integration, ground clamp, leg swing."""
        self.velocity_y += self.gravity
        self.y += self.velocity_y

        if self.y >= self.resting_y:
            self.y = self.resting_y
            self.velocity_y = 0.0
            self.is_jumping = False

        if not self.is_jumping:
            self.leg_phase += self.LEG_STEP * self.leg_direction
            if abs(self.leg_phase) > self.LEG_LIMIT:
                self.leg_direction *= -1
        else:
            self.leg_phase = 0.0
