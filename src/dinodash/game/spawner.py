"""Obstacle creation.

Kind and size are decided once, at creation, from the score at that
moment. Every random draw goes through an injectable ``RandomSource``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol
import logging
import random

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Uniform float source in [0, 1). ``random.Random`` satisfies it."""

    def random(self) -> float:
        ...


class ObstacleKind(Enum):
    GROUND = "ground"
    FLYING = "flying"


@dataclass
class Obstacle:
    """An obstacle scrolling right to left. Only x changes after creation."""

    kind: ObstacleKind
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def is_flying(self) -> bool:
        return self.kind is ObstacleKind.FLYING


class ObstacleSpawner:
    """Builds obstacles at the right edge of the field.

    Flying obstacles are only eligible from ``FLYING_MIN_SCORE`` on and are
    then picked 30% of the time. They float in a band ``FLYING_BAND``
    units tall whose top sits ``FLYING_CLEARANCE`` above the ground, so a
    standing player passes beneath while a jumping one runs into them.
    The band keeps the classic game's geometry: flying obstacles threaten
    a jump, never a player who stays on the ground.
    """

    FLYING_MIN_SCORE = 30
    FLYING_THRESHOLD = 0.7

    GROUND_WIDTHS = (15, 25)
    GROUND_HEIGHTS = (30, 40)
    FLYING_WIDTHS = (20, 30)
    FLYING_HEIGHTS = (25, 35)

    FLYING_CLEARANCE = 120
    FLYING_BAND = 40

    def __init__(
        self,
        field_width: float,
        ground_y: float,
        rng: RandomSource | None = None,
    ) -> None:
        self.field_width = field_width
        self.ground_y = ground_y
        self._rng = rng or random.Random()

    def _pick(self, options: tuple[int, int]) -> int:
        return options[0] if self._rng.random() > 0.5 else options[1]

    def choose_kind(self, score: int) -> ObstacleKind:
        """Pick the obstacle kind. Draws from the source only when eligible."""
        if score >= self.FLYING_MIN_SCORE and self._rng.random() > self.FLYING_THRESHOLD:
            return ObstacleKind.FLYING
        return ObstacleKind.GROUND

    def spawn(self, score: int) -> Obstacle:
        """Create a new obstacle for the given score."""
        kind = self.choose_kind(score)

        if kind is ObstacleKind.FLYING:
            width = self._pick(self.FLYING_WIDTHS)
            height = self._pick(self.FLYING_HEIGHTS)
            y = (
                self.ground_y
                - self.FLYING_CLEARANCE
                - height
                + self._rng.random() * self.FLYING_BAND
            )
        else:
            width = self._pick(self.GROUND_WIDTHS)
            height = self._pick(self.GROUND_HEIGHTS)
            y = self.ground_y - height

        return Obstacle(
            kind=kind,
            x=self.field_width,
            y=y,
            width=width,
            height=height,
        )
