"""Simulation state and the per-tick snapshot handed to presentation."""

from dataclasses import dataclass, field
from typing import List, Tuple

from dinodash.game.decor import Cloud, Ground
from dinodash.game.difficulty import DAY
from dinodash.game.geometry import Rect
from dinodash.game.player import Player
from dinodash.game.spawner import Obstacle, ObstacleKind


@dataclass
class SimulationState:
    """Everything the loop mutates. Owned by a single ``SimulationLoop``."""

    player: Player
    ground: Ground = field(default_factory=Ground)
    clouds: List[Cloud] = field(default_factory=list)
    obstacles: List[Obstacle] = field(default_factory=list)

    score: int = 0
    frame_count: int = 0
    speed: float = 6.0
    day_cycle: int = DAY

    def reset(self, base_speed: float) -> None:
        """Start-of-game values. Scenery keeps scrolling from where it was."""
        self.player.reset()
        self.obstacles.clear()
        self.score = 0
        self.frame_count = 0
        self.speed = base_speed
        self.day_cycle = DAY


@dataclass(frozen=True)
class ObstacleView:
    rect: Rect
    kind: ObstacleKind


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only copy of the state after a tick, for renderers and tests."""

    player: Rect
    is_jumping: bool
    leg_phase: float
    obstacles: Tuple[ObstacleView, ...]
    ground_x: float
    clouds: Tuple[Rect, ...]
    day_cycle: int
    score: int
    frame_count: int
    speed: float
    running: bool

    @classmethod
    def capture(cls, state: SimulationState, running: bool) -> "FrameSnapshot":
        player = state.player
        return cls(
            player=Rect.of(player),
            is_jumping=player.is_jumping,
            leg_phase=player.leg_phase,
            obstacles=tuple(ObstacleView(Rect.of(o), o.kind) for o in state.obstacles),
            ground_x=state.ground.x,
            clouds=tuple(Rect.of(c) for c in state.clouds),
            day_cycle=state.day_cycle,
            score=state.score,
            frame_count=state.frame_count,
            speed=state.speed,
            running=running,
        )
