"""Simulation core: physics, spawning, difficulty, collision and the tick loop."""

from dinodash.game.geometry import Rect, overlaps
from dinodash.game.player import Player
from dinodash.game.spawner import Obstacle, ObstacleKind, ObstacleSpawner, RandomSource
from dinodash.game.world import FrameSnapshot, SimulationState
from dinodash.game.loop import SimulationLoop

__all__ = [
    "Rect",
    "overlaps",
    "Player",
    "Obstacle",
    "ObstacleKind",
    "ObstacleSpawner",
    "RandomSource",
    "FrameSnapshot",
    "SimulationState",
    "SimulationLoop",
]
