"""Difficulty curve and day/night mode, both pure functions of score.

The curve changes regime at ``FAST_REGIME_SCORE``: below it speed and
spawn frequency step every 10 points, from it onward every 5 points.
The two formulas are not continuous at the threshold (speed jumps from
8.0 at score 49 to 11.0 at score 50 with the default base, spawn interval
drops from 86 to 60 ticks). Both sequences stay monotonic.
"""

FAST_REGIME_SCORE = 50

SPEED_STEP = 0.5

SLOW_SPAWN_START = 90
SLOW_SPAWN_FLOOR = 30
FAST_SPAWN_START = 70
FAST_SPAWN_FLOOR = 20

DAY_CYCLE_LENGTH = 50

DAY = 0
NIGHT = 1


def scroll_speed(score: int, base_speed: float = 6.0) -> float:
    """Horizontal scroll speed in units per tick."""
    if score >= FAST_REGIME_SCORE:
        return base_speed + (score // 5) * SPEED_STEP
    return base_speed + (score // 10) * SPEED_STEP


def spawn_interval(score: int) -> int:
    """Number of ticks between obstacle spawns."""
    if score >= FAST_REGIME_SCORE:
        return max(FAST_SPAWN_FLOOR, FAST_SPAWN_START - score // 5)
    return max(SLOW_SPAWN_FLOOR, SLOW_SPAWN_START - score // 10)


def should_spawn(frame_count: int, score: int) -> bool:
    """True on ticks that fall on a spawn interval boundary."""
    interval = spawn_interval(score)
    assert interval > 0, "spawn interval must stay positive"
    return frame_count % interval == 0


def day_cycle(score: int) -> int:
    """0 for day, 1 for night; flips every 50 points."""
    return (score // DAY_CYCLE_LENGTH) % 2
