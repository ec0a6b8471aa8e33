"""
Main entry point for dinodash.

Reads settings (environment / .env) and launches either the pygame
window or a headless autopilot run.
"""

import asyncio
import logging
import random
import sys

from dotenv import load_dotenv

from dinodash.config.settings import Settings, get_settings
from dinodash.core.events import EventBus, EventType
from dinodash.core.state import StateMachine
from dinodash.game.autopilot import Autopilot
from dinodash.game.loop import SimulationLoop

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def create_loop(settings: Settings) -> SimulationLoop:
    """Build the simulation loop with its shared components."""
    return SimulationLoop(
        settings=settings.field,
        rng=random.Random(settings.seed),
        event_bus=EventBus(),
        state_machine=StateMachine(),
    )


async def run_simulator(settings: Settings) -> None:
    """Run the windowed version."""
    from dinodash.simulator.window import SimulatorWindow

    loop = create_loop(settings)
    loop.attach()

    window = SimulatorWindow(loop=loop, config=settings.display)
    await window.run()


def play_headless(loop: SimulationLoop, autopilot: Autopilot, max_ticks: int) -> int:
    """Play one game with the autopilot and return its score."""
    loop.start()
    for _ in range(max_ticks):
        frame = loop.tick()
        if frame is None or not frame.running:
            break
        if autopilot.wants_jump(frame):
            loop.jump()
    else:
        logger.info(f"Tick limit reached ({max_ticks}), stopping with score {loop.state.score}")
        return loop.state.score

    return loop.final_score


def run_headless(settings: Settings) -> list[int]:
    """Play several autopilot games without a window."""
    loop = create_loop(settings)
    autopilot = Autopilot()

    scores = []
    loop.event_bus.subscribe(
        EventType.GAME_OVER,
        lambda event: logger.debug(f"GAME_OVER event: {event.data}"),
    )

    for game in range(settings.headless_games):
        score = play_headless(loop, autopilot, settings.headless_max_ticks)
        scores.append(score)
        logger.info(f"Game {game + 1}/{settings.headless_games}: score {score}")

        if loop.running:
            # Capped game: no collision ended it, so start() would be rejected
            break

    if scores:
        logger.info(f"Best score {max(scores)}, mean {sum(scores) / len(scores):.1f}")
    return scores


def main() -> None:
    """Main entry point."""
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger.info("dinodash starting...")

    try:
        if settings.is_simulator:
            logger.info("Running in simulator mode")
            asyncio.run(run_simulator(settings))
        else:
            logger.info("Running headless")
            run_headless(settings)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("dinodash stopped")


if __name__ == "__main__":
    main()
