"""
Simulation loop.

Runs exactly one fixed step per ``tick()`` call and returns; the host
(simulator window, headless runner or a test) decides when to call again.
The loop never schedules itself.
"""

from typing import Optional
import logging
import random

from dinodash.config.settings import FieldSettings
from dinodash.core.events import Event, EventBus, EventType, game_over_event
from dinodash.core.state import State, StateMachine
from dinodash.game.decor import advance_clouds, advance_ground, create_clouds
from dinodash.game.difficulty import day_cycle, scroll_speed, should_spawn
from dinodash.game.lifecycle import advance_obstacles
from dinodash.game.player import Player
from dinodash.game.spawner import ObstacleSpawner, RandomSource
from dinodash.game.world import FrameSnapshot, SimulationState

logger = logging.getLogger(__name__)


class SimulationLoop:
    """Owns the simulation state and drives it through IDLE/RUNNING/ENDED.

    Commands (``start``, ``jump``) may arrive between any two ticks. A
    collision moves the game to ENDED, publishes GAME_OVER with the final
    score and drops straight back to IDLE within the same tick.
    """

    def __init__(
        self,
        settings: Optional[FieldSettings] = None,
        rng: Optional[RandomSource] = None,
        event_bus: Optional[EventBus] = None,
        state_machine: Optional[StateMachine] = None,
    ) -> None:
        self.settings = settings or FieldSettings()
        self.event_bus = event_bus or EventBus()
        self.state_machine = state_machine or StateMachine()
        self._rng = rng or random.Random()

        s = self.settings
        self.spawner = ObstacleSpawner(s.width, s.ground_y, self._rng)
        self.state = SimulationState(
            player=Player(
                ground_y=s.ground_y,
                gravity=s.gravity,
                jump_impulse=s.jump_impulse,
            ),
            clouds=create_clouds(s.max_clouds, s.width, self._rng),
            speed=s.base_speed,
        )

    @property
    def phase(self) -> State:
        return self.state_machine.state

    @property
    def running(self) -> bool:
        return self.state_machine.state == State.RUNNING

    @property
    def final_score(self) -> Optional[int]:
        """Score of the last finished game, if any."""
        return self.state_machine.context.final_score

    # Commands

    def start(self) -> bool:
        """Reset the game and begin running. Ignored unless IDLE."""
        if not self.state_machine.transition(State.RUNNING):
            return False

        self.state.reset(self.settings.base_speed)
        logger.info("Game started")
        self.event_bus.emit(Event(EventType.GAME_STARTED, source="simulation"))
        return True

    def jump(self) -> bool:
        """Make the player jump. No-op while airborne or when not running."""
        if not self.running:
            logger.debug("Jump ignored: game not running")
            return False
        return self.state.player.jump()

    def handle_input(self, event: Event) -> bool:
        """Route an input event to a command.

        Returns:
            True if event was handled
        """
        if event.type == EventType.BUTTON_PRESS:
            if self.phase == State.IDLE:
                return self.start()
            return self.jump()
        if event.type == EventType.START:
            return self.start()
        if event.type == EventType.JUMP:
            return self.jump()
        return False

    def attach(self) -> None:
        """Subscribe to input and tick events on the bus."""
        for event_type in (EventType.BUTTON_PRESS, EventType.START, EventType.JUMP):
            self.event_bus.subscribe(event_type, self.handle_input)
        self.event_bus.subscribe(EventType.TICK, self.on_tick)

    def on_tick(self, event: Event) -> None:
        self.tick()

    # Simulation

    def tick(self) -> Optional[FrameSnapshot]:
        """Advance the simulation by one step.

        Returns:
            Snapshot after the step, or None if the game is not running
        """
        state = self.state
        if not self.running:
            return None

        s = self.settings

        state.day_cycle = day_cycle(state.score)

        advance_clouds(state.clouds, s.width, self._rng)
        advance_ground(state.ground, state.speed, s.ground_period)

        state.player.update()

        if should_spawn(state.frame_count, state.score):
            obstacle = self.spawner.spawn(state.score)
            state.obstacles.append(obstacle)
            logger.debug(
                f"Spawned {obstacle.kind.value} obstacle "
                f"{obstacle.width}x{obstacle.height} at frame {state.frame_count}"
            )

        sweep = advance_obstacles(state.obstacles, state.speed, state.player)
        state.score += sweep.pruned

        if sweep.collided:
            self._end_game()
            return FrameSnapshot.capture(state, self.running)

        state.speed = scroll_speed(state.score, s.base_speed)
        assert state.speed > 0, "scroll speed must stay positive"

        state.frame_count += 1

        return FrameSnapshot.capture(state, self.running)

    def snapshot(self) -> FrameSnapshot:
        """Current state without advancing."""
        return FrameSnapshot.capture(self.state, self.running)

    def _end_game(self) -> None:
        state = self.state
        context = self.state_machine.context
        self.state_machine.transition(
            State.ENDED,
            final_score=state.score,
            games_played=context.games_played + 1,
        )
        logger.info(f"Game over: score {state.score} after {state.frame_count} frames")

        self.event_bus.emit(game_over_event(state.score, state.frame_count))
        self.state_machine.transition(State.IDLE)
