"""Tests for the simulation loop state machine and tick ordering."""

import unittest

from dinodash.config.settings import FieldSettings
from dinodash.core.events import Event, EventBus, EventType
from dinodash.core.state import State, StateMachine
from dinodash.game.autopilot import Autopilot
from dinodash.game.loop import SimulationLoop
from dinodash.game.spawner import Obstacle, ObstacleKind

from support import ScriptedRandom


def make_loop(rng=None):
    bus = EventBus()
    loop = SimulationLoop(
        settings=FieldSettings(),
        rng=rng or ScriptedRandom(default=0.9),
        event_bus=bus,
        state_machine=StateMachine(),
    )
    return loop, bus


def obstacle_on_player(loop):
    """An obstacle that will overlap the standing player after one move."""
    player = loop.state.player
    return Obstacle(
        ObstacleKind.GROUND,
        x=player.x + loop.state.speed,
        y=loop.settings.ground_y - 30,
        width=15,
        height=30,
    )


class TestLifecycleStates(unittest.TestCase):

    def setUp(self):
        self.loop, self.bus = make_loop()

    def test_starts_idle_and_frozen(self):
        self.assertEqual(self.loop.phase, State.IDLE)
        self.assertFalse(self.loop.running)
        self.assertIsNone(self.loop.tick())
        self.assertEqual(self.loop.state.frame_count, 0)

    def test_start_runs(self):
        self.assertTrue(self.loop.start())
        self.assertEqual(self.loop.phase, State.RUNNING)
        self.assertTrue(self.loop.running)
        self.assertEqual(len(self.bus.get_history(EventType.GAME_STARTED)), 1)

    def test_running_follows_state_machine(self):
        """The state machine is the only record of whether a game is on."""
        self.assertFalse(hasattr(self.loop.state, "running"))
        self.loop.state_machine.transition(State.RUNNING)
        self.assertTrue(self.loop.running)
        self.assertTrue(self.loop.tick().running)
        self.loop.state_machine.transition(State.ENDED)
        self.assertFalse(self.loop.running)
        self.assertIsNone(self.loop.tick())

    def test_start_while_running_is_rejected(self):
        self.loop.start()
        for _ in range(10):
            self.loop.tick()
        self.assertFalse(self.loop.start())
        self.assertEqual(self.loop.state.frame_count, 10)

    def test_jump_ignored_when_idle(self):
        self.assertFalse(self.loop.jump())
        self.assertFalse(self.loop.state.player.is_jumping)

    def test_jump_while_running(self):
        self.loop.start()
        self.assertTrue(self.loop.jump())
        self.assertFalse(self.loop.jump())
        self.assertEqual(self.loop.state.player.velocity_y, -13)


class TestTick(unittest.TestCase):

    def setUp(self):
        self.loop, self.bus = make_loop()
        self.loop.start()

    def test_frame_count_advances(self):
        frame = self.loop.tick()
        self.assertEqual(frame.frame_count, 1)
        self.assertTrue(frame.running)

    def test_first_spawn_on_frame_zero(self):
        frame = self.loop.tick()
        self.assertEqual(len(frame.obstacles), 1)
        # Spawned at the right edge and moved once in the same tick
        self.assertEqual(frame.obstacles[0].rect.x, 800 - 6)

    def test_one_obstacle_until_first_interval_boundary(self):
        for _ in range(90):
            frame = self.loop.tick()
        self.assertEqual(frame.frame_count, 90)
        self.assertEqual(len(frame.obstacles), 1)

        frame = self.loop.tick()
        self.assertEqual(len(frame.obstacles), 2)

    def test_clearing_first_obstacle_scores_one(self):
        autopilot = Autopilot()
        frame = self.loop.tick()
        first = self.loop.state.obstacles[0]

        while any(o is first for o in self.loop.state.obstacles):
            if autopilot.wants_jump(frame):
                self.loop.jump()
            frame = self.loop.tick()
            self.assertTrue(frame.running, "autopilot crashed into the first obstacle")
            self.assertLess(frame.frame_count, 300)

        self.assertLess(first.x + first.width, 0)
        self.assertEqual(frame.score, 1)

    def test_speed_recomputed_from_score(self):
        self.loop.state.score = 20
        frame = self.loop.tick()
        self.assertEqual(frame.speed, 7.0)

    def test_day_cycle_follows_score(self):
        self.loop.state.score = 50
        frame = self.loop.tick()
        self.assertEqual(frame.day_cycle, 1)

    def test_player_stays_in_bounds(self):
        autopilot = Autopilot()
        frame = self.loop.snapshot()
        resting_y = self.loop.state.player.resting_y
        while frame.running and frame.frame_count < 2000:
            if autopilot.wants_jump(frame):
                self.loop.jump()
            frame = self.loop.tick()
            self.assertLessEqual(frame.player.y, resting_y)
            if frame.player.y == resting_y and not frame.is_jumping:
                self.assertEqual(self.loop.state.player.velocity_y, 0)
            self.assertTrue(all(o.rect.right >= 0 for o in frame.obstacles))

    def test_decor_scrolls(self):
        before = [c.x for c in self.loop.state.clouds]
        self.loop.tick()
        after = [c.x for c in self.loop.state.clouds]
        self.assertTrue(all(a < b for a, b in zip(after, before)))
        self.assertEqual(self.loop.state.ground.x, -6)


class TestGameOver(unittest.TestCase):

    def setUp(self):
        self.loop, self.bus = make_loop()
        self.game_overs = []
        self.bus.subscribe(EventType.GAME_OVER, self.game_overs.append)
        self.loop.start()

    def test_collision_ends_game_with_score(self):
        for _ in range(5):
            self.loop.tick()
        self.loop.state.score = 7
        self.loop.state.obstacles.insert(0, obstacle_on_player(self.loop))

        frame = self.loop.tick()

        self.assertFalse(frame.running)
        self.assertEqual(self.loop.phase, State.IDLE)
        self.assertEqual(self.loop.final_score, 7)
        self.assertEqual(len(self.game_overs), 1)
        self.assertEqual(self.game_overs[0].data["score"], 7)

    def test_passes_through_ended(self):
        states = []
        self.loop.state_machine.add_listener(lambda old, new, ctx: states.append(new))
        self.loop.state.obstacles.append(obstacle_on_player(self.loop))
        self.loop.tick()
        self.assertEqual(states, [State.ENDED, State.IDLE])

    def test_no_mutation_after_game_over(self):
        self.loop.state.obstacles.append(obstacle_on_player(self.loop))
        self.loop.tick()
        frame_count = self.loop.state.frame_count
        obstacles = [o.x for o in self.loop.state.obstacles]

        for _ in range(5):
            self.assertIsNone(self.loop.tick())

        self.assertEqual(self.loop.state.frame_count, frame_count)
        self.assertEqual([o.x for o in self.loop.state.obstacles], obstacles)
        self.assertEqual(len(self.game_overs), 1)

    def test_obstacle_pruned_in_same_tick_counts(self):
        stale = Obstacle(ObstacleKind.GROUND, x=-10, y=220, width=15, height=30)
        self.loop.state.obstacles.extend([stale, obstacle_on_player(self.loop)])
        self.loop.tick()
        self.assertEqual(self.loop.final_score, 1)

    def test_restart_resets(self):
        for _ in range(30):
            self.loop.tick()
        self.loop.state.score = 12
        self.loop.state.obstacles.insert(0, obstacle_on_player(self.loop))
        self.loop.tick()

        self.assertTrue(self.loop.start())
        state = self.loop.state
        self.assertEqual(state.score, 0)
        self.assertEqual(state.frame_count, 0)
        self.assertEqual(state.speed, 6.0)
        self.assertEqual(state.obstacles, [])
        self.assertEqual(state.day_cycle, 0)
        self.assertTrue(state.player.on_ground)
        self.assertEqual(self.loop.state_machine.context.games_played, 1)


class TestInputRouting(unittest.TestCase):

    def setUp(self):
        self.loop, self.bus = make_loop()
        self.loop.attach()

    def test_button_starts_then_jumps(self):
        self.bus.emit(Event(EventType.BUTTON_PRESS))
        self.assertEqual(self.loop.phase, State.RUNNING)
        self.assertFalse(self.loop.state.player.is_jumping)

        self.bus.emit(Event(EventType.BUTTON_PRESS))
        self.assertTrue(self.loop.state.player.is_jumping)

    def test_explicit_commands(self):
        self.bus.emit(Event(EventType.START))
        self.bus.emit(Event(EventType.JUMP))
        self.assertTrue(self.loop.state.player.is_jumping)

    def test_tick_events_drive_loop(self):
        self.bus.emit(Event(EventType.START))
        for frame in range(3):
            self.bus.emit(Event(EventType.TICK, data={"frame": frame}))
        self.assertEqual(self.loop.state.frame_count, 3)

    def test_unrelated_event_not_handled(self):
        self.assertFalse(self.loop.handle_input(Event(EventType.THEME_TOGGLE)))


if __name__ == "__main__":
    unittest.main()
