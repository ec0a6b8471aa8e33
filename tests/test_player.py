"""Tests for the player's vertical physics."""

import unittest

from dinodash.game.player import Player

GROUND_Y = 250


class TestPlayerPhysics(unittest.TestCase):

    def setUp(self):
        self.player = Player(ground_y=GROUND_Y)

    def test_starts_resting_on_ground(self):
        self.assertEqual(self.player.y, GROUND_Y - 60)
        self.assertEqual(self.player.velocity_y, 0)
        self.assertFalse(self.player.is_jumping)
        self.assertTrue(self.player.on_ground)

    def test_update_on_ground_stays_clamped(self):
        for _ in range(10):
            self.player.update()
        self.assertEqual(self.player.y, self.player.resting_y)
        self.assertEqual(self.player.velocity_y, 0)

    def test_jump_applies_impulse(self):
        self.assertTrue(self.player.jump())
        self.assertEqual(self.player.velocity_y, -13)
        self.assertTrue(self.player.is_jumping)

    def test_first_tick_after_jump(self):
        self.player.jump()
        self.player.update()
        self.assertAlmostEqual(self.player.velocity_y, -12.2)
        self.assertAlmostEqual(self.player.y, 190 - 12.2)

    def test_no_double_jump(self):
        """Jumping while airborne leaves velocity and flag unchanged."""
        self.player.jump()
        for _ in range(5):
            self.player.update()
        velocity = self.player.velocity_y
        y = self.player.y

        for _ in range(3):
            self.assertFalse(self.player.jump())

        self.assertEqual(self.player.velocity_y, velocity)
        self.assertEqual(self.player.y, y)
        self.assertTrue(self.player.is_jumping)

    def test_jump_lands_back_on_ground(self):
        self.player.jump()
        ticks = 0
        while self.player.is_jumping:
            self.player.update()
            ticks += 1
            self.assertLess(ticks, 100, "player never landed")

        self.assertEqual(self.player.y, self.player.resting_y)
        self.assertEqual(self.player.velocity_y, 0)
        self.assertGreater(ticks, 20)

    def test_position_never_below_ground(self):
        self.player.jump()
        apex = self.player.y
        for _ in range(200):
            self.player.update()
            apex = min(apex, self.player.y)
            self.assertLessEqual(self.player.y, self.player.resting_y)
            if self.player.y == self.player.resting_y and not self.player.is_jumping:
                self.assertEqual(self.player.velocity_y, 0)
            if self.player.on_ground:
                self.player.jump()

        # Apex is roughly v^2 / 2g above the ground
        self.assertLess(apex, self.player.resting_y - 90)

    def test_custom_physics(self):
        player = Player(ground_y=100, gravity=2.0, jump_impulse=-10.0)
        player.jump()
        player.update()
        self.assertEqual(player.velocity_y, -8.0)
        self.assertEqual(player.y, 40 - 8.0)


class TestLegAnimation(unittest.TestCase):

    def test_phase_oscillates_on_ground(self):
        player = Player(ground_y=GROUND_Y)
        phases = []
        for _ in range(20):
            player.update()
            phases.append(player.leg_phase)

        self.assertTrue(any(p > 0 for p in phases))
        self.assertTrue(any(p < 0 for p in phases))
        self.assertTrue(all(abs(p) <= 0.3 + Player.LEG_STEP + 1e-9 for p in phases))

    def test_phase_resets_while_airborne(self):
        player = Player(ground_y=GROUND_Y)
        player.update()
        player.update()
        self.assertNotEqual(player.leg_phase, 0)

        player.jump()
        player.update()
        self.assertEqual(player.leg_phase, 0)

    def test_reset_restores_rest_pose(self):
        player = Player(ground_y=GROUND_Y)
        player.jump()
        player.update()
        player.reset()
        self.assertTrue(player.on_ground)
        self.assertEqual(player.velocity_y, 0)
        self.assertEqual(player.leg_phase, 0)


if __name__ == "__main__":
    unittest.main()
