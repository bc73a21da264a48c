import math
import unittest

from rangebar_core.core.animation import FrameAnimator, accelerate_decelerate, linear


class InterpolatorTests(unittest.TestCase):
    def test_accelerate_decelerate_endpoints_and_midpoint(self) -> None:
        self.assertAlmostEqual(accelerate_decelerate(0.0), 0.0)
        self.assertAlmostEqual(accelerate_decelerate(0.5), 0.5)
        self.assertAlmostEqual(accelerate_decelerate(1.0), 1.0)

    def test_accelerate_decelerate_is_slow_at_the_edges(self) -> None:
        self.assertLess(accelerate_decelerate(0.1), linear(0.1))
        self.assertGreater(accelerate_decelerate(0.9), linear(0.9))
        self.assertAlmostEqual(accelerate_decelerate(0.25), (math.cos(1.25 * math.pi) / 2) + 0.5)


class FrameAnimatorTests(unittest.TestCase):
    def test_start_emits_start_value_and_tick_reaches_end_exactly(self) -> None:
        animator = FrameAnimator()
        values: list[float] = []
        handle = animator.start(10.0, 20.0, 100.0, interpolator=linear, on_update=values.append)
        self.assertEqual(values, [10.0])
        self.assertTrue(handle.is_running)

        animator.tick(0.0)
        animator.tick(25.0)
        animator.tick(50.0)
        self.assertEqual(values[1:], [10.0, 12.5, 15.0])

        remaining = animator.tick(250.0)
        self.assertEqual(values[-1], 20.0)
        self.assertEqual(remaining, 0)
        self.assertFalse(handle.is_running)

    def test_duration_counts_from_first_tick_after_idle_clock(self) -> None:
        animator = FrameAnimator()
        animator.tick(16.0)
        values: list[float] = []
        handle = animator.start(0.0, 1.0, 150.0, interpolator=linear, on_update=values.append)

        animator.tick(5016.0)
        self.assertEqual(values, [0.0, 0.0])
        self.assertEqual(handle.started_at_ms, 5016.0)
        self.assertTrue(handle.is_running)

        animator.tick(5016.0 + 75.0)
        self.assertAlmostEqual(values[-1], 0.5)
        animator.tick(5016.0 + 150.0)
        self.assertEqual(values[-1], 1.0)
        self.assertFalse(handle.is_running)

    def test_cancel_stops_updates_without_jumping_to_end(self) -> None:
        animator = FrameAnimator()
        values: list[float] = []
        handle = animator.start(0.0, 1.0, 100.0, interpolator=linear, on_update=values.append)
        animator.tick(0.0)
        animator.advance(40.0)
        handle.cancel()
        animator.advance(100.0)
        self.assertEqual(values, [0.0, 0.0, 0.4])
        self.assertEqual(animator.active_count, 0)

    def test_finish_jumps_to_end_once(self) -> None:
        animator = FrameAnimator()
        values: list[float] = []
        handle = animator.start(0.0, 1.0, 100.0, interpolator=linear, on_update=values.append)
        handle.finish()
        handle.finish()
        self.assertEqual(values, [0.0, 1.0])
        self.assertEqual(animator.active_count, 0)

    def test_zero_duration_finishes_immediately(self) -> None:
        animator = FrameAnimator()
        values: list[float] = []
        handle = animator.start(3.0, 7.0, 0.0, on_update=values.append)
        self.assertEqual(values, [7.0])
        self.assertFalse(handle.is_running)
        self.assertEqual(animator.active_count, 0)

    def test_negative_duration_rejected(self) -> None:
        with self.assertRaisesRegex(ValueError, "duration_ms"):
            FrameAnimator().start(0.0, 1.0, -1.0, on_update=lambda value: None)

    def test_clock_cannot_move_backwards(self) -> None:
        animator = FrameAnimator(now_ms=100.0)
        with self.assertRaisesRegex(ValueError, "backwards"):
            animator.tick(50.0)

    def test_animation_started_mid_tick_is_timed_from_next_tick(self) -> None:
        animator = FrameAnimator()
        follow_up: list[float] = []

        def chain(value: float) -> None:
            if value == 1.0:
                animator.start(1.0, 0.0, 50.0, interpolator=linear, on_update=follow_up.append)

        animator.start(0.0, 1.0, 50.0, interpolator=linear, on_update=chain)
        animator.tick(0.0)
        self.assertEqual(animator.tick(50.0), 1)
        self.assertEqual(follow_up, [1.0])
        animator.tick(60.0)
        animator.tick(85.0)
        self.assertEqual(follow_up, [1.0, 1.0, 0.5])

    def test_run_until_idle_counts_steps(self) -> None:
        animator = FrameAnimator()
        animator.start(0.0, 1.0, 100.0, on_update=lambda value: None)
        self.assertEqual(animator.run_until_idle(step_ms=25.0), 5)
        self.assertEqual(animator.now_ms, 125.0)
        self.assertEqual(animator.run_until_idle(), 0)

    def test_run_until_idle_ignores_cancelled_animations(self) -> None:
        animator = FrameAnimator()
        handle = animator.start(0.0, 1.0, 100.0, on_update=lambda value: None)
        handle.cancel()
        self.assertEqual(animator.run_until_idle(), 0)
        self.assertEqual(animator.now_ms, 0.0)


if __name__ == "__main__":
    unittest.main()
