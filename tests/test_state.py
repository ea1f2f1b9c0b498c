import threading
import unittest

from pomodoro_tui import (
    DEFAULT_BREAK_DURATION,
    DEFAULT_WORK_DURATION,
    DURATION_STEP,
    MIN_WORK_DURATION,
    TimerSnapshot,
    TimerState,
)


def drain(state: TimerState) -> None:
    """Tick a running timer until the countdown sits at zero"""
    while state.remaining_seconds > 0:
        state.tick()


class TestInitialState(unittest.TestCase):
    """Test a freshly created timer"""

    def test_defaults(self):
        state = TimerState()
        self.assertEqual(state.work_duration_seconds, 1500)
        self.assertEqual(state.remaining_seconds, 1500)
        self.assertEqual(state.break_duration_seconds, 300)
        self.assertFalse(state.on_break)
        self.assertFalse(state.running)

    def test_default_constants(self):
        self.assertEqual(DEFAULT_WORK_DURATION, 25 * 60)
        self.assertEqual(DEFAULT_BREAK_DURATION, 5 * 60)
        self.assertEqual(DURATION_STEP, 60)
        self.assertEqual(MIN_WORK_DURATION, 60)

    def test_custom_durations(self):
        state = TimerState(work_duration_seconds=120, break_duration_seconds=30)
        self.assertEqual(state.remaining_seconds, 120)
        self.assertEqual(state.break_duration_seconds, 30)

    def test_rejects_non_positive_durations(self):
        with self.assertRaises(ValueError):
            TimerState(work_duration_seconds=0)
        with self.assertRaises(ValueError):
            TimerState(break_duration_seconds=-5)

    def test_snapshot_matches_fields(self):
        state = TimerState()
        self.assertEqual(
            state.snapshot(),
            TimerSnapshot(
                remaining_seconds=1500,
                on_break=False,
                running=False,
                work_duration_seconds=1500,
                break_duration_seconds=300,
            ),
        )


class TestTick(unittest.TestCase):
    """Test the countdown rule applied once per tick"""

    def setUp(self):
        self.state = TimerState(work_duration_seconds=120, break_duration_seconds=30)

    def test_paused_tick_changes_nothing(self):
        before = self.state.snapshot()
        self.assertFalse(self.state.tick())
        self.assertEqual(self.state.snapshot(), before)

    def test_paused_tick_at_zero_changes_nothing(self):
        self.state.toggle_running()
        drain(self.state)
        self.state.toggle_running()
        before = self.state.snapshot()

        self.assertFalse(self.state.tick())
        self.assertEqual(self.state.snapshot(), before)

    def test_running_tick_decrements(self):
        self.state.toggle_running()
        self.assertFalse(self.state.tick())
        self.assertEqual(self.state.remaining_seconds, 119)

    def test_reaching_zero_does_not_flip_yet(self):
        """The flip happens on the tick after the countdown hits zero"""
        self.state.toggle_running()
        for _ in range(120):
            self.assertFalse(self.state.tick())
        self.assertEqual(self.state.remaining_seconds, 0)
        self.assertFalse(self.state.on_break)

    def test_work_to_break(self):
        self.state.toggle_running()
        drain(self.state)

        self.assertTrue(self.state.tick())
        self.assertTrue(self.state.on_break)
        self.assertEqual(self.state.remaining_seconds, 30)

    def test_break_to_work(self):
        self.state.toggle_running()
        drain(self.state)
        self.state.tick()
        drain(self.state)

        self.assertTrue(self.state.tick())
        self.assertFalse(self.state.on_break)
        self.assertEqual(self.state.remaining_seconds, 120)

    def test_one_flip_per_exhaustion(self):
        """A full work + break cycle flips exactly twice"""
        self.state.toggle_running()
        flips = sum(self.state.tick() for _ in range(120 + 1 + 30 + 1))
        self.assertEqual(flips, 2)
        self.assertFalse(self.state.on_break)
        self.assertEqual(self.state.remaining_seconds, 120)

    def test_advance_reports_flip_with_matching_snapshot(self):
        self.state.toggle_running()
        drain(self.state)

        flipped, snapshot = self.state.advance()
        self.assertTrue(flipped)
        self.assertTrue(snapshot.on_break)
        self.assertEqual(snapshot.remaining_seconds, 30)
        self.assertEqual(snapshot, self.state.snapshot())

    def test_advance_without_flip(self):
        self.state.toggle_running()
        flipped, snapshot = self.state.advance()
        self.assertFalse(flipped)
        self.assertEqual(snapshot.remaining_seconds, 119)

    def test_break_reload_uses_current_work_duration(self):
        self.state.toggle_running()
        drain(self.state)
        self.state.tick()
        self.state.increase_duration()
        drain(self.state)

        self.state.tick()
        self.assertFalse(self.state.on_break)
        self.assertEqual(self.state.remaining_seconds, 180)


class TestDurationControls(unittest.TestCase):
    """Test +1 min / -1 min"""

    def test_increase_adds_a_minute_and_restarts(self):
        state = TimerState()
        snapshot = state.increase_duration()
        self.assertEqual(snapshot.work_duration_seconds, 1560)
        self.assertEqual(snapshot.remaining_seconds, 1560)

    def test_increase_while_running(self):
        state = TimerState()
        state.toggle_running()
        for _ in range(10):
            state.tick()

        snapshot = state.increase_duration()
        self.assertTrue(snapshot.running)
        self.assertEqual(snapshot.remaining_seconds, snapshot.work_duration_seconds)

    def test_decrease_removes_a_minute(self):
        state = TimerState(work_duration_seconds=120)
        snapshot = state.decrease_duration()
        self.assertEqual(snapshot.work_duration_seconds, 60)
        self.assertEqual(snapshot.remaining_seconds, 60)

    def test_decrease_at_floor_is_noop(self):
        state = TimerState(work_duration_seconds=60)
        snapshot = state.decrease_duration()
        self.assertEqual(snapshot.work_duration_seconds, 60)

    def test_decrease_at_floor_still_restarts_countdown(self):
        state = TimerState(work_duration_seconds=60)
        state.toggle_running()
        for _ in range(15):
            state.tick()

        snapshot = state.decrease_duration()
        self.assertEqual(snapshot.remaining_seconds, 60)

    def test_decrease_always_steps_a_full_minute(self):
        """Above the guard the step is always exactly 60s, even off the minute grid"""
        state = TimerState(work_duration_seconds=90)
        snapshot = state.decrease_duration()
        self.assertEqual(snapshot.work_duration_seconds, 30)
        self.assertEqual(snapshot.remaining_seconds, 30)

    def test_decrease_below_one_minute_is_noop(self):
        state = TimerState(work_duration_seconds=30)
        self.assertEqual(state.decrease_duration().work_duration_seconds, 30)

    def test_duration_controls_leave_phase_alone(self):
        state = TimerState(work_duration_seconds=60, break_duration_seconds=30)
        state.toggle_running()
        drain(state)
        state.tick()

        snapshot = state.increase_duration()
        self.assertTrue(snapshot.on_break)
        self.assertEqual(snapshot.remaining_seconds, 120)


class TestRunControls(unittest.TestCase):
    """Test Start/Stop and Reset"""

    def test_toggle(self):
        state = TimerState()
        self.assertTrue(state.toggle_running().running)
        self.assertFalse(state.toggle_running().running)

    def test_toggle_keeps_countdown(self):
        state = TimerState()
        state.toggle_running()
        state.tick()
        snapshot = state.toggle_running()
        self.assertEqual(snapshot.remaining_seconds, 1499)

    def test_reset_from_running_break(self):
        state = TimerState(work_duration_seconds=60, break_duration_seconds=30)
        state.toggle_running()
        drain(state)
        state.tick()
        state.tick()

        snapshot = state.reset()
        self.assertFalse(snapshot.running)
        self.assertFalse(snapshot.on_break)
        self.assertEqual(snapshot.remaining_seconds, 60)

    def test_reset_keeps_adjusted_duration(self):
        state = TimerState()
        state.increase_duration()
        state.increase_duration()
        self.assertEqual(state.reset().remaining_seconds, 1620)

    def test_reset_from_fresh_state(self):
        state = TimerState()
        self.assertEqual(state.reset(), TimerState().snapshot())


class TestConcurrency(unittest.TestCase):
    """Test that concurrent controls and ticks never expose a torn update"""

    def test_concurrent_increases_are_not_lost(self):
        state = TimerState()
        threads = [
            threading.Thread(target=lambda: [state.increase_duration() for _ in range(200)])
            for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        snapshot = state.snapshot()
        self.assertEqual(snapshot.work_duration_seconds, 1500 + 8 * 200 * 60)
        self.assertEqual(snapshot.remaining_seconds, snapshot.work_duration_seconds)

    def test_snapshots_stay_consistent_under_contention(self):
        state = TimerState(work_duration_seconds=120, break_duration_seconds=2)
        state.toggle_running()
        stop = threading.Event()
        violations: list[TimerSnapshot] = []

        def ticker():
            while not stop.is_set():
                state.tick()

        def controller():
            while not stop.is_set():
                state.increase_duration()
                state.decrease_duration()
                state.decrease_duration()
                state.reset()
                state.toggle_running()

        def reader():
            while not stop.is_set():
                snap = state.snapshot()
                if (
                    snap.remaining_seconds < 0
                    or snap.work_duration_seconds < MIN_WORK_DURATION
                    or snap.work_duration_seconds % DURATION_STEP != 0
                    or snap.remaining_seconds
                    > max(snap.work_duration_seconds, snap.break_duration_seconds)
                ):
                    violations.append(snap)

        threads = [threading.Thread(target=fn) for fn in (ticker, ticker, controller, reader)]
        for t in threads:
            t.start()
        stop.wait(0.5)
        stop.set()
        for t in threads:
            t.join()

        self.assertEqual(violations, [])


if __name__ == "__main__":
    unittest.main()
