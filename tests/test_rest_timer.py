import datetime
import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from rest_timer import RestTimer, WorkoutTimer, format_clock, format_elapsed


class ManualClock:
    def __init__(self) -> None:
        self.now = datetime.datetime(2024, 5, 1, 18, 0, tzinfo=datetime.timezone.utc)

    def __call__(self) -> datetime.datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += datetime.timedelta(seconds=seconds)


class FormattingTestCase(unittest.TestCase):
    def test_format_clock(self) -> None:
        self.assertEqual(format_clock(90), "1:30")
        self.assertEqual(format_clock(5), "0:05")
        self.assertEqual(format_clock(-3), "0:00")

    def test_format_elapsed(self) -> None:
        self.assertEqual(format_elapsed(59), "0:59")
        self.assertEqual(format_elapsed(3599), "59:59")
        self.assertEqual(format_elapsed(3600), "1:00:00")
        self.assertEqual(format_elapsed(3725), "1:02:05")


class RestTimerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = ManualClock()
        self.timer = RestTimer(clock=self.clock)

    def test_default_duration(self) -> None:
        self.timer.start()
        self.assertEqual(self.timer.remaining(), 90)
        self.assertEqual(self.timer.formatted_time(), "1:30")

    def test_counts_down_in_whole_seconds(self) -> None:
        self.timer.start(60)
        self.clock.advance(10.6)
        self.assertEqual(self.timer.remaining(), 50)
        self.assertTrue(self.timer.is_resting)

    def test_expires(self) -> None:
        self.timer.start(30)
        self.clock.advance(45)
        self.assertEqual(self.timer.remaining(), 0)
        self.assertFalse(self.timer.is_resting)
        self.assertIsNone(self.timer.started_at)

    def test_skip(self) -> None:
        self.timer.start()
        self.timer.skip()
        self.assertEqual(self.timer.remaining(), 0)

    def test_restart_resets(self) -> None:
        self.timer.start(60)
        self.clock.advance(50)
        self.timer.start(60)
        self.assertEqual(self.timer.remaining(), 60)

    def test_configured_default(self) -> None:
        timer = RestTimer(clock=self.clock, default_duration=120)
        timer.start()
        self.assertEqual(timer.remaining(), 120)


class WorkoutTimerTestCase(unittest.TestCase):
    def test_elapsed(self) -> None:
        clock = ManualClock()
        timer = WorkoutTimer(clock.now, clock)
        clock.advance(3725.9)
        self.assertEqual(timer.elapsed(), 3725)
        self.assertEqual(timer.formatted_time(), "1:02:05")


if __name__ == "__main__":
    unittest.main()
