"""Tests for quickbench.bench.timing — measuring a single case."""

from __future__ import annotations

import unittest

from bench_test_helpers import CountingCase, FakeClock

from quickbench.bench.config import StatMethod
from quickbench.bench.errors import InvalidIterationsError, UnsupportedStatError
from quickbench.bench.timing import measure


# ---------------------------------------------------------------------------
# Median stat
# ---------------------------------------------------------------------------


class TestMeasureMedian(unittest.TestCase):
    """The median stat times the middle call and stops there."""

    def test_call_count_even_iterations(self) -> None:
        case = CountingCase()
        measure(case, iterations=10, clock=FakeClock([5]))
        self.assertEqual(case.calls, 6)

    def test_call_count_odd_iterations(self) -> None:
        case = CountingCase()
        measure(case, iterations=7, stat="median", clock=FakeClock([5]))
        self.assertEqual(case.calls, 4)

    def test_single_iteration(self) -> None:
        case = CountingCase()
        result = measure(case, iterations=1, clock=FakeClock([42]))
        self.assertEqual(case.calls, 1)
        self.assertEqual(result, 42)

    def test_returns_middle_call_duration(self) -> None:
        """The result is the duration of call iterations // 2, not a sorted median."""
        durations = [100, 90, 80, 70, 60, 50, 40, 30, 20, 10]
        result = measure(CountingCase(), iterations=10, clock=FakeClock(durations))
        # A true median of the samples would be 55.
        self.assertEqual(result, 50)

    def test_result_is_int(self) -> None:
        result = measure(CountingCase(), iterations=4, clock=FakeClock([3, 4, 5]))
        self.assertIsInstance(result, int)
        self.assertEqual(result, 5)

    def test_large_durations_keep_precision(self) -> None:
        big = 2**64 + 1
        result = measure(CountingCase(), iterations=3, clock=FakeClock([big]))
        self.assertEqual(result, big)

    def test_default_stat_is_median(self) -> None:
        case = CountingCase()
        measure(case, iterations=100, clock=FakeClock([1]))
        self.assertEqual(case.calls, 51)

    def test_accepts_enum_member(self) -> None:
        case = CountingCase()
        measure(case, iterations=4, stat=StatMethod.MEDIAN, clock=FakeClock([1]))
        self.assertEqual(case.calls, 3)


# ---------------------------------------------------------------------------
# Average stat
# ---------------------------------------------------------------------------


class TestMeasureAverage(unittest.TestCase):
    """The average stat runs every iteration."""

    def test_call_count(self) -> None:
        case = CountingCase()
        measure(case, iterations=9, stat="average", clock=FakeClock([5]))
        self.assertEqual(case.calls, 9)

    def test_mean_of_durations(self) -> None:
        result = measure(
            CountingCase(),
            iterations=4,
            stat="average",
            clock=FakeClock([10, 20, 30, 45]),
        )
        self.assertIsInstance(result, float)
        self.assertAlmostEqual(result, 26.25)

    def test_large_total(self) -> None:
        """Summing beyond float precision should not lose nanoseconds."""
        durations = [2**53, 1, 1, 2]
        result = measure(
            CountingCase(),
            iterations=4,
            stat=StatMethod.AVERAGE,
            clock=FakeClock(durations),
        )
        self.assertEqual(result, (2**53 + 4) / 4)


# ---------------------------------------------------------------------------
# Input handling
# ---------------------------------------------------------------------------


class TestMeasureInputs(unittest.TestCase):
    def test_unknown_stat(self) -> None:
        with self.assertRaises(UnsupportedStatError) as ctx:
            measure(CountingCase(), iterations=2, stat="mode", clock=FakeClock([1]))
        self.assertIn('"mode"', str(ctx.exception))

    def test_zero_iterations(self) -> None:
        with self.assertRaises(InvalidIterationsError):
            measure(CountingCase(), iterations=0)

    def test_non_int_iterations(self) -> None:
        with self.assertRaises(InvalidIterationsError):
            measure(CountingCase(), iterations=2.5)  # type: ignore[arg-type]

    def test_not_callable_propagates(self) -> None:
        with self.assertRaises(TypeError):
            measure("not a function", iterations=2)  # type: ignore[arg-type]

    def test_case_exception_propagates(self) -> None:
        def boom() -> None:
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            measure(boom, iterations=2)

    def test_real_clock(self) -> None:
        """With the default clock the result is a non-negative int."""
        result = measure(lambda: None, iterations=20)
        self.assertIsInstance(result, int)
        self.assertGreaterEqual(result, 0)


if __name__ == "__main__":
    unittest.main()
