"""Timing capture for a single benchmark case.

Calls a zero-argument function repeatedly, timing each call with a
monotonic nanosecond clock (``time.perf_counter_ns`` by default), and
reduces the per-call durations to one figure.

Durations are Python ints, so the running total never loses
precision; it is only converted to float for the final average.

Note that the "median" stat is not a statistical median.  It is the
duration of the call at index ``iterations // 2``, and timing stops
as soon as that call returns, so only ``iterations // 2 + 1`` calls
are made.  Reports label this figure "median"; keep the behaviour
as-is so figures stay comparable with earlier runs.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from quickbench.bench.config import DEFAULT_ITERATIONS, StatMethod, validate_iterations

log = logging.getLogger("quickbench")

Clock = Callable[[], int]


def measure(
    fn: Callable[[], object],
    *,
    iterations: int = DEFAULT_ITERATIONS,
    stat: StatMethod | str = StatMethod.MEDIAN,
    clock: Clock = time.perf_counter_ns,
) -> int | float:
    """Measure *fn*'s execution time in nanoseconds.

    Args:
        fn: The function to measure.  Called with no arguments, once
            per iteration.  It is not checked for callability here.
        iterations: Number of iterations to run.  Higher counts
            absorb warm-up effects.
        stat: ``"median"`` (the middle call's duration, see module
            docstring) or ``"average"`` (mean over all calls).
        clock: Monotonic timestamp source returning integer
            nanoseconds.

    Returns:
        An int for the median stat, a float for the average.
    """
    iterations = validate_iterations(iterations)
    method = StatMethod.parse(stat)

    total = 0
    median_index = iterations // 2
    median = 0
    calls = 0

    for i in range(iterations):
        start = clock()
        fn()
        end = clock()
        elapsed = end - start
        total += elapsed
        calls += 1

        if method is StatMethod.MEDIAN and i == median_index:
            median = elapsed
            break

    if method is StatMethod.MEDIAN:
        log.debug("Measured %s: %dns median over %d calls", _name(fn), median, calls)
        return median

    average = total / iterations
    log.debug("Measured %s: %.1fns on average over %d calls", _name(fn), average, calls)
    return average


def _name(fn: object) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
