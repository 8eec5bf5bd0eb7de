"""Benchmark comparison across cases.

Validates the cases, measures each one in input order with a shared
configuration, and ranks the results from fastest to slowest.  Cases
always run one after another, never in parallel, so they do not
contend for the CPU while being timed.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable

import click

from quickbench.bench.config import DEFAULT_ITERATIONS, BenchConfig, StatMethod
from quickbench.bench.errors import InvalidCasesError
from quickbench.bench.timing import Clock, measure
from quickbench.formatting import Styler, style_text

log = logging.getLogger("quickbench")

Echo = Callable[[str], Any]


# ---------------------------------------------------------------------------
# Per-case result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CaseResult:
    """Measured time of one case, identified by its 1-based input position."""

    index: int
    time: int | float

    def to_dict(self) -> dict[str, int | float]:
        return {"index": self.index, "time": self.time}


def percentage_diff(fastest: int | float, time_ns: int | float) -> float:
    """How much slower *time_ns* is than *fastest*, in percent.

    A zero baseline gives 0.0 for another zero time and infinity
    otherwise.
    """
    if fastest == 0:
        return 0.0 if time_ns == 0 else math.inf
    return (float(time_ns) - float(fastest)) / float(fastest) * 100


def rank(results: list[CaseResult]) -> list[CaseResult]:
    """Sort results fastest first.  Equal times keep their input order."""
    return sorted(results, key=lambda r: r.time)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_cases(cases: Any) -> None:
    """Check that *cases* is a sequence of at least 2 items.

    The items themselves are checked one at a time while measuring.
    """
    if (
        not isinstance(cases, Sequence)
        or isinstance(cases, (str, bytes, bytearray))
        or len(cases) < 2
    ):
        raise InvalidCasesError()


def format_advisory(styler: Styler = style_text) -> str:
    """The warning shown when too few iterations were requested."""
    return styler(
        "Iteration amount provided is less than 50. To get more accurate "
        "results, it's recommended to iterate at least 50 times",
        "warning",
    )


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


def run_cases(
    cases: Sequence[Callable[[], object]],
    config: BenchConfig,
    *,
    clock: Clock = time.perf_counter_ns,
    echo: Echo = click.echo,
    styler: Styler = style_text,
) -> list[CaseResult]:
    """Measure every case and return the results fastest first.

    Raises:
        InvalidCasesError: If *cases* is not a sequence of at least 2
            callables.  A non-callable case aborts the run when it is
            reached, before anything is reported.
    """
    validate_cases(cases)

    if config.low_iterations:
        echo(format_advisory(styler))
        echo("")

    results: list[CaseResult] = []
    for position, case in enumerate(cases):
        if not callable(case):
            log.debug("Case %d is not callable: %r", position + 1, case)
            raise InvalidCasesError()
        log.debug("Measuring case %d of %d", position + 1, len(cases))
        time_ns = measure(case, iterations=config.iterations, stat=config.stat, clock=clock)
        results.append(CaseResult(index=position + 1, time=time_ns))

    return rank(results)


def compare(
    cases: Sequence[Callable[[], object]],
    *,
    iterations: int = DEFAULT_ITERATIONS,
    stat: StatMethod | str = StatMethod.MEDIAN,
    config: BenchConfig | None = None,
    clock: Clock = time.perf_counter_ns,
    echo: Echo = click.echo,
    styler: Styler = style_text,
) -> list[CaseResult]:
    """Compare several functions' execution time and print the ranking.

    Args:
        cases: The functions to compare, each called with no arguments.
        iterations: Iterations per case.  Ignored if *config* is given.
        stat: ``"median"`` or ``"average"``.  Ignored if *config* is given.
        config: A prepared BenchConfig.
        clock: Monotonic nanosecond timestamp source.
        echo: Sink receiving each output line.
        styler: Function ``(text, style) -> str`` colouring report text.

    Returns:
        The results, fastest first.

    Raises:
        InvalidCasesError: Bad *cases*.
        UnsupportedStatError: Unknown *stat*.
        InvalidIterationsError: *iterations* is not a positive int.
    """
    from quickbench.bench.display import print_report

    validate_cases(cases)
    if config is None:
        config = BenchConfig(iterations=iterations, stat=stat)  # type: ignore[arg-type]

    results = run_cases(cases, config, clock=clock, echo=echo, styler=styler)
    print_report(results, config.stat, echo=echo, styler=styler)
    return results
