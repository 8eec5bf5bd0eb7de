"""Terminal display formatting for comparison results.

Each result becomes one line: the case number, its time, the stat
method and how much slower it is than the fastest case.  Colour is
applied through an injected styler so the same lines can be rendered
plain.
"""

from __future__ import annotations

from typing import Any

import click

from quickbench.bench.compare import CaseResult, Echo, percentage_diff
from quickbench.bench.config import StatMethod
from quickbench.formatting import (
    Styler,
    format_nanoseconds,
    format_percentage_diff,
    style_text,
)

FASTEST_LABEL = "Fastest \U0001f3c6"
REPORT_HEADER = "Here are your results:"


def format_result_line(
    result: CaseResult,
    fastest: int | float,
    stat: StatMethod,
    styler: Styler = style_text,
) -> str:
    """Format one ranked result, e.g. ``'Case 2 - 934ns median (15.02% slower)'``."""
    diff = format_percentage_diff(percentage_diff(fastest, result.time))
    label = FASTEST_LABEL if diff == "0" else f"{diff}% slower"
    duration = styler(format_nanoseconds(result.time), "duration")
    return f"Case {result.index} - {duration} {stat.label} ({label})"


def format_report_lines(
    results: list[CaseResult],
    stat: StatMethod | str,
    styler: Styler = style_text,
) -> list[str]:
    """Format ranked results, fastest first, one line per case."""
    if not results:
        return []
    method = StatMethod.parse(stat)
    fastest = results[0].time
    return [format_result_line(r, fastest, method, styler) for r in results]


def print_report(
    results: list[CaseResult],
    stat: StatMethod | str,
    *,
    echo: Echo = click.echo,
    styler: Styler = style_text,
) -> None:
    """Write the header followed by one line per ranked result."""
    echo(REPORT_HEADER)
    echo("")
    for line in format_report_lines(results, stat, styler):
        echo(line)


def results_to_json(
    results: list[CaseResult],
    case_names: list[str] | None = None,
) -> list[dict[str, Any]]:
    """Serialize ranked results with their percentage difference.

    *case_names* is indexed by input position (``index - 1``).
    """
    if not results:
        return []
    fastest = results[0].time
    rows: list[dict[str, Any]] = []
    for r in results:
        row: dict[str, Any] = r.to_dict()
        if case_names is not None:
            row["case"] = case_names[r.index - 1]
        row["percentage_diff"] = format_percentage_diff(percentage_diff(fastest, r.time))
        rows.append(row)
    return rows
