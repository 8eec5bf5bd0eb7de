"""Shared text formatting helpers for quickbench.

Provides the styling function used to colour report text, and the
formatters for durations and percentage differences.
"""

from __future__ import annotations

import math
from typing import Any, Callable

import click

Styler = Callable[[str, str], str]

_STYLES: dict[str, dict[str, Any]] = {
    "duration": {"fg": "cyan"},
    "warning": {"fg": "yellow", "bold": True},
}


def style_text(text: str, style: str) -> str:
    """Return *text* wrapped in the ANSI styling registered for *style*.

    Unknown style tags return *text* unchanged.  Styling is stripped
    again by ``click.echo`` when the output is not a terminal.
    """
    attrs = _STYLES.get(style)
    if not attrs:
        return text
    return click.style(text, **attrs)


def plain_text(text: str, style: str) -> str:
    """A styler that never styles, for machine-readable output."""
    return text


def format_nanoseconds(value: int | float) -> str:
    """Format a duration as ``'<n>ns'``.

    Integral floats print without a ``.0`` suffix: ``1500.0`` gives
    ``'1500ns'`` and ``1500.25`` gives ``'1500.25ns'``.
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}ns"


def format_percentage_diff(value: float) -> str:
    """Format a percentage rounded to at most 2 decimals.

    Trailing zeros are dropped: ``15.0`` gives ``'15'``, ``15.5`` gives
    ``'15.5'`` and ``15.257`` gives ``'15.26'``.  Values that round to
    zero give ``'0'``.
    """
    if math.isinf(value):
        return "inf"
    text = f"{value:.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text
