"""Error types raised by the benchmark subsystem.

All errors derive from ``BenchError``, itself a ``ValueError``, so
callers that only care about bad input can catch one type.
"""

from __future__ import annotations

from typing import Any

INVALID_CASES_MESSAGE = (
    'The "compare" function expects the first argument to be a sequence '
    "of callables, with at least 2 cases."
)


class BenchError(ValueError):
    """Base class for invalid benchmark input."""


class InvalidCasesError(BenchError):
    """The cases are not a sequence of at least 2 callables."""

    def __init__(self, message: str = INVALID_CASES_MESSAGE) -> None:
        super().__init__(message)


class UnsupportedStatError(BenchError):
    """The requested stat method is not one of the supported ones."""

    def __init__(self, stat: Any, supported: list[str]) -> None:
        self.stat = stat
        self.supported = supported
        super().__init__(
            f'The stat method provided ("{stat}") is not supported. '
            f"Supported stat methods are: {', '.join(supported)}"
        )


class InvalidIterationsError(BenchError):
    """The iteration count is not a positive integer."""

    def __init__(self, iterations: Any) -> None:
        self.iterations = iterations
        super().__init__(f"Iterations must be a positive integer (got {iterations!r}).")


class ProfileError(BenchError):
    """A benchmark profile is malformed or names a case that cannot be imported."""
