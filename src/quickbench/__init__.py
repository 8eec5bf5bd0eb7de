"""quickbench: time candidate functions and rank them by speed."""

from __future__ import annotations

from quickbench.bench.compare import CaseResult, compare
from quickbench.bench.config import BenchConfig, StatMethod
from quickbench.bench.errors import (
    BenchError,
    InvalidCasesError,
    InvalidIterationsError,
    ProfileError,
    UnsupportedStatError,
)
from quickbench.bench.timing import measure

__version__ = "0.1.0"

__all__ = [
    "BenchConfig",
    "BenchError",
    "CaseResult",
    "InvalidCasesError",
    "InvalidIterationsError",
    "ProfileError",
    "StatMethod",
    "UnsupportedStatError",
    "__version__",
    "compare",
    "measure",
]
