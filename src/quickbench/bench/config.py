"""Benchmark configuration and profile loading.

Handles:
- The stat methods a measurement can be reduced with.
- The immutable per-invocation configuration (iterations + stat).
- Loading benchmark profiles from YAML files.
- Resolving ``module:attr`` case paths to callables.
"""

from __future__ import annotations

import enum
import importlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from quickbench.bench.errors import (
    InvalidIterationsError,
    ProfileError,
    UnsupportedStatError,
)

log = logging.getLogger("quickbench")

DEFAULT_ITERATIONS = 100000
MIN_RECOMMENDED_ITERATIONS = 50


# ---------------------------------------------------------------------------
# Stat methods
# ---------------------------------------------------------------------------


class StatMethod(str, enum.Enum):
    """How the per-iteration durations are reduced to one figure."""

    MEDIAN = "median"
    AVERAGE = "average"

    @classmethod
    def names(cls) -> list[str]:
        return [m.value for m in cls]

    @classmethod
    def parse(cls, value: Any) -> StatMethod:
        """Return the member for *value* (a member or its string value).

        Raises:
            UnsupportedStatError: If *value* names no stat method.
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if value == member.value:
                return member
        raise UnsupportedStatError(value, cls.names())

    @property
    def label(self) -> str:
        """The wording used for this method in reports."""
        return "on average" if self is StatMethod.AVERAGE else "median"


# ---------------------------------------------------------------------------
# BenchConfig
# ---------------------------------------------------------------------------


def validate_iterations(iterations: Any) -> int:
    """Return *iterations* if it is a positive int, else raise."""
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
        raise InvalidIterationsError(iterations)
    return iterations


@dataclass(frozen=True)
class BenchConfig:
    """Settings shared by every case of one comparison."""

    iterations: int = DEFAULT_ITERATIONS
    stat: StatMethod = StatMethod.MEDIAN

    def __post_init__(self) -> None:
        validate_iterations(self.iterations)
        # Frozen, so normalise a string stat through object.__setattr__.
        object.__setattr__(self, "stat", StatMethod.parse(self.stat))

    @classmethod
    def from_options(
        cls,
        iterations: int | None = None,
        stat: StatMethod | str | None = None,
    ) -> BenchConfig:
        """Build a config, filling in defaults for options left as None."""
        return cls(
            iterations=DEFAULT_ITERATIONS if iterations is None else iterations,
            stat=StatMethod.MEDIAN if stat is None else stat,
        )

    @property
    def low_iterations(self) -> bool:
        """True if there are too few iterations for a trustworthy figure."""
        return self.iterations < MIN_RECOMMENDED_ITERATIONS

    def to_dict(self) -> dict[str, Any]:
        return {"iterations": self.iterations, "stat": self.stat.value}


# ---------------------------------------------------------------------------
# YAML profile loading
# ---------------------------------------------------------------------------


def load_profile(profile_path: Path) -> dict[str, Any]:
    """Load a benchmark profile from a YAML file.

    Profile format::

        iterations: 20000
        stat: average
        cases:
          - mypkg.impls:fast_version
          - mypkg.impls:slow_version

    Returns:
        The parsed YAML as a dict.

    Raises:
        FileNotFoundError: If *profile_path* does not exist.
        ProfileError: If the file is not valid YAML or not a mapping.
    """
    import yaml

    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_path}")

    try:
        data = yaml.safe_load(profile_path.read_text())
    except yaml.YAMLError as exc:
        raise ProfileError(f"Invalid YAML in profile {profile_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ProfileError(f"Profile must be a YAML mapping, got {type(data).__name__}")

    log.debug("Loaded profile %s", profile_path)
    return data


def config_from_profile(
    profile_data: dict[str, Any],
    *,
    cli_overrides: dict[str, Any] | None = None,
) -> BenchConfig:
    """Build a BenchConfig from a parsed profile.

    CLI overrides (``iterations``, ``stat``) take precedence over
    profile values when they are not None.
    """
    cli = cli_overrides or {}
    iterations = cli.get("iterations")
    if iterations is None:
        iterations = profile_data.get("iterations")
    stat = cli.get("stat")
    if stat is None:
        stat = profile_data.get("stat")
    return BenchConfig.from_options(iterations=iterations, stat=stat)


def cases_from_profile(profile_data: dict[str, Any]) -> list[str]:
    """Return the case import paths listed in a profile."""
    cases = profile_data.get("cases", [])
    if cases is None:
        return []
    if not isinstance(cases, list) or not all(isinstance(c, str) for c in cases):
        raise ProfileError("Profile 'cases' must be a list of 'module:function' strings")
    return list(cases)


def resolve_case(path: str) -> Any:
    """Import the object named by a ``module:attr`` path.

    The attribute part may be dotted (``pkg.mod:Class.method``).

    Raises:
        ProfileError: If the path is malformed or cannot be imported.
    """
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        raise ProfileError(f"Invalid case path {path!r}, expected 'module:function'")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ProfileError(f"Cannot import module {module_name!r} for case {path!r}") from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ProfileError(f"Case {path!r} not found: no attribute {part!r}") from exc
    return obj
