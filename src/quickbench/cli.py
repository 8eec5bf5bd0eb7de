"""Command-line interface for quickbench.

Subcommands:
    quickbench run       Compare two or more functions and rank them
    quickbench measure   Time a single function
"""

from __future__ import annotations

import functools
import json
from pathlib import Path

import click

from quickbench import __version__
from quickbench.bench.config import (
    BenchConfig,
    StatMethod,
    cases_from_profile,
    config_from_profile,
    load_profile,
    resolve_case,
)
from quickbench.bench.errors import BenchError, ProfileError
from quickbench.logging import get_logger, setup_logging

log = get_logger("cli")

_stat_option = click.option(
    "--stat",
    type=click.Choice(StatMethod.names()),
    default=None,
    help="Stat method: median or average (default: median).",
)
_iterations_option = click.option(
    "--iterations",
    type=int,
    default=None,
    help="Iterations per case (default: 100000).",
)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """quickbench — time functions and rank them by speed."""


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


@main.command()
@click.argument("cases", nargs=-1)
@click.option(
    "--profile",
    "profile_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML profile listing cases and options.",
)
@_iterations_option
@_stat_option
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write a DEBUG log to this file.",
)
def run(
    cases: tuple[str, ...],
    profile_path: Path | None,
    iterations: int | None,
    stat: str | None,
    as_json: bool,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    """Compare the execution time of two or more functions.

    Each CASE is a 'module:function' path to a zero-argument callable.
    Cases listed in --profile run first, followed by CASE arguments.

    \b
    Examples:
        quickbench run mypkg.impls:fast mypkg.impls:slow --iterations 5000
        quickbench run --profile bench.yaml --stat average
    """
    from quickbench.bench.compare import compare, run_cases
    from quickbench.bench.display import results_to_json
    from quickbench.formatting import plain_text

    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    case_paths: list[str] = []
    cli_overrides = {"iterations": iterations, "stat": stat}
    try:
        if profile_path is not None:
            profile_data = load_profile(profile_path)
            config = config_from_profile(profile_data, cli_overrides=cli_overrides)
            case_paths.extend(cases_from_profile(profile_data))
        else:
            config = BenchConfig.from_options(iterations=iterations, stat=stat)
        case_paths.extend(cases)
        callables = [resolve_case(path) for path in case_paths]
    except BenchError as exc:
        raise click.UsageError(str(exc)) from exc

    log.debug("Running %d cases with %s", len(case_paths), config.to_dict())

    try:
        if as_json:
            results = run_cases(
                callables,
                config,
                echo=functools.partial(click.echo, err=True),
                styler=plain_text,
            )
            click.echo(json.dumps(results_to_json(results, case_paths), indent=2))
        else:
            compare(callables, config=config)
    except BenchError as exc:
        raise click.ClickException(str(exc)) from exc


# ---------------------------------------------------------------------------
# measure
# ---------------------------------------------------------------------------


@main.command("measure")
@click.argument("case")
@_iterations_option
@_stat_option
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
def measure_command(
    case: str,
    iterations: int | None,
    stat: str | None,
    verbose: bool,
) -> None:
    """Time a single function and print its duration.

    CASE is a 'module:function' path to a zero-argument callable.
    """
    from quickbench.bench.timing import measure
    from quickbench.formatting import format_nanoseconds

    setup_logging(verbose=verbose)

    try:
        config = BenchConfig.from_options(iterations=iterations, stat=stat)
        fn = resolve_case(case)
        if not callable(fn):
            raise ProfileError(f"Case {case!r} is not callable")
    except BenchError as exc:
        raise click.UsageError(str(exc)) from exc

    time_ns = measure(fn, iterations=config.iterations, stat=config.stat)
    click.echo(f"{format_nanoseconds(time_ns)} {config.stat.label}")
