"""Command-line interface for pointlink.

Provides one command per clustering variant.
"""

import importlib.metadata
import sys
from pathlib import Path

import click

from pointlink.clustering import DEFAULT_BUDGET
from pointlink.engine import RunConfig, RunResult, Variant, run

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("pointlink")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


def _format_duration(seconds: float) -> str:
    if seconds >= 1.0:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds * 1e6:.3f}µs"


def _execute(input_path: str, config: RunConfig, verbose: bool) -> None:
    """Run ``config`` on INPUT_PATH and print the harness report."""
    if verbose:
        click.echo(f"Processing: {input_path}", err=True)
        click.echo(f"  Variant: {config.variant}", err=True)
        if config.variant is Variant.CLUSTERS:
            click.echo(f"  Budget: {config.budget}", err=True)
        click.echo(f"  Passes: {config.times}", err=True)
        if config.log_path:
            click.echo(f"  Audit log: {config.log_path}", err=True)

    result = run(Path(input_path), config, command_argv=sys.argv)

    if not result.success:
        click.secho(f"✗ Error: {result.error_message}", fg="red", err=True)
        sys.exit(1)

    _report(result, verbose)


def _report(result: RunResult, verbose: bool) -> None:
    value = "n/a" if result.value is None else str(result.value)

    click.echo(f"Variant: {result.variant}, Points: {result.point_count}")
    click.echo(f"Result: {value}")
    click.echo("----------")
    click.echo(f"Total duration: {_format_duration(result.total_seconds)}")
    click.echo(f"IO duration:    {_format_duration(result.io_seconds)}")
    click.echo(f"Compute (avg):  {_format_duration(result.compute_seconds_avg)}")

    if verbose:
        click.echo("\nDetails:", err=True)
        for key, item in result.details.items():
            click.echo(f"  {key}: {item}", err=True)


_times_option = click.option(
    "--times",
    "-t",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Repeat the computation and report the average compute time",
)
_log_option = click.option(
    "--log",
    "log_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Append structured JSONL audit events to this file",
)
_verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)


@click.group()
@click.version_option(version=__version__, prog_name="pointlink")
def cli() -> None:
    """Nearest-pair clustering of 3-D integer point clouds.

    Use 'pointlink COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--budget",
    "-b",
    type=click.IntRange(min=0),
    default=DEFAULT_BUDGET,
    show_default=True,
    help="Number of closest pairs to merge",
)
@_times_option
@_log_option
@_verbose_option
def clusters(
    input_path: str,
    budget: int,
    times: int,
    log_path: Path | None,
    verbose: bool,
) -> None:
    """Merge the closest pairs and multiply the three largest cluster sizes.

    INPUT_PATH is a text file with one ``x,y,z`` point per line.

    Examples
    --------
        pointlink clusters points.txt
        pointlink clusters points.txt --budget 10 --times 5
    """
    config = RunConfig(variant=Variant.CLUSTERS, budget=budget, times=times, log_path=log_path)
    _execute(input_path, config, verbose)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@_times_option
@_log_option
@_verbose_option
def connect(
    input_path: str,
    times: int,
    log_path: Path | None,
    verbose: bool,
) -> None:
    """Merge closest pairs until all points connect; multiply the last pair's x values.

    INPUT_PATH is a text file with one ``x,y,z`` point per line. Prints
    ``Result: n/a`` when there are fewer than two points.

    Examples
    --------
        pointlink connect points.txt
        pointlink connect points.txt --log out/events.jsonl
    """
    config = RunConfig(variant=Variant.CONNECT, times=times, log_path=log_path)
    _execute(input_path, config, verbose)


if __name__ == "__main__":
    cli()
