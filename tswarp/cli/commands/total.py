"""Total pairwise DTW cost of a dataset."""

import sys
import time
from pathlib import Path
from typing import Tuple

import click

from ...core.engine import DTWEngine
from ...distances.pairwise import total_cost
from ...errors import TswarpError
from ...io import read_series_csv
from ...timing import Clock, format_elapsed, measure
from ..common import engine_options, input_options, n_jobs_option


def run_total(input_file: str, engine: DTWEngine, delimiter: str = ",",
              skip_header: bool = False, n_jobs: int = 1, backend: str = "threading",
              progress: bool = False, clock: Clock = time.perf_counter) -> Tuple[float, float]:
    """Load ``input_file`` and return ``(total_cost, elapsed_seconds)``.

    Only the aggregation is timed, not the loading.
    """
    dataset = read_series_csv(input_file, delimiter=delimiter, skip_header=skip_header)
    return measure(
        total_cost, dataset, engine=engine, n_jobs=n_jobs, backend=backend,
        progress=progress, clock=clock,
    )


def report_total(total: float, elapsed: float, time_unit: str) -> None:
    click.echo(format_elapsed(elapsed, time_unit))
    click.echo(f"Total error: {total}")


@click.command("total", help="Sum DTW costs over all pairs of series in a CSV file")
@click.argument("input_file", type=click.Path(path_type=Path))
@engine_options
@input_options
@n_jobs_option
@click.option(
    "--time-unit",
    type=click.Choice(["ms", "s"]),
    default="ms",
    show_default=True,
    help="Unit used to report elapsed time"
)
@click.option("--progress", is_flag=True, help="Show a progress bar over pairs")
def total(input_file: Path, strategy: str, metric: str, delimiter: str,
          skip_header: bool, n_jobs: int, time_unit: str, progress: bool):
    """Sum DTW costs over all pairs of series in a CSV file.

    Each row is ``label,v1,...,vn``. Prints the elapsed time of the
    aggregation and the total cost.

    Examples:

    \b
        tswarp total data/50.csv
        tswarp total data/50.csv --strategy full_matrix --n-jobs -1
    """
    engine = DTWEngine(strategy=strategy, metric=metric)
    try:
        result, elapsed = run_total(
            str(input_file), engine, delimiter=delimiter, skip_header=skip_header,
            n_jobs=n_jobs, progress=progress,
        )
    except TswarpError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    report_total(result, elapsed, time_unit)


def register_total_commands(cli: click.Group) -> None:
    """Register the total-cost command."""
    cli.add_command(total)


def total_main() -> None:
    """Entry point for the standalone ``tswarp-total`` script."""
    total()
