"""Pairwise DTW cost matrix export."""

import sys
from pathlib import Path

import click
import numpy as np

from ...core.engine import DTWEngine
from ...distances.pairwise import pairwise_cost_matrix
from ...errors import TswarpError
from ...io import read_series_csv
from ..common import engine_options, input_options, n_jobs_option


def register_matrix_commands(cli: click.Group) -> None:
    """Register matrix-related commands."""
    @cli.command("matrix", help="Save the pairwise DTW cost matrix as .npy")
    @click.argument("input_file", type=click.Path(path_type=Path))
    @click.option(
        "--output",
        type=click.Path(path_type=Path),
        required=True,
        help="Destination .npy file"
    )
    @engine_options
    @input_options
    @n_jobs_option
    def matrix(input_file: Path, output: Path, strategy: str, metric: str,
               delimiter: str, skip_header: bool, n_jobs: int):
        """Compute the symmetric cost matrix and save it with numpy."""
        engine = DTWEngine(strategy=strategy, metric=metric)
        try:
            dataset = read_series_csv(input_file, delimiter=delimiter, skip_header=skip_header)
            D = pairwise_cost_matrix(dataset, engine=engine, n_jobs=n_jobs)
        except TswarpError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        output.parent.mkdir(parents=True, exist_ok=True)
        np.save(output, D)
        click.echo(f"Saved {D.shape[0]}x{D.shape[1]} cost matrix to {output}")
