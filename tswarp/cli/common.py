"""Helpers shared by CLI commands."""

import logging

import click

from ..core.engine import Metric, Strategy

STRATEGY_CHOICES = [s.value for s in Strategy]
METRIC_CHOICES = [m.value for m in Metric]


def configure_logging(level: str) -> None:
    """Send library log records to stderr at ``level``."""
    logging.basicConfig(level=getattr(logging, level.upper()), format="%(message)s")
    logging.getLogger("tswarp").setLevel(level.upper())


def engine_options(func):
    """Attach --strategy and --metric options to a command."""
    func = click.option(
        "--metric",
        type=click.Choice(METRIC_CHOICES),
        default=Metric.SQUARED.value,
        show_default=True,
        help="Report accumulated squared error, or its square root"
    )(func)
    func = click.option(
        "--strategy",
        type=click.Choice(STRATEGY_CHOICES),
        default=Strategy.ROLLING_ROW.value,
        show_default=True,
        help="Cost buffer layout: two rolling rows or the full matrix"
    )(func)
    return func


def input_options(func):
    """Attach --delimiter and --skip-header options to a command."""
    func = click.option(
        "--skip-header",
        is_flag=True,
        help="Ignore the first row of the input file"
    )(func)
    func = click.option(
        "--delimiter",
        default=",",
        show_default=True,
        help="Field separator of the input file"
    )(func)
    return func


def _check_n_jobs(ctx, param, value):
    if value == 0:
        raise click.BadParameter("must be non-zero (use -1 for all cores)")
    return value


def n_jobs_option(func):
    return click.option(
        "--n-jobs",
        type=int,
        default=1,
        show_default=True,
        callback=_check_n_jobs,
        help="Parallel workers for pair alignment (-1 = all cores)"
    )(func)
