"""YAML-based run commands."""

import sys
from pathlib import Path

import click

from ...config import RunConfig
from ...errors import TswarpError
from ..common import configure_logging
from .total import report_total, run_total


def register_pipeline_commands(cli: click.Group) -> None:
    """Register pipeline-related commands."""
    @cli.command("run", help="Run a total-cost computation from YAML configuration")
    @click.argument("config", type=click.Path(exists=True, path_type=Path))
    @click.option(
        "--validate-only",
        is_flag=True,
        help="Only validate configuration, don't compute anything"
    )
    @click.pass_context
    def run(ctx: click.Context, config: Path, validate_only: bool):
        """Run a total-cost computation from a YAML configuration file.

        Examples:

        \b
            tswarp run configs/example.yaml
            tswarp run configs/example.yaml --validate-only
        """
        try:
            cfg = RunConfig.from_yaml(config)
        except TswarpError as e:
            click.echo(f"Configuration error: {e}", err=True)
            sys.exit(1)

        if validate_only:
            click.echo(f"Configuration valid: {config}")
            click.echo(f"  Input: {cfg.input.path}")
            click.echo(f"  Engine: strategy={cfg.engine.strategy}, metric={cfg.engine.metric}")
            click.echo(f"  Parallel: n_jobs={cfg.parallel.n_jobs}, backend={cfg.parallel.backend}")
            return

        if not (ctx.obj or {}).get("verbose"):
            configure_logging(cfg.logging.level)

        try:
            result, elapsed = run_total(
                cfg.input.path,
                cfg.build_engine(),
                delimiter=cfg.input.delimiter,
                skip_header=cfg.input.skip_header,
                n_jobs=cfg.parallel.n_jobs,
                backend=cfg.parallel.backend,
                progress=cfg.parallel.progress,
            )
        except TswarpError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        report_total(result, elapsed, cfg.report.time_unit)
