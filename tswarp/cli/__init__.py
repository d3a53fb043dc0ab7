"""
Command-line interface for tswarp.

This module provides the main entry point for the tswarp CLI.
"""

import click
import importlib
import pkgutil
from pathlib import Path

from .common import configure_logging


# Create the main Click group
@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="tswarp")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug output)")
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    """Pairwise Dynamic Time Warping costs for labeled time series."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        configure_logging("DEBUG" if verbose > 1 else "INFO")


# Dynamically load all command modules
def register_commands() -> None:
    """Dynamically discover and register all command modules."""
    commands_pkg = Path(__file__).parent / "commands"

    for _, module_name, _ in pkgutil.iter_modules([str(commands_pkg)]):
        module = importlib.import_module(f"tswarp.cli.commands.{module_name}")

        # Look for register_*_commands functions and call them
        for name, func in module.__dict__.items():
            if name.startswith("register_") and name.endswith("_commands"):
                func(cli)


register_commands()


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})
