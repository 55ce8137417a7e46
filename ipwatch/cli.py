#!/usr/bin/env python3
"""ipwatch CLI - watch network interfaces and report address changes."""

import click
from pydantic import ValidationError

from ipwatch.config import (
    DEFAULT_INTERVAL,
    DEFAULT_METHOD,
    DEFAULT_OUTPUT,
    LOG_LEVEL_ENV,
    WatchConfig,
)
from ipwatch.utils.env import get_env
from ipwatch.utils.logger import Logger

CONTEXT_SETTINGS = {"help_option_names": ["-help", "--help", "-h"]}


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.option(
    "--output",
    "-output",
    default=DEFAULT_OUTPUT,
    show_default=True,
    help="Save the system's IP address changes to this file in JSON format.",
)
@click.option(
    "--filter",
    "-filter",
    "name_filter",
    default="",
    help="Only include the interface with this name (case-insensitive).",
)
@click.option(
    "--restful-url",
    "-restful-url",
    default="",
    help="Send IP address changes as JSON to this RESTful API.",
)
@click.option(
    "--restful-method",
    "-restful-method",
    default=DEFAULT_METHOD,
    show_default=True,
    help="HTTP method used to call the RESTful API.",
)
@click.option(
    "--restful-header",
    "-restful-header",
    default="",
    help='Extra header for the RESTful API call, example: "key:value".',
)
@click.option(
    "--interval",
    "-interval",
    type=click.IntRange(min=0),
    default=DEFAULT_INTERVAL,
    show_default=True,
    help="Seconds between each check.",
)
@click.option("--once", is_flag=True, help="Run a single check and exit.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def ipwatch(
    ctx,
    output,
    name_filter,
    restful_url,
    restful_method,
    restful_header,
    interval,
    once,
    verbose,
):
    """Watch network interfaces and record their addresses when they change."""
    if not Logger.is_configured():
        level = get_env(LOG_LEVEL_ENV, default="INFO")
        try:
            Logger.configure(level=level)
        except ValueError as e:
            raise click.UsageError(f"invalid {LOG_LEVEL_ENV}={level!r}") from e
    if verbose:
        Logger.set_level("DEBUG")

    if ctx.invoked_subcommand is not None:
        return

    try:
        config = WatchConfig(
            output=output,
            filter=name_filter,
            restful_url=restful_url,
            restful_method=restful_method,
            restful_header=restful_header,
            interval=interval,
        )
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    from ipwatch.commands.watch_cmd import run_watch

    run_watch(config, once=once)


@ipwatch.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display ipwatch version information."""
    from ipwatch.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    ipwatch()
