"""
sslh socket-unit generator — CLI entrypoint.

Usage:
    systemd-sslh-generator                      # print the unit to stdout
    systemd-sslh-generator NORMAL EARLY LATE    # write NORMAL/sslh.socket

The three-directory form is how the service manager calls generators;
only the first directory is used.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from sslhgen import __version__
from sslhgen.core.observability.logging_config import setup_logging

USAGE_MESSAGE = "This program takes three or no arguments."


@click.command()
@click.version_option(version=__version__, prog_name="systemd-sslh-generator")
@click.argument("directories", metavar="[NORMAL_DIR EARLY_DIR LATE_DIR]", nargs=-1)
@click.option(
    "--config",
    "-c",
    "config_paths",
    multiple=True,
    envvar="SSLH_GENERATOR_CONFIG",
    type=click.Path(),
    help="sslh config to read; repeat to try several in order, "
    "unopenable paths are skipped (default: /etc/sslh.cfg, /etc/sslh/sslh.cfg).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
def cli(
    directories: tuple[str, ...],
    config_paths: tuple[str, ...],
    verbose: bool,
    debug: bool,
) -> None:
    """Generate the sslh socket unit from the sslh configuration.

    Without arguments the unit is printed to stdout. With the three
    generator directories, sslh.socket is written into the first one.
    """
    if len(directories) not in (0, 3):
        click.echo(USAGE_MESSAGE)
        sys.exit(2)

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = os.environ.get("SSLH_GENERATOR_LOG_LEVEL", "WARNING")

    from sslhgen.core.models.settings import GeneratorSettings
    from sslhgen.core.use_cases.generate import run_generate

    settings = GeneratorSettings()
    if config_paths:
        settings = settings.model_copy(update={"config_candidates": list(config_paths)})

    setup_logging(level=level, program=settings.generator_name)

    output_dir = Path(directories[0]) if directories and directories[0] else None

    result = run_generate(output_dir=output_dir, settings=settings)

    if result.error:
        click.secho(f"{settings.generator_name}: {result.error}", fg="red", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
