"""Directory scanning command."""

from __future__ import annotations
import click
import logging

from .helpers import cli
from ..services.scan_service import run_scan
from ..utils.output import success, error, info

logger = logging.getLogger(__name__)


@cli.command()
@click.argument("directory", type=click.Path(file_okay=False))
@click.option("--filter", "-f", "extensions", multiple=True,
              help="File extension to collect, with or without dot (repeatable; default: config or all files)")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None,
              help="Output filename (default: config scan.output)")
@click.pass_context
def scan(ctx: click.Context, directory: str, extensions: tuple, output: str | None):
    """Collect absolute file paths below DIRECTORY into a scan list.

    The list holds one path per line and is the input of `prm rank`.

    Examples:
      prm scan ~/src                      # Every file
      prm scan -f py -f pyi ~/src         # Python sources only
      prm scan -f txt -o notes.txt ~/docs
    """
    cfg = ctx.obj

    try:
        result = run_scan(cfg, directory, extensions=list(extensions) or None, output=output)
    except OSError as e:
        click.echo(error(f"Directory scan failed: {e}"), err=True)
        logger.debug("Scan failure", exc_info=True)
        ctx.exit(1)

    click.echo(info(f"{result.directories} directories processed"))
    click.echo(info(f"{len(result.files)} files found"))
    click.echo(success(f"Scan list written to {result.output_path}"))


__all__ = ["scan"]
