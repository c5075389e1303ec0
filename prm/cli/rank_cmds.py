"""Pattern ranking command."""

from __future__ import annotations
import click
import logging

from .helpers import cli
from ..services.rank_service import run_ranking
from ..export.results import format_record
from ..utils.output import error, warning, success

logger = logging.getLogger(__name__)


@cli.command()
@click.argument("input_file", type=click.Path(dir_okay=False))
@click.option("--pattern", "-p", required=True, help="Pattern to rank against (at least 3 symbols by default)")
@click.option("--top-k", "-k", type=click.IntRange(min=1), default=None, help="Number of results (default: config rank.top_k)")
@click.option("--workers", "-w", type=click.IntRange(min=1), default=None, help="Scoring threads (default: config rank.workers)")
@click.option("--timeout", type=click.FloatRange(min=0), default=None, help="Stop scoring after N seconds (0 disables)")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Also write results to this file")
@click.pass_context
def rank(ctx: click.Context, input_file: str, pattern: str, top_k: int | None, workers: int | None,
         timeout: float | None, output: str | None):
    """Rank the records of INPUT_FILE against a fuzzy PATTERN.

    Prints the best matches as "best:second<TAB>record", best first.

    Examples:
      prm rank -p cfgldr scan_result.txt
      prm rank -p Main -k 5 scan_result.txt        # Case-sensitive
      prm rank -p util -w 4 -o hits.txt scan_result.txt
    """
    cfg = ctx.obj

    try:
        result = run_ranking(cfg, input_file, pattern, top_k=top_k, workers=workers,
                             timeout=timeout, output=output)
    except ValueError as e:
        raise click.UsageError(str(e))
    except OSError as e:
        click.echo(error(f"Pattern match failed: {e}"), err=True)
        logger.debug("Rank failure", exc_info=True)
        ctx.exit(1)

    for record in result.ranked:
        # Undecodable path bytes go back out unchanged
        click.echo(format_record(record).encode("utf-8", "surrogateescape"))

    if result.timed_out:
        click.echo(warning(f"Timed out: ranked {result.scored} of {result.curated} curated records"), err=True)
    if result.output_path is not None:
        click.echo(success(f"Results written to {result.output_path}"), err=True)


__all__ = ["rank"]
