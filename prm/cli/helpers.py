from __future__ import annotations
import click

from ..config import load_typed_config
from ..version import __version__


@click.group()
@click.version_option(version=__version__, prog_name="path-rank-matcher")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Logging level (overrides config)')
@click.option('--progress/--no-progress', default=None, help='Enable/disable progress logging (overrides config)')
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, progress: bool | None):
    """Fuzzy-rank file paths against a short pattern.

    \b
    TYPICAL WORKFLOW:
      prm scan -f py ~/src          # Collect paths into scan_result.txt
      prm rank -p mdl scan_result.txt
                                    # Show the 20 best matches

    \b
    Output lines read "best:second<TAB>path". Patterns without uppercase
    letters match case-insensitively; one uppercase letter makes the whole
    pattern case-sensitive.
    """
    if isinstance(ctx.obj, dict):
        return

    overrides = {}
    if log_level is not None:
        overrides['log_level'] = log_level.upper()
    if progress is not None:
        overrides['logging'] = {'progress_enabled': progress}
    ctx.obj = load_typed_config(overrides).to_dict()


__all__ = ["cli"]
