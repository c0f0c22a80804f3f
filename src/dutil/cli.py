"""CLI interface for dutil."""

from __future__ import annotations

import logging

import click

from dutil import __version__
from dutil.config import ConfigError, ReportConfig
from dutil.core.engine import ReportEngine
from dutil.core.scanner import ScanError

log = logging.getLogger(__name__)

_EXAMPLES = """\b
Examples:
  dutil                  cluster totals of each folder under the cwd
  dutil folder           cluster totals of each folder under 'folder'
  dutil -h               human readable sizes
  dutil -s               only the final summary
  dutil -b               sizes in bytes
  dutil -k               cluster size of 1024
  dutil -z               sorted by size
  dutil -n               sorted by name
  dutil -r               reverse order
  dutil --block-size=512 cluster size of 512
"""


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


class _ReportCommand(click.Command):
    """Command that reports usage errors as a single ``Error:`` line."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            error = click.ClickException(exc.format_message())
            error.exit_code = exc.exit_code
            raise error from exc


@click.command(cls=_ReportCommand, epilog=_EXAMPLES)
@click.argument("paths", metavar="[FOLDER]...", nargs=-1)
@click.option("-s", "summary", is_flag=True, help="Display only the final summary.")
@click.option("-k", "kilo", is_flag=True, help="Use a cluster size of 1024.")
@click.option("-h", "human", is_flag=True, help="Display sizes in human readable form.")
@click.option("-b", "as_bytes", is_flag=True, help="Display sizes in bytes.")
@click.option("-z", "by_size", is_flag=True, help="Sort the list by size.")
@click.option("-n", "by_name", is_flag=True, help="Sort the list by name.")
@click.option("-r", "reverse", is_flag=True, help="Display the list in reverse order.")
@click.option("--block-size", "block_size", metavar="DDDD", default=None,
              help="Set the cluster size to the given integer > 0.")
@click.option("--verbose", count=True, help="Increase log verbosity (info, then debug).")
@click.version_option(__version__, "--version", message="%(version)s",
                      help="Display the version number.")
def main(
    paths: tuple[str, ...],
    summary: bool,
    kilo: bool,
    human: bool,
    as_bytes: bool,
    by_size: bool,
    by_name: bool,
    reverse: bool,
    block_size: str | None,
    verbose: int,
) -> None:
    """A disk usage utility inspired by the UNIX du command.

    Displays the sum of the cluster sizes of each directory, starting
    with each FOLDER (default: the current directory).
    """
    _setup_logging(verbose)

    try:
        config = ReportConfig.from_switches(
            human=human,
            as_bytes=as_bytes,
            summary=summary,
            kilo=kilo,
            by_size=by_size,
            by_name=by_name,
            reverse=reverse,
            block_size=block_size,
        )
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    log.debug("Using %s", config)

    engine = ReportEngine(config)
    try:
        entries = engine.run(paths)
    except ScanError as exc:
        raise click.ClickException(str(exc)) from exc

    for line in engine.render(entries):
        click.echo(line)
