"""logsweep CLI - main entry point.

    logsweep <directory_path>           report every console.log call
    logsweep <directory_path> delete    strip them, writing <file>.bak first
    logsweep <directory_path> revert    restore every <file>.bak and delete it
"""

import click

from logsweep import __version__
from logsweep.config import load_config
from logsweep.exceptions import TraversalError
from logsweep.ui import print_summary
from logsweep.utils.error_handler import handle_exceptions
from logsweep.utils.exit_codes import ExitCodes
from logsweep.utils.logging import get_log_level, logger
from logsweep.walker import SweepMode, Walker

USAGE = """\
Usage: logsweep <directory_path> [delete|revert]
  - Without argument: Find all console.log statements
  - delete: Remove console.log statements and create .bak files
  - revert: Restore files from .bak files and remove the backups
"""

MODES = {
    None: SweepMode.REPORT,
    "delete": SweepMode.REMOVE,
    "revert": SweepMode.REVERT,
}


class SweepCommand(click.Command):
    """Command with a fixed usage text and exit code 1 for bad arguments.

    click reports usage errors on stderr with exit code 2; this command
    prints its usage on stdout and exits 1 instead.
    """

    def format_help(self, ctx, formatter):
        formatter.write(USAGE)

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            logger.debug("Rejected arguments {args}: {err}", args=args, err=e.format_message())
            click.echo(USAGE, nl=False)
            ctx.exit(ExitCodes.FAILURE)


@click.command(cls=SweepCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="logsweep")
@click.argument("directory")
@click.argument("mode", required=False)
@click.pass_context
@handle_exceptions
def main(ctx, directory, mode):
    """Find, remove or restore console.log calls under DIRECTORY."""
    if mode not in MODES:
        click.echo(f"Unknown argument: {mode}")
        click.echo(USAGE, nl=False)
        ctx.exit(ExitCodes.FAILURE)

    sweep_mode = MODES[mode]
    config = load_config()
    logger.debug(
        "logsweep {version} starting: root={root} mode={mode} log_level={level}",
        version=__version__,
        root=directory,
        mode=sweep_mode.value,
        level=get_log_level(),
    )

    walker = Walker(directory, config)
    try:
        stats = walker.walk(sweep_mode)
    except TraversalError as e:
        logger.error(
            "Traversal of {root} failed: {err} ({outcome})",
            root=directory,
            err=e.reason,
            outcome=ExitCodes.get_description(ExitCodes.FAILURE),
        )
        click.echo(f"Error walking through directory: {e}")
        ctx.exit(ExitCodes.FAILURE)

    logger.info("Finished {mode} run over {root}", mode=sweep_mode.value, root=directory)
    print_summary(sweep_mode.value, stats)
