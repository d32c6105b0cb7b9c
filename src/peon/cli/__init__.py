"""
peon CLI entry point.

Invoked without a subcommand, ``peon`` handles one Claude Code hook event
read from stdin. Subcommands manage the pause flag and sound packs.
"""

import click

from peon.errors import HookEventParseError
from peon.hooks.hook_manager import HookManager

from .packs import list_packs_cmd, pack, play, sounds
from .playback import pause, resume, status, toggle
from .upgrade import upgrade
from .utils import get_packs_dir, setup_logging


@click.group(invoke_without_command=True)
@click.option(
    "--packs-dir",
    type=click.Path(file_okay=False),
    help="Override the packs directory",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, packs_dir: str | None, verbose: bool) -> None:
    """peon-ping - Warcraft peon voice lines for Claude Code hooks."""
    ctx.ensure_object(dict)
    ctx.obj["packs_dir"] = packs_dir
    setup_logging(verbose)

    if ctx.invoked_subcommand is None:
        raw_input = click.get_text_stream("stdin").read()
        manager = HookManager(packs_dir=get_packs_dir(ctx))
        try:
            manager.execute(raw_input)
        except HookEventParseError as e:
            raise click.ClickException(str(e)) from None


# Register commands
cli.add_command(pause)
cli.add_command(resume)
cli.add_command(toggle)
cli.add_command(status)
cli.add_command(list_packs_cmd)
cli.add_command(pack)
cli.add_command(sounds)
cli.add_command(play)
cli.add_command(upgrade)
