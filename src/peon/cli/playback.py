"""
Pause, resume and status commands.
"""

import click

from peon.config.app import load_config
from peon.storage.state import is_paused, set_paused
from peon.utils.paths import paused_path


def _set_paused(paused: bool) -> None:
    try:
        set_paused(paused_path(), paused)
    except OSError as e:
        raise click.ClickException(f"Cannot update pause flag: {e}") from None
    click.echo("peon-ping: sounds paused" if paused else "peon-ping: sounds resumed")


@click.command()
def pause() -> None:
    """Mute sounds."""
    _set_paused(True)


@click.command()
def resume() -> None:
    """Unmute sounds."""
    _set_paused(False)


@click.command()
def toggle() -> None:
    """Toggle mute on/off."""
    _set_paused(not is_paused(paused_path()))


@click.command()
def status() -> None:
    """Check if paused or active."""
    config = load_config()
    click.echo("peon-ping: paused" if is_paused(paused_path()) else "peon-ping: active")
    click.echo(f"pack: {config.active_pack}")
    if config.pack_rotation:
        click.echo(f"rotation: {', '.join(config.pack_rotation)}")
