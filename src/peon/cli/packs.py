"""
Sound pack commands: list, switch, describe and preview packs.
"""

import random
import subprocess

import click

from peon.cli.utils import format_available, get_packs_dir, load_pack_or_fail
from peon.config.app import PeonConfig, load_config, load_config_map, save_config_map
from peon.hooks.executor import SOUNDS_DIRNAME
from peon.packs.manifest import format_pack_sounds
from peon.packs.selector import pick_sound
from peon.platform.audio import play_sound
from peon.storage.packs import list_packs, pack_names
from peon.utils.paths import config_path


@click.command("packs")
@click.pass_context
def list_packs_cmd(ctx: click.Context) -> None:
    """List available sound packs."""
    root = get_packs_dir(ctx)
    config = load_config()
    packs = list_packs(root)

    if not packs:
        click.echo(f"No packs found in {root}")
        return

    for name, manifest in packs:
        marker = " *" if name == config.active_pack else ""
        click.echo(f"  {name:24} {manifest.label}{marker}")


@click.command()
@click.argument("name", required=False)
@click.pass_context
def pack(ctx: click.Context, name: str | None) -> None:
    """Switch to a specific pack (or cycle if no name given).

    Only ``active_pack`` is rewritten; other keys in the config file,
    including ones peon does not know about, are kept.
    """
    root = get_packs_dir(ctx)
    config_file = config_path()
    config_map = load_config_map(config_file)
    packs = list_packs(root)
    names = pack_names(packs)

    if name is not None:
        if name not in names:
            raise click.ClickException(
                f'pack "{name}" not found. Available: {format_available(names)}'
            )
        new_pack = name
    else:
        if not names:
            raise click.ClickException(f"no packs found in {root}")
        current = config_map.get("active_pack", PeonConfig.model_fields["active_pack"].default)
        new_pack = names[(names.index(current) + 1) % len(names)] if current in names else names[0]

    config_map["active_pack"] = new_pack
    try:
        save_config_map(config_map, config_file)
    except OSError as e:
        raise click.ClickException(f"Cannot write config: {e}") from None

    label = next(m.label for n, m in packs if n == new_pack)
    click.echo(f"peon-ping: switched to {new_pack} ({label})")


@click.command()
@click.argument("name", required=False)
@click.pass_context
def sounds(ctx: click.Context, name: str | None) -> None:
    """Show a pack's categories and voice lines (default: active pack)."""
    root = get_packs_dir(ctx)
    manifest = load_pack_or_fail(root, name or load_config().active_pack)
    click.echo(format_pack_sounds(manifest), nl=False)


@click.command()
@click.argument("category", required=False)
@click.option("--pack", "pack_name", help="Pack to play from (default: active pack)")
@click.pass_context
def play(ctx: click.Context, category: str | None, pack_name: str | None) -> None:
    """Play a sound from a category (random category if omitted)."""
    root = get_packs_dir(ctx)
    config = load_config()
    pack_name = pack_name or config.active_pack
    manifest = load_pack_or_fail(root, pack_name)

    if not manifest.categories:
        raise click.ClickException(f'pack "{pack_name}" has no categories')

    rng = random.Random()
    if category is None:
        category = rng.choice(sorted(manifest.categories))
    elif category not in manifest.categories:
        raise click.ClickException(
            f'category "{category}" not found in pack "{pack_name}". '
            f"Available: {format_available(sorted(manifest.categories))}"
        )

    sound = pick_sound(manifest.categories[category].sounds, None, rng)
    if sound is None:
        raise click.ClickException(f'no sounds in category "{category}"')

    click.echo(f'Playing: "{sound.line}" ({sound.file})')

    sound_path = root / pack_name / SOUNDS_DIRNAME / sound.file
    if not sound_path.exists():
        raise click.ClickException(f"sound file not found: {sound_path}")

    try:
        play_sound(sound_path, config.volume)
    except (OSError, subprocess.SubprocessError) as e:
        raise click.ClickException(f"failed to play {sound_path}: {e}") from None
