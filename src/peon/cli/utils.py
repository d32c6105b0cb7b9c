"""
Shared utilities for CLI commands.
"""

import logging
from pathlib import Path

import click

from peon.errors import ManifestLoadError
from peon.packs.manifest import Manifest
from peon.storage.packs import list_packs, load_manifest, pack_names
from peon.utils.paths import packs_dir

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for CLI.

    Args:
        verbose: If True, enable DEBUG level logging
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Silence noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_packs_dir(ctx: click.Context) -> Path:
    """Packs directory for this invocation, honouring ``--packs-dir``."""
    override = (ctx.obj or {}).get("packs_dir")
    return packs_dir(override)


def format_available(names: list[str]) -> str:
    return ", ".join(names) if names else "(none)"


def load_pack_or_fail(packs_root: Path, pack_name: str) -> Manifest:
    """
    Load a pack the user asked for by name.

    Raises:
        click.ClickException: If the pack is missing or invalid, listing
            the installed alternatives
    """
    try:
        return load_manifest(packs_root / pack_name)
    except ManifestLoadError as e:
        logger.debug(f"Pack lookup failed: {e}")
        available = pack_names(list_packs(packs_root))
        raise click.ClickException(
            f'pack "{pack_name}" not found. Available: {format_available(available)}'
        ) from None
