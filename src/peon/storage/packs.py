"""Sound pack discovery and manifest loading."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from peon.errors import ManifestLoadError
from peon.packs.manifest import Manifest

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "manifest.json"


def load_manifest(pack_dir: Path) -> Manifest:
    """Load the manifest of one pack directory.

    Args:
        pack_dir: Directory containing manifest.json

    Returns:
        Parsed Manifest

    Raises:
        ManifestLoadError: If the manifest is missing, unreadable or invalid
    """
    manifest_path = pack_dir / MANIFEST_FILENAME
    try:
        content = manifest_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestLoadError(f"Failed to read manifest ({e.strerror})", manifest_path) from e
    except UnicodeDecodeError as e:
        raise ManifestLoadError("Manifest is not valid UTF-8", manifest_path) from e

    try:
        return Manifest.model_validate_json(content)
    except ValidationError as e:
        raise ManifestLoadError("Invalid manifest", manifest_path) from e


def list_packs(packs_dir: Path) -> list[tuple[str, Manifest]]:
    """List installed packs by scanning for manifest.json files.

    Directories without a valid manifest are skipped.

    Args:
        packs_dir: Directory holding one sub-directory per pack

    Returns:
        (name, manifest) pairs sorted by pack name
    """
    packs: list[tuple[str, Manifest]] = []
    if not packs_dir.is_dir():
        return packs

    for entry in packs_dir.iterdir():
        if not entry.is_dir():
            continue
        try:
            manifest = load_manifest(entry)
        except ManifestLoadError as e:
            logger.debug(f"Skipping pack directory {entry}: {e}")
            continue
        packs.append((manifest.name, manifest))

    packs.sort(key=lambda p: p[0])
    return packs


def pack_names(packs: list[tuple[str, Manifest]]) -> list[str]:
    return [name for name, _ in packs]
