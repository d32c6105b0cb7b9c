"""Per-session pack resolution with optional rotation."""

from __future__ import annotations

import random
from collections.abc import Collection, Mapping

from peon.config.app import PeonConfig


def resolve_pack(
    config: PeonConfig,
    session_packs: Mapping[str, str],
    session_id: str,
    available_packs: Collection[str],
    rng: random.Random,
) -> str:
    """Resolve which pack a session uses.

    Without rotation this is always ``config.active_pack``. With rotation a
    session keeps its pinned pack while that pack stays in the rotation;
    otherwise a pack is drawn from the rotation entries installed on disk.
    The caller persists a new or changed pin; ``session_packs`` is not
    modified here.

    Args:
        config: Loaded configuration
        session_packs: Current session -> pack pins
        session_id: Session the event belongs to
        available_packs: Names of packs installed on disk
        rng: Random source

    Returns:
        Name of the pack to use
    """
    if not config.pack_rotation:
        return config.active_pack

    pinned = session_packs.get(session_id)
    if pinned is not None and pinned in config.pack_rotation:
        return pinned

    valid_rotation = [p for p in config.pack_rotation if p in available_packs]
    if not valid_rotation:
        return config.active_pack

    return rng.choice(valid_rotation)
