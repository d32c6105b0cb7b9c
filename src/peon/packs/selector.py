"""Sound selection within a category."""

from __future__ import annotations

import random
from collections.abc import Sequence

from peon.packs.manifest import Sound


def pick_sound(
    sounds: Sequence[Sound],
    last_played: str | None,
    rng: random.Random,
) -> Sound | None:
    """Pick a random sound, avoiding the file played last time when possible.

    A single-sound category always returns its sound, and a category whose
    every entry shares the last-played file falls back to the full list, so
    no pool is ever starved.

    Args:
        sounds: Sounds of one category
        last_played: File name last played for this category, if any
        rng: Random source

    Returns:
        The chosen Sound, or None if the category is empty
    """
    if not sounds:
        return None
    if len(sounds) == 1:
        return sounds[0]

    candidates = list(sounds)
    if last_played is not None:
        fresh = [s for s in sounds if s.file != last_played]
        if fresh:
            candidates = fresh

    return rng.choice(candidates)
