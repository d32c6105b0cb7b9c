"""Annoyed detection: too many prompts in a short window."""

from __future__ import annotations

from collections.abc import Sequence


def check_annoyed(
    timestamps: Sequence[float],
    threshold: int,
    window_seconds: float,
    now: float,
) -> bool:
    """Check if a session submitted ``threshold`` prompts within the window.

    Only timestamps strictly newer than ``now - window_seconds`` count; one
    sitting exactly on the boundary has already left the window.

    Args:
        timestamps: Prompt submit times (unix seconds), including ``now``
        threshold: Number of recent prompts that counts as annoyed
        window_seconds: Width of the sliding window
        now: Current time (unix seconds)

    Returns:
        True if the recent count meets or exceeds the threshold
    """
    cutoff = now - window_seconds
    recent_count = sum(1 for t in timestamps if t > cutoff)
    return recent_count >= threshold


def record_prompt(timestamps: Sequence[float], now: float, window_seconds: float) -> list[float]:
    """Prune timestamps that left the window and append ``now``.

    Returns:
        New list holding the retained timestamps followed by ``now``
    """
    recent = [t for t in timestamps if now - t < window_seconds]
    recent.append(now)
    return recent
