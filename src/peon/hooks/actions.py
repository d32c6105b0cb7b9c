"""
Actions produced by event routing.

The router only decides; ActionExecutor interprets these against the
terminal, the audio player and the desktop notifier.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NotifyColor(str, Enum):
    """Urgency colour of a desktop notification."""

    RED = "red"
    BLUE = "blue"
    YELLOW = "yellow"


@dataclass(frozen=True)
class PlaySound:
    """Play a sound from the given category of the session's pack."""

    category: str


@dataclass(frozen=True)
class SetTabTitle:
    """Set the terminal tab title."""

    title: str


@dataclass(frozen=True)
class Notify:
    """Send a desktop notification."""

    message: str
    title: str
    color: NotifyColor


@dataclass(frozen=True)
class Skip:
    """Do nothing."""


Action = PlaySound | SetTabTitle | Notify | Skip
