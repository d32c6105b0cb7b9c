"""Desktop notifications (osascript on macOS, notify-send on Linux)."""

from __future__ import annotations

import logging
import shutil
import subprocess

from peon.hooks.actions import NotifyColor
from peon.platform.audio import detect_platform

logger = logging.getLogger(__name__)

_URGENCY = {
    NotifyColor.RED: "critical",
    NotifyColor.YELLOW: "normal",
    NotifyColor.BLUE: "low",
}


def _applescript_quote(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def send_notification(message: str, title: str, color: NotifyColor) -> bool:
    """Spawn a desktop notification without waiting for it.

    Args:
        message: Notification body
        title: Notification title
        color: Urgency colour (mapped to notify-send urgency on Linux)

    Returns:
        True if a notifier was spawned, False if none is available

    Raises:
        OSError: If the notifier process cannot be spawned
    """
    plat = detect_platform()

    if plat == "mac" and shutil.which("osascript"):
        script = (
            f'display notification "{_applescript_quote(message)}" '
            f'with title "{_applescript_quote(title)}"'
        )
        cmd = ["osascript", "-e", script]
    elif plat == "linux" and shutil.which("notify-send"):
        cmd = ["notify-send", f"--urgency={_URGENCY[color]}", title, message]
    else:
        logger.debug(f"No notifier available on {plat}, dropping notification: {title}")
        return False

    subprocess.Popen(  # nosec B603
        cmd,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        stdin=subprocess.DEVNULL,
        start_new_session=True,
    )
    return True
