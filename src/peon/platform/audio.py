"""
Audio playback through the platform's command-line player.

Playback is spawned and never awaited; a hook must return immediately.
"""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def detect_platform() -> str:
    """Return ``"mac"``, ``"wsl"``, ``"linux"`` or ``"unknown"``."""
    if sys.platform == "darwin":
        return "mac"
    if sys.platform.startswith("linux"):
        release = platform.release().lower()
        if "microsoft" in release or "wsl" in release:
            return "wsl"
        return "linux"
    return "unknown"


def _spawn(cmd: list[str]) -> int:
    process = subprocess.Popen(  # nosec B603
        cmd,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        stdin=subprocess.DEVNULL,
        start_new_session=True,
    )
    return process.pid


def _play_mac(sound: Path, volume: float) -> int | None:
    if not shutil.which("afplay"):
        return None
    return _spawn(["afplay", "-v", str(volume), str(sound)])


def _play_wsl(sound: Path, volume: float) -> int | None:
    if not shutil.which("powershell.exe") or not shutil.which("wslpath"):
        return None

    win_path = subprocess.check_output(["wslpath", "-w", str(sound)], text=True).strip()
    win_path = win_path.replace("\\", "/")

    # MediaPlayer handles wav/mp3 and plays asynchronously after Open()
    ps_script = (
        "Add-Type -AssemblyName PresentationCore; "
        "$p = New-Object System.Windows.Media.MediaPlayer; "
        f"$p.Open([Uri]::new('file:///{win_path}')); "
        f"$p.Volume = {volume}; "
        "Start-Sleep -Milliseconds 150; "
        "$p.Play(); "
        "Start-Sleep -Seconds 3; "
        "$p.Close()"
    )
    return _spawn(["powershell.exe", "-NoProfile", "-NonInteractive", "-Command", ps_script])


def _play_linux(sound: Path, volume: float) -> int | None:
    # paplay volume is linear 0..65536
    candidates = [
        ["paplay", f"--volume={int(volume * 65536)}", str(sound)],
        ["aplay", "-q", str(sound)],
        ["ffplay", "-nodisp", "-autoexit", "-loglevel", "quiet", "-volume", str(int(volume * 100)), str(sound)],
    ]
    for cmd in candidates:
        if shutil.which(cmd[0]):
            return _spawn(cmd)
    return None


def play_sound(sound: Path, volume: float) -> int | None:
    """Start playing a sound file in the background.

    Args:
        sound: Path to a wav/mp3 file
        volume: Volume between 0.0 and 1.0

    Returns:
        PID of the player process, or None if no player is available

    Raises:
        OSError: If the player process cannot be spawned
        subprocess.CalledProcessError: If WSL path translation fails
    """
    plat = detect_platform()
    if plat == "mac":
        pid = _play_mac(sound, volume)
    elif plat == "wsl":
        pid = _play_wsl(sound, volume)
    elif plat == "linux":
        pid = _play_linux(sound, volume)
    else:
        pid = None

    if pid is None:
        logger.debug(f"No audio player available on {plat}, not playing {sound}")
    return pid
