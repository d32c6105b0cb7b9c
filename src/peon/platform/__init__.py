"""
Fire-and-forget platform shims.

- audio.py: spawn a detached audio player for a sound file
- notification.py: spawn a desktop notification
"""

from peon.platform.audio import detect_platform, play_sound
from peon.platform.notification import send_notification

__all__ = ["detect_platform", "play_sound", "send_notification"]
