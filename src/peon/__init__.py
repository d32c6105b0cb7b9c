"""peon-ping - Warcraft III Peon voice lines for Claude Code hooks.

Routes Claude Code hook events to tab titles, sound packs and desktop
notifications. Session state (agent sessions, prompt rates, pinned packs)
persists between the short-lived hook invocations.
"""

__version__ = "2.1.0"
