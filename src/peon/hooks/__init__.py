"""
Hook handling for Claude Code events.

- events.py: hook event models and parse_hook_event()
- actions.py: actions the router produces
- routing.py: route_event(), the pure event router
- tab_title.py: tab title text and escape
- executor.py: ActionExecutor, carries actions out
- hook_manager.py: HookManager, one invocation end to end
"""

from peon.hooks.actions import Action, Notify, NotifyColor, PlaySound, SetTabTitle, Skip
from peon.hooks.events import (
    HookEvent,
    Notification,
    PermissionRequest,
    SessionStart,
    Stop,
    UserPromptSubmit,
    parse_hook_event,
)
from peon.hooks.routing import extract_project_name, route_event
from peon.hooks.tab_title import build_tab_title, tab_title_escape

__all__ = [
    "Action",
    "HookEvent",
    "Notification",
    "Notify",
    "NotifyColor",
    "PermissionRequest",
    "PlaySound",
    "SessionStart",
    "SetTabTitle",
    "Skip",
    "Stop",
    "UserPromptSubmit",
    "build_tab_title",
    "extract_project_name",
    "parse_hook_event",
    "route_event",
    "tab_title_escape",
]
