"""
Event routing: the pure core of the hook.

route_event() maps an event and the config to the ordered actions the
executor should carry out. It does not detect agent sessions, pick
sounds, or decide on the annoyed sound; HookManager applies those around
the call.

| Event                          | Title                  | Sound      | Notification              |
|--------------------------------|------------------------|------------|---------------------------|
| SessionStart                   | ready                  | greeting   |                           |
| UserPromptSubmit               | working                |            |                           |
| Stop                           | ● done                 | complete   | Task complete (blue)      |
| Notification/permission_prompt | ● needs approval       | permission | Permission needed (red)   |
| Notification/idle_prompt       | ● done                 |            | Waiting for input (yellow)|
| Notification/other             | skip                   |            |                           |
| PermissionRequest              | ● needs approval       | permission | Permission needed (red)   |
"""

from __future__ import annotations

from peon.config.app import PeonConfig
from peon.hooks.actions import Action, Notify, NotifyColor, PlaySound, SetTabTitle, Skip
from peon.hooks.events import (
    HookEvent,
    Notification,
    PermissionRequest,
    SessionStart,
    Stop,
    UserPromptSubmit,
)
from peon.hooks.tab_title import ATTENTION_MARKER, build_tab_title
from peon.sessions.state import SessionState

DEFAULT_PROJECT = "claude"

_ALLOWED_PUNCTUATION = frozenset(" ._-")


def extract_project_name(cwd: str) -> str:
    """Extract a display-safe project name from a working directory.

    Takes the last path segment (``"claude"`` when there is none) and keeps
    only ASCII letters, digits, space, ``.``, ``_`` and ``-``.

    Examples:
        >>> extract_project_name("/home/user/my project!@#")
        'my project'
        >>> extract_project_name("/")
        'claude'
    """
    name = cwd.rsplit("/", 1)[-1] or DEFAULT_PROJECT
    return "".join(c for c in name if (c.isascii() and c.isalnum()) or c in _ALLOWED_PUNCTUATION)


def _feedback(
    project: str,
    status: str,
    config: PeonConfig,
    *,
    marked: bool = False,
    sound: str | None = None,
    notice: tuple[str, NotifyColor] | None = None,
) -> list[Action]:
    """Assemble title, optional sound and optional notification, in that order."""
    title = build_tab_title(project, status, ATTENTION_MARKER if marked else "")
    actions: list[Action] = [SetTabTitle(title=title)]

    if sound is not None and config.categories.is_enabled(sound):
        actions.append(PlaySound(category=sound))

    if notice is not None:
        text, color = notice
        actions.append(Notify(message=f"{project}  —  {text}", title=title, color=color))

    return actions


def route_event(event: HookEvent, config: PeonConfig, state: SessionState) -> list[Action]:
    """Route a hook event to a list of actions.

    Args:
        event: Decoded hook event
        config: Loaded configuration
        state: Session state as loaded; routing itself reads nothing from
            it, the gates that do are applied by the caller

    Returns:
        Actions in presentation order (title, sound, notification), or
        ``[Skip()]`` when disabled or for unhandled notification types
    """
    if not config.enabled:
        return [Skip()]

    project = extract_project_name(event.cwd)

    if isinstance(event, SessionStart):
        return _feedback(project, "ready", config, sound="greeting")

    if isinstance(event, UserPromptSubmit):
        # The annoyed sound, if any, is appended by the caller
        return _feedback(project, "working", config)

    if isinstance(event, Stop):
        return _feedback(
            project,
            "done",
            config,
            marked=True,
            sound="complete",
            notice=("Task complete", NotifyColor.BLUE),
        )

    if isinstance(event, Notification):
        if event.notification_type == "permission_prompt":
            return _feedback(
                project,
                "needs approval",
                config,
                marked=True,
                sound="permission",
                notice=("Permission needed", NotifyColor.RED),
            )
        if event.notification_type == "idle_prompt":
            return _feedback(
                project,
                "done",
                config,
                marked=True,
                notice=("Waiting for input", NotifyColor.YELLOW),
            )
        return [Skip()]

    if isinstance(event, PermissionRequest):
        return _feedback(
            project,
            "needs approval",
            config,
            marked=True,
            sound="permission",
            notice=("Permission needed", NotifyColor.RED),
        )

    return [Skip()]
