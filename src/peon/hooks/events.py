"""
Hook event models.

Claude Code pipes one JSON object per hook invocation on stdin. The
``hook_event_name`` field names the event kind; everything else is
optional so minimal or newer payloads still decode:

    {"hook_event_name": "Notification", "cwd": "/work/app",
     "session_id": "abc-123", "permission_mode": "default",
     "notification_type": "idle_prompt"}

Only a payload that is not JSON, not an object, or names no known event
kind is rejected.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from peon.errors import HookEventParseError


class BaseHookEvent(BaseModel):
    """Fields every hook event carries."""

    model_config = ConfigDict(extra="ignore")

    cwd: str = ""
    session_id: str = ""
    permission_mode: str = ""

    @field_validator("cwd", "session_id", "permission_mode", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        """Treat explicit nulls like absent fields."""
        return "" if v is None else v


class SessionStart(BaseHookEvent):
    hook_event_name: Literal["SessionStart"] = "SessionStart"


class UserPromptSubmit(BaseHookEvent):
    hook_event_name: Literal["UserPromptSubmit"] = "UserPromptSubmit"


class Stop(BaseHookEvent):
    hook_event_name: Literal["Stop"] = "Stop"


class Notification(BaseHookEvent):
    """System notification; ``notification_type`` selects the routing branch."""

    hook_event_name: Literal["Notification"] = "Notification"
    notification_type: str = ""

    @field_validator("notification_type", mode="before")
    @classmethod
    def null_type_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class PermissionRequest(BaseHookEvent):
    """Permission request; the tool fields are decoded but not routed on."""

    hook_event_name: Literal["PermissionRequest"] = "PermissionRequest"
    tool_name: str = ""
    tool_input: Any = None

    @field_validator("tool_name", mode="before")
    @classmethod
    def null_tool_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


HookEvent = Annotated[
    SessionStart | UserPromptSubmit | Stop | Notification | PermissionRequest,
    Field(discriminator="hook_event_name"),
]

_hook_event_adapter = TypeAdapter(HookEvent)


def parse_hook_event(payload: str | bytes | dict[str, Any]) -> HookEvent:
    """Decode a hook event from raw JSON text or an already-parsed dict.

    Args:
        payload: JSON document (str/bytes) or dict from Claude Code

    Returns:
        The matching event model

    Raises:
        HookEventParseError: If the payload is not a JSON object or its
            ``hook_event_name`` is missing or unknown
    """
    try:
        if isinstance(payload, dict):
            return _hook_event_adapter.validate_python(payload)
        return _hook_event_adapter.validate_json(payload)
    except ValidationError as e:
        raise HookEventParseError(str(e)) from e
