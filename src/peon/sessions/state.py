"""
Persisted session state.

One record per installation (not per session), loaded at the start of a
hook invocation and written back once at the end if anything changed.
Entries may point at packs or sessions that no longer exist; readers
revalidate instead of expecting global consistency.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator


class SessionState(BaseModel):
    """State threaded across hook invocations."""

    last_played: dict[str, str] = Field(
        default_factory=dict,
        description="Last sound file played, per category",
    )
    agent_sessions: set[str] = Field(
        default_factory=set,
        description="Session ids permanently marked as agents",
    )
    prompt_timestamps: dict[str, list[float]] = Field(
        default_factory=dict,
        description="Recent prompt submit times, per session",
    )
    session_packs: dict[str, str] = Field(
        default_factory=dict,
        description="Pack pinned to each session under rotation",
    )

    @field_validator("prompt_timestamps", mode="before")
    @classmethod
    def discard_legacy_timestamps(cls, v: Any) -> Any:
        """Older hook versions wrote a flat list; start over with an empty map."""
        if v is None or isinstance(v, list):
            return {}
        return v

    @field_serializer("agent_sessions")
    def serialize_agent_sessions(self, agent_sessions: set[str]) -> list[str]:
        return sorted(agent_sessions)
