"""Agent session detection.

Sessions started in ``delegate`` permission mode run on someone's behalf
and stay silent. Once seen, a session id is kept in
SessionState.agent_sessions for good, so later events reporting another
mode are still suppressed.
"""

from __future__ import annotations

from collections.abc import Collection

DELEGATE_MODE = "delegate"


def is_agent_session(
    agent_sessions: Collection[str],
    session_id: str,
    permission_mode: str,
) -> bool:
    """Return True if the session should be treated as an agent (suppressed).

    Args:
        agent_sessions: Session ids previously recorded as agents
        session_id: Session the event belongs to
        permission_mode: Permission mode reported by the event

    Returns:
        True for delegate mode or a previously recorded agent session
    """
    return permission_mode == DELEGATE_MODE or session_id in agent_sessions
