"""
Session-level policies and the persisted session state.

- state.py: SessionState, the one record threaded through invocations
- agent.py: delegate/agent session detection
- annoyed.py: prompt-rate ("annoyed") detection
"""

from peon.sessions.agent import DELEGATE_MODE, is_agent_session
from peon.sessions.annoyed import check_annoyed, record_prompt
from peon.sessions.state import SessionState

__all__ = [
    "DELEGATE_MODE",
    "SessionState",
    "check_annoyed",
    "is_agent_session",
    "record_prompt",
]
