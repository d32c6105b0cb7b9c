"""Terminal tab title text and escape sequence."""

# Prefix for states that need the user's attention
ATTENTION_MARKER = "● "


def build_tab_title(project: str, status: str, marker: str = "") -> str:
    """Build tab title text such as ``"● my-project: done"``."""
    return f"{marker}{project}: {status}"


def tab_title_escape(title: str) -> str:
    """Wrap a title in the OSC 0 escape sequence terminals understand."""
    return f"\x1b]0;{title}\x07"
