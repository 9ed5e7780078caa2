from typing import Optional


def is_terminal_agent(user_agent: Optional[str], marker: str = "curl") -> bool:
    """Whether the client can be served raw ANSI text instead of a redirect."""
    return bool(marker) and marker in (user_agent or "")
