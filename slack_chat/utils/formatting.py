"""Formatting and Parsing."""

from datetime import datetime
from decimal import Decimal, InvalidOperation


def format_timestamp(ts: str) -> str:
    """Render a Slack ts as local 'YYYY-MM-DD HH:MM'.

    Anything that does not parse as a number is returned unchanged.
    """
    if not ts:
        return ts
    try:
        moment = datetime.fromtimestamp(int(Decimal(ts)))
    except (InvalidOperation, ValueError, OverflowError, OSError):
        return ts
    return moment.strftime("%Y-%m-%d %H:%M")


def truncate_text(text: str, max_len: int = 50) -> str:
    """Flatten newlines and truncate to max length."""
    text = text.replace("\n", " ")
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."


def unescape_shell_chars(text: str) -> str:
    """Undo zsh-style history escaping, e.g. 'Hi\\!' -> 'Hi!'."""
    return text.replace("\\!", "!")
