"""Input checks for command arguments.

These only guard the command line; the API layer passes ids through as
given and lets Slack reject what it does not accept.
"""

import re

from ..errors import ValidationError

CHANNEL_ID_RE = re.compile(r"^[CG][A-Z0-9]+$")
USER_ID_RE = re.compile(r"^[UW][A-Z0-9]+$")
TIMESTAMP_RE = re.compile(r"^\d+\.\d+$")

MIN_LIMIT = 1
MAX_LIMIT = 1000


def channel_id(value: str) -> str:
    """Channel IDs start with C (public) or G (private/group)."""
    if not CHANNEL_ID_RE.match(value):
        raise ValidationError(
            f"invalid channel ID {value!r}: must start with C or G (e.g., C01234ABCDE)"
        )
    return value


def user_id(value: str) -> str:
    """User IDs start with U (regular user) or W (enterprise user)."""
    if not USER_ID_RE.match(value):
        raise ValidationError(
            f"invalid user ID {value!r}: must start with U or W (e.g., U01234ABCDE)"
        )
    return value


def timestamp(value: str) -> str:
    if not TIMESTAMP_RE.match(value):
        raise ValidationError(
            f"invalid timestamp {value!r}: must be format 1234567890.123456"
        )
    return value


def limit(value: int) -> int:
    if value < MIN_LIMIT:
        raise ValidationError(f"invalid limit {value}: must be at least {MIN_LIMIT}")
    if value > MAX_LIMIT:
        raise ValidationError(f"invalid limit {value}: must be at most {MAX_LIMIT}")
    return value


def normalize_emoji(name: str) -> str:
    """Strip surrounding colons: ':thumbsup:' -> 'thumbsup'."""
    return name.strip(":")


def page(value: int) -> int:
    """Result pages are numbered from 1."""
    if value < 1:
        raise ValidationError(f"invalid page {value}: must be at least 1")
    return value
