"""Search query construction.

Slack search takes modifiers inline in the query string (``in:#general``,
``from:@alice``, ``has:link``). ``build_query`` turns command options into
that form, putting the free-text query last.
"""

import re
from typing import List, Optional

from pydantic import BaseModel

from ..errors import ValidationError

VALID_SCOPES = ["all", "public", "private", "dm", "mpim"]

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class QueryOptions(BaseModel):
    scope: str = ""
    in_channel: str = ""
    from_user: str = ""
    after: str = ""
    before: str = ""
    has_link: bool = False
    has_reaction: bool = False
    has_pin: bool = False
    file_type: str = ""


def validate_scope(scope: str) -> None:
    if scope and scope not in VALID_SCOPES:
        raise ValidationError(
            f"invalid scope: {scope!r} (must be one of: {', '.join(VALID_SCOPES)})"
        )


def validate_date(date: str) -> None:
    if date and not DATE_RE.match(date):
        raise ValidationError(f"invalid date format: {date!r} (must be YYYY-MM-DD)")


def validate_query_options(opts: Optional[QueryOptions]) -> None:
    if opts is None:
        return
    validate_scope(opts.scope)
    validate_date(opts.after)
    validate_date(opts.before)


def build_query(base_query: str, opts: Optional[QueryOptions] = None) -> str:
    """Prefix the base query with Slack search modifiers."""
    if opts is None:
        return base_query

    parts: List[str] = []
    if opts.scope and opts.scope != "all":
        parts.append(f"is:{opts.scope}")
    if opts.in_channel:
        parts.append("in:#" + opts.in_channel.removeprefix("#"))
    if opts.from_user:
        parts.append("from:@" + opts.from_user.removeprefix("@"))
    if opts.after:
        parts.append(f"after:{opts.after}")
    if opts.before:
        parts.append(f"before:{opts.before}")
    if opts.has_link:
        parts.append("has:link")
    if opts.has_reaction:
        parts.append("has:reaction")
    if opts.has_pin:
        parts.append("has:pin")
    if opts.file_type:
        parts.append(f"type:{opts.file_type}")

    parts.append(base_query)
    return " ".join(parts)
