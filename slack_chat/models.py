"""Entities decoded from Slack API responses.

Models are frozen snapshots of one JSON object each. They never point back
at the client or at each other; relations such as message -> channel are
plain ids.
"""

from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Entity(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Channel(_Entity):
    """A public or private channel."""

    id: str
    name: str = ""
    is_private: bool = False
    is_archived: bool = False
    num_members: int = 0
    topic: str = ""
    purpose: str = ""

    @field_validator("topic", "purpose", mode="before")
    @classmethod
    def _flatten(cls, v: Any) -> Any:
        # Slack sends {"value": ..., "creator": ..., "last_set": ...}
        if isinstance(v, dict):
            return v.get("value", "")
        return v


class User(_Entity):
    """A workspace member."""

    id: str
    name: str = ""
    real_name: str = ""
    display_name: str = ""
    is_admin: bool = False
    is_bot: bool = False

    @classmethod
    def from_api(cls, data: dict) -> "User":
        profile = data.get("profile") or {}
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            real_name=data.get("real_name") or profile.get("real_name", ""),
            display_name=profile.get("display_name", ""),
            is_admin=data.get("is_admin", False),
            is_bot=data.get("is_bot", False),
        )


class Message(_Entity):
    """A message, identified by its ts within a channel."""

    ts: str
    channel: str = ""
    user: str = ""
    text: str = ""
    thread_ts: Optional[str] = None
    reply_count: int = 0

    @property
    def timestamp_value(self) -> Decimal:
        """The ts as an exact number, for ordering."""
        return Decimal(self.ts)

    @classmethod
    def from_api(cls, data: dict, channel: str = "") -> "Message":
        return cls(
            ts=data["ts"],
            channel=data.get("channel") or channel,
            user=data.get("user") or data.get("bot_id") or "",
            text=data.get("text") or "",
            thread_ts=data.get("thread_ts"),
            reply_count=data.get("reply_count", 0),
        )


class Team(_Entity):
    id: str
    name: str = ""
    domain: str = ""


class AuthInfo(_Entity):
    """Result of an auth.test identity check."""

    team: str = ""
    user: str = ""
    team_id: str = ""
    user_id: str = ""
    bot_id: Optional[str] = None
    url: str = ""


class SearchMatch(_Entity):
    ts: str
    text: str = ""
    user: str = ""
    username: str = ""
    channel_id: str = ""
    channel_name: str = ""
    permalink: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "SearchMatch":
        channel = data.get("channel") or {}
        return cls(
            ts=data.get("ts", ""),
            text=data.get("text") or "",
            user=data.get("user") or "",
            username=data.get("username") or "",
            channel_id=channel.get("id", ""),
            channel_name=channel.get("name", ""),
            permalink=data.get("permalink") or "",
        )


class SearchResult(_Entity):
    query: str
    total: int = 0
    page: int = 1
    pages: int = 1
    matches: List[SearchMatch] = Field(default_factory=list)
