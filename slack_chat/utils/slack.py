"""Slack API operations.

One function per remote method. Each builds its parameters, makes a single
``call_api`` (or ``paginate`` for list methods) and returns models.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import httpx
import pydantic

from ..errors import DecodeError
from ..models import AuthInfo, Channel, Message, SearchMatch, SearchResult, Team, User
from .api import call_api, paginate
from .validate import normalize_emoji


@contextmanager
def _decoding(endpoint: str) -> Iterator[None]:
    """Report a successful envelope that lacks the expected entity as a DecodeError."""
    try:
        yield
    except (AttributeError, KeyError, TypeError, pydantic.ValidationError) as e:
        raise DecodeError(endpoint, f"unexpected response shape: {e}") from e


# Channels

def get_channel_info(client: httpx.Client, channel_id: str) -> Channel:
    data = call_api(client, "conversations.info", {"channel": channel_id})
    with _decoding("conversations.info"):
        return Channel(**data["channel"])


def list_channels(
    client: httpx.Client,
    types: str = "public_channel",
    exclude_archived: bool = True,
    limit: int = 100,
) -> List[Channel]:
    params = {
        "types": types or None,
        "exclude_archived": exclude_archived,
        "limit": limit,
    }
    items = paginate(client, "conversations.list", params, "channels")
    with _decoding("conversations.list"):
        return [Channel(**ch) for ch in items]


def create_channel(client: httpx.Client, name: str, is_private: bool = False) -> Channel:
    data = call_api(
        client,
        "conversations.create",
        {"name": name, "is_private": is_private},
        method="POST",
    )
    with _decoding("conversations.create"):
        return Channel(**data["channel"])


def archive_channel(client: httpx.Client, channel_id: str) -> None:
    call_api(client, "conversations.archive", {"channel": channel_id}, method="POST")


def unarchive_channel(client: httpx.Client, channel_id: str) -> None:
    call_api(client, "conversations.unarchive", {"channel": channel_id}, method="POST")


def set_channel_topic(client: httpx.Client, channel_id: str, topic: str) -> None:
    call_api(
        client,
        "conversations.setTopic",
        {"channel": channel_id, "topic": topic},
        method="POST",
    )


def set_channel_purpose(client: httpx.Client, channel_id: str, purpose: str) -> None:
    call_api(
        client,
        "conversations.setPurpose",
        {"channel": channel_id, "purpose": purpose},
        method="POST",
    )


def invite_to_channel(
    client: httpx.Client, channel_id: str, user_ids: List[str]
) -> Channel:
    data = call_api(
        client,
        "conversations.invite",
        {"channel": channel_id, "users": ",".join(user_ids)},
        method="POST",
    )
    with _decoding("conversations.invite"):
        return Channel(**data.get("channel") or {"id": channel_id})


# Users

def get_user_info(client: httpx.Client, user_id: str) -> User:
    data = call_api(client, "users.info", {"user": user_id})
    with _decoding("users.info"):
        return User.from_api(data["user"])


def list_users(client: httpx.Client, limit: int = 100) -> List[User]:
    items = paginate(client, "users.list", {"limit": limit}, "members")
    with _decoding("users.list"):
        return [User.from_api(u) for u in items]


# Messages

def build_default_blocks(text: str) -> List[Dict[str, Any]]:
    """Wrap text in a single mrkdwn section block."""
    return [{"type": "section", "text": {"type": "mrkdwn", "text": text}}]


def _message_body(
    text: str, blocks: Optional[List[Any]], simple: bool
) -> Dict[str, Any]:
    # text always goes along as the notification fallback
    body: Dict[str, Any] = {"text": text}
    if blocks is not None:
        # explicit blocks replace the default; an empty list means none
        if blocks:
            body["blocks"] = blocks
    elif not simple:
        body["blocks"] = build_default_blocks(text)
    return body


def send_message(
    client: httpx.Client,
    channel_id: str,
    text: str,
    thread_ts: Optional[str] = None,
    blocks: Optional[List[Any]] = None,
    simple: bool = False,
) -> Message:
    """Post a message, optionally as a thread reply.

    Explicit ``blocks`` are sent as given. Without them the text is wrapped
    in a default mrkdwn block unless ``simple`` asks for plain text.
    """
    params = {"channel": channel_id, **_message_body(text, blocks, simple)}
    if thread_ts:
        params["thread_ts"] = thread_ts

    data = call_api(client, "chat.postMessage", params, method="POST")
    posted = data.get("message") or {}
    with _decoding("chat.postMessage"):
        return Message(
            ts=data["ts"],
            channel=data.get("channel") or channel_id,
            user=posted.get("user", ""),
            text=posted.get("text", text),
            thread_ts=thread_ts,
        )


def update_message(
    client: httpx.Client,
    channel_id: str,
    ts: str,
    text: str,
    blocks: Optional[List[Any]] = None,
    simple: bool = False,
) -> Message:
    params = {"channel": channel_id, "ts": ts, **_message_body(text, blocks, simple)}
    data = call_api(client, "chat.update", params, method="POST")
    with _decoding("chat.update"):
        return Message(
            ts=data.get("ts") or ts,
            channel=data.get("channel") or channel_id,
            text=data.get("text", text),
        )


def delete_message(client: httpx.Client, channel_id: str, ts: str) -> None:
    call_api(client, "chat.delete", {"channel": channel_id, "ts": ts}, method="POST")


def get_channel_history(
    client: httpx.Client,
    channel_id: str,
    limit: int = 20,
    oldest: Optional[str] = None,
    latest: Optional[str] = None,
) -> List[Message]:
    params = {
        "channel": channel_id,
        "limit": limit,
        "oldest": oldest or None,
        "latest": latest or None,
    }
    items = paginate(client, "conversations.history", params, "messages")
    with _decoding("conversations.history"):
        return [Message.from_api(m, channel_id) for m in items]


def get_thread_replies(
    client: httpx.Client, channel_id: str, thread_ts: str, limit: int = 100
) -> List[Message]:
    """Fetch a thread; the parent message comes first."""
    params = {"channel": channel_id, "ts": thread_ts, "limit": limit}
    items = paginate(client, "conversations.replies", params, "messages")
    with _decoding("conversations.replies"):
        return [Message.from_api(m, channel_id) for m in items]


# Reactions

def add_reaction(client: httpx.Client, channel_id: str, ts: str, name: str) -> None:
    params = {"channel": channel_id, "timestamp": ts, "name": normalize_emoji(name)}
    call_api(client, "reactions.add", params, method="POST")


def remove_reaction(client: httpx.Client, channel_id: str, ts: str, name: str) -> None:
    params = {"channel": channel_id, "timestamp": ts, "name": normalize_emoji(name)}
    call_api(client, "reactions.remove", params, method="POST")


# Team and auth

def get_team_info(client: httpx.Client) -> Team:
    data = call_api(client, "team.info")
    with _decoding("team.info"):
        return Team(**data["team"])


def auth_test(client: httpx.Client) -> AuthInfo:
    """Check the token and report who it belongs to."""
    data = call_api(client, "auth.test", method="POST")
    with _decoding("auth.test"):
        return AuthInfo(**data)


# Search

def search_messages(
    client: httpx.Client,
    query: str,
    count: int = 20,
    page: int = 1,
    sort: str = "timestamp",
    sort_dir: str = "desc",
) -> SearchResult:
    params = {
        "query": query,
        "count": count,
        "page": page,
        "sort": sort,
        "sort_dir": sort_dir,
    }
    data = call_api(client, "search.messages", params)
    messages = data.get("messages") or {}
    paging = messages.get("paging") or {}
    with _decoding("search.messages"):
        return SearchResult(
            query=query,
            total=messages.get("total", 0),
            page=paging.get("page", page),
            pages=paging.get("pages", 1),
            matches=[SearchMatch.from_api(m) for m in messages.get("matches") or []],
        )
