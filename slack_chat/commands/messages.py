"""Message operations commands."""

import json
import sys
from typing import Any, List, Optional

import typer

from ..errors import ValidationError
from ..utils import format_timestamp, handle_errors, render, unescape_shell_chars
from ..utils import slack, validate
from . import get_state, open_client

app = typer.Typer(help="Message operations")


def _read_text(text: str) -> str:
    """Resolve the message text argument; '-' reads stdin."""
    if text == "-":
        text = sys.stdin.read().rstrip("\n")
    text = unescape_shell_chars(text)
    if not text:
        raise ValidationError("message text cannot be empty")
    return text


def _parse_blocks(blocks_json: Optional[str]) -> Optional[List[Any]]:
    if not blocks_json:
        return None
    try:
        blocks = json.loads(blocks_json)
    except json.JSONDecodeError as e:
        raise ValidationError(f"invalid blocks JSON: {e}") from e
    if not isinstance(blocks, list):
        raise ValidationError("invalid blocks JSON: expected an array of blocks")
    return blocks


def _message_rows(messages) -> List[dict]:
    return [
        {
            "timestamp": m.ts,
            "time": format_timestamp(m.ts),
            "user": m.user,
            "text": m.text,
            "reply_count": m.reply_count,
        }
        for m in messages
    ]


@app.command("send")
def send(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID"),
    text: str = typer.Argument(..., help="Message text, or '-' to read stdin"),
    thread: Optional[str] = typer.Option(
        None, "--thread", help="Thread timestamp to reply to"
    ),
    blocks_json: Optional[str] = typer.Option(
        None, "--blocks", help="Block Kit blocks as JSON array (overrides default formatting)"
    ),
    simple: bool = typer.Option(
        False, "--simple", help="Send as plain text without block formatting"
    ),
):
    """Send a message to a channel.

    By default the text is sent inside a Block Kit section for a more
    refined appearance. Use --simple to send plain text instead.

    Examples:

        slack-chat messages send C0A7RJWRZPT "Hello everyone!"

        echo "Hello" | slack-chat messages send C0A7RJWRZPT -

        slack-chat messages send C0A7RJWRZPT "Replying" --thread 1767815267.099869
    """
    with handle_errors():
        validate.channel_id(channel)
        if thread:
            validate.timestamp(thread)
        text = _read_text(text)
        blocks = _parse_blocks(blocks_json)

        with open_client(ctx) as client:
            msg = slack.send_message(
                client, channel, text, thread_ts=thread, blocks=blocks, simple=simple
            )

        if get_state(ctx).json_output:
            render(msg, as_json=True)
            return
        result = {"ok": True, "channel": msg.channel, "message_ts": msg.ts}
        if thread:
            result["thread_ts"] = thread
        render(result)


@app.command("update")
def update(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID"),
    ts: str = typer.Argument(..., help="Timestamp of the message to edit"),
    text: str = typer.Argument(..., help="New message text"),
    blocks_json: Optional[str] = typer.Option(
        None, "--blocks", help="Block Kit blocks as JSON array (overrides default formatting)"
    ),
    simple: bool = typer.Option(
        False, "--simple", help="Send as plain text without block formatting"
    ),
):
    """Edit a message."""
    with handle_errors():
        validate.channel_id(channel)
        validate.timestamp(ts)
        text = _read_text(text)
        blocks = _parse_blocks(blocks_json)

        with open_client(ctx) as client:
            msg = slack.update_message(client, channel, ts, text, blocks=blocks, simple=simple)
        render(msg, as_json=get_state(ctx).json_output)


@app.command("delete")
def delete(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID"),
    ts: str = typer.Argument(..., help="Timestamp of the message to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
):
    """Delete a message."""
    with handle_errors():
        validate.channel_id(channel)
        validate.timestamp(ts)
        if not force and not typer.confirm(f"Delete message {ts} in {channel}?"):
            print("Cancelled.")
            return

        with open_client(ctx) as client:
            slack.delete_message(client, channel, ts)
        render({"ok": True, "channel": channel, "deleted": ts}, get_state(ctx).json_output)


@app.command("history")
def history(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID"),
    limit: int = typer.Option(20, "--limit", "-n", help="Messages per page"),
    oldest: Optional[str] = typer.Option(None, "--oldest", help="Only messages after this timestamp"),
    latest: Optional[str] = typer.Option(None, "--latest", help="Only messages before this timestamp"),
):
    """Read channel history."""
    state = get_state(ctx)
    with handle_errors():
        validate.channel_id(channel)
        validate.limit(limit)
        for ts in (oldest, latest):
            if ts:
                validate.timestamp(ts)

        with open_client(ctx) as client:
            messages = slack.get_channel_history(
                client, channel, limit=limit, oldest=oldest, latest=latest
            )

        if state.json_output:
            render(messages, as_json=True)
            return
        render(
            {
                "channel_id": channel,
                "message_count": len(messages),
                "messages": _message_rows(messages),
            }
        )


@app.command("thread")
def thread(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID"),
    thread_ts: str = typer.Argument(..., help="Thread timestamp"),
    limit: int = typer.Option(100, "--limit", "-n", help="Replies per page"),
):
    """Read replies in a message thread."""
    state = get_state(ctx)
    with handle_errors():
        validate.channel_id(channel)
        validate.timestamp(thread_ts)
        validate.limit(limit)

        with open_client(ctx) as client:
            messages = slack.get_thread_replies(client, channel, thread_ts, limit=limit)

        if state.json_output:
            render(messages, as_json=True)
            return
        render(
            {
                "channel_id": channel,
                "thread_ts": thread_ts,
                "message_count": len(messages),
                "messages": _message_rows(messages),
            }
        )


@app.command("react")
def react(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID"),
    ts: str = typer.Argument(..., help="Message timestamp"),
    emoji: str = typer.Argument(..., help="Emoji name (e.g., 'thumbsup', ':eyes:')"),
):
    """Add an emoji reaction to a message.

    Emoji can be given with or without colons: thumbsup, :thumbsup:
    """
    with handle_errors():
        validate.channel_id(channel)
        validate.timestamp(ts)
        with open_client(ctx) as client:
            slack.add_reaction(client, channel, ts, emoji)
        render(
            {
                "ok": True,
                "channel": channel,
                "timestamp": ts,
                "emoji": validate.normalize_emoji(emoji),
            },
            get_state(ctx).json_output,
        )


@app.command("unreact")
def unreact(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID"),
    ts: str = typer.Argument(..., help="Message timestamp"),
    emoji: str = typer.Argument(..., help="Emoji name"),
):
    """Remove an emoji reaction from a message."""
    with handle_errors():
        validate.channel_id(channel)
        validate.timestamp(ts)
        with open_client(ctx) as client:
            slack.remove_reaction(client, channel, ts, emoji)
        render(
            {
                "ok": True,
                "channel": channel,
                "timestamp": ts,
                "emoji": validate.normalize_emoji(emoji),
                "removed": True,
            },
            get_state(ctx).json_output,
        )
