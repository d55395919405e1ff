"""Channel commands."""

from typing import List

import typer

from ..utils import handle_errors, render, truncate_text
from ..utils import slack, validate
from . import get_state, open_client

app = typer.Typer(help="Channel operations")


@app.command("list")
def list_channels(
    ctx: typer.Context,
    types: str = typer.Option(
        "public_channel",
        "--types",
        help="Comma-separated: public_channel, private_channel, mpim, im",
    ),
    include_archived: bool = typer.Option(
        False, "--include-archived", help="Include archived channels"
    ),
    limit: int = typer.Option(100, "--limit", "-n", help="Page size per request"),
):
    """List channels in the workspace."""
    state = get_state(ctx)
    with handle_errors():
        validate.limit(limit)
        with open_client(ctx) as client:
            channels = slack.list_channels(
                client, types=types, exclude_archived=not include_archived, limit=limit
            )

        if state.json_output:
            render(channels, as_json=True)
            return
        render(
            {
                "channel_count": len(channels),
                "channels": [
                    {
                        "id": ch.id,
                        "name": f"#{ch.name}",
                        "private": ch.is_private,
                        "archived": ch.is_archived,
                        "members": ch.num_members,
                        "topic": truncate_text(ch.topic),
                    }
                    for ch in channels
                ],
            }
        )


@app.command("get")
def get_channel(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID (e.g., C01234ABCDE)"),
):
    """Get information about a channel."""
    with handle_errors():
        validate.channel_id(channel)
        with open_client(ctx) as client:
            info = slack.get_channel_info(client, channel)
        render(info, as_json=get_state(ctx).json_output)


@app.command("create")
def create_channel(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Channel name"),
    private: bool = typer.Option(False, "--private", help="Create a private channel"),
):
    """Create a channel."""
    with handle_errors():
        with open_client(ctx) as client:
            created = slack.create_channel(client, name.lstrip("#"), is_private=private)
        render(created, as_json=get_state(ctx).json_output)


@app.command("archive")
def archive_channel(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID"),
):
    """Archive a channel."""
    with handle_errors():
        validate.channel_id(channel)
        with open_client(ctx) as client:
            slack.archive_channel(client, channel)
        render({"ok": True, "channel": channel, "archived": True}, get_state(ctx).json_output)


@app.command("unarchive")
def unarchive_channel(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID"),
):
    """Unarchive a channel."""
    with handle_errors():
        validate.channel_id(channel)
        with open_client(ctx) as client:
            slack.unarchive_channel(client, channel)
        render({"ok": True, "channel": channel, "archived": False}, get_state(ctx).json_output)


@app.command("set-topic")
def set_topic(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID"),
    topic: str = typer.Argument(..., help="New topic"),
):
    """Set a channel's topic."""
    with handle_errors():
        validate.channel_id(channel)
        with open_client(ctx) as client:
            slack.set_channel_topic(client, channel, topic)
        render({"ok": True, "channel": channel, "topic": topic}, get_state(ctx).json_output)


@app.command("set-purpose")
def set_purpose(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID"),
    purpose: str = typer.Argument(..., help="New purpose"),
):
    """Set a channel's purpose."""
    with handle_errors():
        validate.channel_id(channel)
        with open_client(ctx) as client:
            slack.set_channel_purpose(client, channel, purpose)
        render({"ok": True, "channel": channel, "purpose": purpose}, get_state(ctx).json_output)


@app.command("invite")
def invite(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Channel ID"),
    users: List[str] = typer.Argument(..., help="User IDs to invite"),
):
    """Invite users to a channel."""
    with handle_errors():
        validate.channel_id(channel)
        for user in users:
            validate.user_id(user)
        with open_client(ctx) as client:
            slack.invite_to_channel(client, channel, users)
        render({"ok": True, "channel": channel, "invited": users}, get_state(ctx).json_output)
