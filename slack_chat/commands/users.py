"""User commands."""

import typer

from ..utils import handle_errors, render
from ..utils import slack, validate
from . import get_state, open_client

app = typer.Typer(help="User operations")


@app.command("list")
def list_users(
    ctx: typer.Context,
    limit: int = typer.Option(100, "--limit", "-n", help="Page size per request"),
):
    """List workspace members."""
    state = get_state(ctx)
    with handle_errors():
        validate.limit(limit)
        with open_client(ctx) as client:
            users = slack.list_users(client, limit=limit)

        if state.json_output:
            render(users, as_json=True)
            return
        render(
            {
                "user_count": len(users),
                "users": [
                    {
                        "id": u.id,
                        "name": u.name,
                        "real_name": u.real_name or u.display_name or u.name,
                        "admin": u.is_admin,
                        "bot": u.is_bot,
                    }
                    for u in users
                ],
            }
        )


@app.command("get")
def get_user(
    ctx: typer.Context,
    user: str = typer.Argument(..., help="User ID (e.g., U01234ABCDE)"),
):
    """Get information about a user."""
    with handle_errors():
        validate.user_id(user)
        with open_client(ctx) as client:
            info = slack.get_user_info(client, user)
        render(info, as_json=get_state(ctx).json_output)
