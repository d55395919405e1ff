"""Search commands."""

import typer

from ..utils import handle_errors, render, truncate_text
from ..utils import slack, validate
from ..utils.search import QueryOptions, build_query, validate_query_options
from . import get_state, open_client

app = typer.Typer(help="Search operations")


@app.command("messages")
def search_messages(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Search query"),
    scope: str = typer.Option("", "--scope", help="all, public, private, dm, mpim"),
    in_channel: str = typer.Option("", "--in", help="Only in this channel (#name)"),
    from_user: str = typer.Option("", "--from", help="Only from this user (@handle)"),
    after: str = typer.Option("", "--after", help="After date (YYYY-MM-DD)"),
    before: str = typer.Option("", "--before", help="Before date (YYYY-MM-DD)"),
    has_link: bool = typer.Option(False, "--has-link", help="Only messages with links"),
    has_reaction: bool = typer.Option(False, "--has-reaction", help="Only messages with reactions"),
    has_pin: bool = typer.Option(False, "--has-pin", help="Only pinned messages"),
    file_type: str = typer.Option("", "--type", help="Only messages with this file type"),
    count: int = typer.Option(20, "--count", "-n", help="Results per page"),
    page: int = typer.Option(1, "--page", help="Result page"),
    sort: str = typer.Option("timestamp", "--sort", help="timestamp or score"),
    sort_dir: str = typer.Option("desc", "--sort-dir", help="asc or desc"),
):
    """Search for messages.

    Examples:

        slack-chat search messages "deploy" --in general --after 2025-01-01

        slack-chat search messages "outage" --from alice --has-link
    """
    opts = QueryOptions(
        scope=scope,
        in_channel=in_channel,
        from_user=from_user,
        after=after,
        before=before,
        has_link=has_link,
        has_reaction=has_reaction,
        has_pin=has_pin,
        file_type=file_type,
    )
    with handle_errors():
        validate_query_options(opts)
        validate.limit(count)
        validate.page(page)
        full_query = build_query(query, opts)

        with open_client(ctx) as client:
            result = slack.search_messages(
                client, full_query, count=count, page=page, sort=sort, sort_dir=sort_dir
            )

        if get_state(ctx).json_output:
            render(result, as_json=True)
            return
        render(
            {
                "query": result.query,
                "total": result.total,
                "page": f"{result.page}/{result.pages}",
                "matches": [
                    {
                        "timestamp": m.ts,
                        "channel": f"#{m.channel_name or m.channel_id}",
                        "from": m.username or m.user,
                        "text": truncate_text(m.text, 80),
                        "permalink": m.permalink,
                    }
                    for m in result.matches
                ],
            }
        )
