"""Team commands."""

import typer

from ..utils import handle_errors, render
from ..utils import slack
from . import get_state, open_client

app = typer.Typer(help="Workspace information")


@app.command("info")
def team_info(ctx: typer.Context):
    """Show the workspace the token belongs to."""
    with handle_errors():
        with open_client(ctx) as client:
            team = slack.get_team_info(client)
        render(team, as_json=get_state(ctx).json_output)
