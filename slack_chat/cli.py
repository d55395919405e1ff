import logging

import typer

from . import __version__
from .commands import AppState
from .commands import channels, config, messages, search, team, users

app = typer.Typer(help="Slack CLI for channels, messages, reactions and search")

app.add_typer(channels.app, name="channels")
app.add_typer(users.app, name="users")
app.add_typer(messages.app, name="messages")
app.add_typer(search.app, name="search")
app.add_typer(team.app, name="team")
app.add_typer(config.app, name="config")


@app.callback()
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of YAML"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP calls to stderr"),
):
    """Slack CLI for channels, messages, reactions and search."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    # httpx logs every request at INFO; keep it quiet unless asked
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)

    state = ctx.ensure_object(AppState)
    state.json_output = json_output


@app.command("version")
def version():
    """Show the slack-chat version."""
    print(f"slack-chat {__version__}")


if __name__ == "__main__":
    app()
