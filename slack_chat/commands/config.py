"""Token configuration commands."""

from typing import Optional

import typer

from ..errors import ValidationError
from ..utils import get_config_file, handle_errors, render
from ..utils import slack
from ..utils.const import TOKEN_ENV_VAR
from ..utils.tokens import delete_token, mask_token, resolve_token, save_token, token_source
from . import get_state, open_client

app = typer.Typer(help="Manage the Slack API token")


@app.command("set-token")
def set_token(
    token: Optional[str] = typer.Argument(
        None, help="API token (xoxb-, xoxp-, ...); prompted for when omitted"
    ),
):
    """Store the Slack API token in the config file."""
    with handle_errors():
        if not token:
            token = typer.prompt("Slack API token", hide_input=True, default="", show_default=False)
        token = token.strip()
        if not token:
            raise ValidationError("token cannot be empty")
        path = save_token(token)
        print(f"✅ API token saved to {path}")


@app.command("delete-token")
def delete_token_command(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
):
    """Delete the stored Slack API token."""
    with handle_errors():
        if not force:
            print("About to delete the stored Slack API token.")
            if not typer.confirm("Are you sure?"):
                print("Cancelled.")
                return
        if delete_token():
            print("API token deleted from config file")
        else:
            print("No stored API token.")


@app.command("show")
def show(ctx: typer.Context):
    """Show where the token comes from (masked)."""
    with handle_errors():
        source = token_source()
        output = {"config_file": str(get_config_file())}
        if source is None:
            output["token"] = "Not configured"
        else:
            output["token"] = mask_token(resolve_token())
            output["source"] = TOKEN_ENV_VAR if source == "env" else "config file"
        render(output, get_state(ctx).json_output)


@app.command("test")
def test(ctx: typer.Context):
    """Verify that the configured token authenticates with Slack."""
    state = get_state(ctx)
    with handle_errors():
        if not state.json_output:
            print("Testing Slack authentication...")
        with open_client(ctx) as client:
            info = slack.auth_test(client)

        if state.json_output:
            render(info, as_json=True)
            return
        result = {"ok": True, "workspace": info.team, "user": info.user}
        if info.bot_id:
            result["bot_id"] = info.bot_id
        render(result)
