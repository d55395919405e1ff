"""Command groups for slack-chat CLI."""

from typing import Optional

import httpx
import typer

from ..utils import get_client, load_client_config


class AppState:
    """Per-invocation CLI state, stored on the typer context."""

    def __init__(
        self,
        json_output: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.json_output = json_output
        self.transport = transport


def get_state(ctx: typer.Context) -> AppState:
    return ctx.ensure_object(AppState)


def open_client(ctx: typer.Context) -> httpx.Client:
    """Resolve the token and open a client; fails before any request if unset."""
    return get_client(load_client_config(), transport=get_state(ctx).transport)
