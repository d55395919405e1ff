"""Printing results and errors."""

import json
import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator

import typer
import yaml
from pydantic import BaseModel

from ..errors import SlackChatError

logger = logging.getLogger(__name__)


def to_plain(data: Any) -> Any:
    """Convert models (and lists/dicts of them) to plain data."""
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, (list, tuple)):
        return [to_plain(item) for item in data]
    if isinstance(data, dict):
        return {key: to_plain(value) for key, value in data.items()}
    return data


def render(data: Any, as_json: bool = False) -> None:
    """Print a result as YAML, or as JSON when requested."""
    plain = to_plain(data)
    if as_json:
        print(json.dumps(plain, indent=2, ensure_ascii=False))
    else:
        print(yaml.dump(plain, indent=2, sort_keys=False, allow_unicode=True), end="")


@contextmanager
def handle_errors() -> Iterator[None]:
    """Report expected failures on stderr and exit with their code."""
    try:
        yield
    except SlackChatError as e:
        logger.debug("command failed", exc_info=True)
        print(f"❌ {e}", file=sys.stderr)
        raise typer.Exit(e.exit_code)
