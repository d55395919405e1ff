"""API token lookup and storage.

The token comes from ``SLACK_API_TOKEN`` when set, otherwise from
``api_token`` in the YAML config file under the XDG config directory.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..errors import AuthError, SlackChatError
from .api import ClientConfig
from .const import API_BASE_URL, BASE_URL_ENV_VAR, TOKEN_ENV_VAR, get_config_file

TOKEN_KEY = "api_token"


def _load_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise SlackChatError(f"could not parse config file {path}: {e}") from e
    return data if isinstance(data, dict) else {}


def _write_file(path: Path, data: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    # new files are owner-only from the start; existing ones are tightened
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    path.chmod(0o600)


def token_source() -> Optional[str]:
    """Where the active token comes from: 'env', 'file' or None."""
    if os.environ.get(TOKEN_ENV_VAR):
        return "env"
    if _load_file(get_config_file()).get(TOKEN_KEY):
        return "file"
    return None


def resolve_token() -> str:
    token = os.environ.get(TOKEN_ENV_VAR)
    if token:
        return token
    token = _load_file(get_config_file()).get(TOKEN_KEY)
    if token:
        return str(token)
    raise AuthError(
        f"no API token configured: set {TOKEN_ENV_VAR} or run 'slack-chat config set-token'"
    )


def save_token(token: str) -> Path:
    path = get_config_file()
    data = _load_file(path)
    data[TOKEN_KEY] = token
    _write_file(path, data)
    return path


def delete_token() -> bool:
    """Remove the stored token. Returns False when none was stored."""
    path = get_config_file()
    data = _load_file(path)
    if TOKEN_KEY not in data:
        return False
    del data[TOKEN_KEY]
    _write_file(path, data)
    return True


def mask_token(token: str) -> str:
    if len(token) <= 12:
        return "*" * len(token)
    return f"{token[:6]}...{token[-4:]}"


def load_client_config() -> ClientConfig:
    """Build the connection settings for this invocation."""
    return ClientConfig(
        token=resolve_token(),
        base_url=os.environ.get(BASE_URL_ENV_VAR) or API_BASE_URL,
    )
