"""Constants for slack-chat CLI."""

import os
from pathlib import Path

API_BASE_URL = "https://slack.com/api"
BASE_URL_ENV_VAR = "SLACK_API_BASE_URL"
TOKEN_ENV_VAR = "SLACK_API_TOKEN"

# httpx timeout in seconds, applied to connect and read alike
DEFAULT_TIMEOUT = 30.0

# Upper bound on pages fetched by one paginated call; repeated cursors are
# caught separately
DEFAULT_MAX_PAGES = 100_000

CONFIG_DIR_NAME = "slack-chat"
CONFIG_FILE_NAME = "config.yml"


def get_config_dir() -> Path:
    """Resolve the config directory, honouring XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / CONFIG_DIR_NAME


def get_config_file() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME
