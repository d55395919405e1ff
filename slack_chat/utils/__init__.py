"""Utility functions for slack-chat CLI."""

from .const import (
    API_BASE_URL,
    TOKEN_ENV_VAR,
    BASE_URL_ENV_VAR,
    get_config_file,
)

from .api import (
    ClientConfig,
    get_client,
    call_api,
    paginate,
)

from .tokens import (
    resolve_token,
    load_client_config,
)

from .formatting import (
    format_timestamp,
    truncate_text,
    unescape_shell_chars,
)

from .output import (
    render,
    handle_errors,
)
