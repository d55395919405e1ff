"""Error taxonomy for slack-chat.

Every error raised while talking to Slack names the operation that was being
attempted. Nothing below the CLI boundary recovers from these; commands let
them propagate to ``utils.output.handle_errors``.
"""

from typing import Optional


class SlackChatError(Exception):
    """Base exception for expected CLI errors."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class AuthError(SlackChatError):
    """Raised when no API token can be resolved."""


class ValidationError(SlackChatError):
    """Raised for malformed command-line input."""


class TransportError(SlackChatError):
    """Raised when the HTTP exchange itself fails."""

    def __init__(self, operation: str, cause: str) -> None:
        super().__init__(f"{operation}: request failed: {cause}")
        self.operation = operation
        self.cause = cause


class DecodeError(SlackChatError):
    """Raised when a response body is not a JSON envelope."""

    def __init__(self, operation: str, cause: str) -> None:
        super().__init__(f"{operation}: invalid response: {cause}")
        self.operation = operation
        self.cause = cause


class APIError(SlackChatError):
    """Raised for Slack responses where ok=false.

    ``code`` is Slack's ``error`` field, kept verbatim so callers can match
    on values such as ``channel_not_found`` or ``invalid_auth``.
    """

    def __init__(self, operation: str, code: str, raw_message: Optional[str] = None) -> None:
        super().__init__(f"{operation}: {code}")
        self.operation = operation
        self.code = code
        self.raw_message = raw_message


class ProtocolError(SlackChatError):
    """Raised when pagination does not terminate.

    Either the server handed back a cursor it already sent (``cursor`` is
    set) or the page limit was reached.
    """

    def __init__(self, operation: str, pages: int, cursor: Optional[str] = None) -> None:
        if cursor:
            reason = f"cursor {cursor!r} repeated after {pages} pages"
        else:
            reason = f"pagination did not finish after {pages} pages"
        super().__init__(f"{operation}: {reason}")
        self.operation = operation
        self.pages = pages
        self.cursor = cursor
