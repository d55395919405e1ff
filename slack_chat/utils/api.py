"""HTTP Client for slack-chat CLI.

One ``call_api`` is one round trip to the Slack Web API. Responses are
``{"ok": bool, ...}`` envelopes; ``ok: false`` is a logical failure even
though Slack answers with HTTP 200.
"""

import logging
from typing import Any, Dict, List, Optional, Set

import httpx
from pydantic import BaseModel, ConfigDict, Field

from ..errors import APIError, DecodeError, ProtocolError, TransportError
from .const import API_BASE_URL, DEFAULT_MAX_PAGES, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class ClientConfig(BaseModel):
    """Immutable connection settings, built once per invocation."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(repr=False)
    base_url: str = API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def get_client(
    config: ClientConfig, transport: Optional[httpx.BaseTransport] = None
) -> httpx.Client:
    """Create an authenticated HTTP client for the API base URL."""
    return httpx.Client(
        base_url=config.base_url,
        headers={"Authorization": f"Bearer {config.token}"},
        timeout=config.timeout,
        transport=transport,
    )


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _decode(endpoint: str, response: httpx.Response) -> Dict[str, Any]:
    try:
        data = response.json()
    except ValueError as e:
        data, cause = None, str(e) or "body is not valid JSON"
    else:
        cause = "missing 'ok' field"

    if isinstance(data, dict) and "ok" in data:
        return data
    if not response.is_success:
        raise TransportError(endpoint, f"HTTP {response.status_code}")
    raise DecodeError(endpoint, cause)


def unwrap(endpoint: str, data: Dict[str, Any], raw: str = "") -> Dict[str, Any]:
    """Return the envelope on success, raise APIError when ok is false."""
    if not data.get("ok"):
        code = data.get("error") or "unknown_error"
        logger.debug("%s failed: %s", endpoint, code)
        raise APIError(endpoint, code, raw)
    return data


def call_api(
    client: httpx.Client,
    endpoint: str,
    params: Optional[Dict[str, Any]] = None,
    method: str = "GET",
) -> Dict[str, Any]:
    """Call a Slack API method and return the successful envelope.

    GET sends params in the query string (bools as ``true``/``false``,
    numbers as decimal strings); POST sends them as a JSON body. ``None``
    values are dropped in both cases.
    """
    params = {k: v for k, v in (params or {}).items() if v is not None}
    logger.debug("%s %s", method, endpoint)
    try:
        if method == "GET":
            response = client.get(
                endpoint, params={k: _query_value(v) for k, v in params.items()}
            )
        else:
            response = client.request(method, endpoint, json=params)
    except httpx.HTTPError as e:
        logger.debug("%s transport failure: %r", endpoint, e)
        raise TransportError(endpoint, str(e) or type(e).__name__) from e

    data = _decode(endpoint, response)
    return unwrap(endpoint, data, response.text)


def paginate(
    client: httpx.Client,
    endpoint: str,
    params: Dict[str, Any],
    items_key: str,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> List[Dict[str, Any]]:
    """Follow ``response_metadata.next_cursor`` until it comes back empty.

    Items are concatenated in request order. The first error aborts the
    whole call and nothing gathered so far is returned. An empty cursor is
    the only normal stop. A cursor the server already sent, or more than
    ``max_pages`` pages, raises ProtocolError.
    """
    items: List[Dict[str, Any]] = []
    seen: Set[str] = set()
    cursor = None
    for page in range(1, max_pages + 1):
        page_params = dict(params)
        if cursor:
            page_params["cursor"] = cursor
        data = call_api(client, endpoint, page_params)
        items.extend(data.get(items_key) or [])

        cursor = (data.get("response_metadata") or {}).get("next_cursor")
        if not cursor:
            logger.debug("%s: %d items over %d pages", endpoint, len(items), page)
            return items
        if cursor in seen:
            raise ProtocolError(endpoint, page, cursor)
        seen.add(cursor)
    raise ProtocolError(endpoint, max_pages)
