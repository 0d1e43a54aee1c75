# =============================================================================
# core/client.py  —  Dispatch Layer (every outbound HTTP call lives here)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns (endpoint, method, body, query params, target) into one HTTP
#   request against MessageBird, and classifies what comes back:
#
#     204          → {}                         (body never read)
#     other 2xx    → parsed JSON, verbatim
#     429          → ApiError(429, fixed rate-limit message)
#     other status → ApiError(status, "API error (<status>): <description>")
#
#   Network failures (DNS, resets, ...) are NOT caught here.  They propagate
#   to the handler boundary in core/results.py, which formats them.
#
# WHAT IT DOES NOT DO:
#   No retries, no logging, no timeout, no state shared between calls.
#   Each request opens its own httpx.AsyncClient and closes it afterwards;
#   the body is fully read before the client closes.
# =============================================================================

from typing import Any, Optional
from urllib.parse import quote, urlencode

import httpx

from core.config import Settings, base_url
from core.models import ApiTarget, RequestSpec


RATE_LIMIT_MESSAGE = "rate limit exceeded, try again shortly."


class ApiError(Exception):
    """A classified non-success HTTP response from MessageBird."""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message

    @property
    def is_rate_limited(self) -> bool:
        return self.status == 429


def path_segment(value: str) -> str:
    """Percent-encode one path segment taken from tool input."""
    return quote(str(value), safe="")


def build_url(base: str, endpoint: str, query_params: Optional[dict[str, Optional[str]]] = None) -> str:
    """Join base URL, endpoint and the surviving query parameters.

    Entries whose value is None or "" are dropped.  If nothing survives, no
    "?" is appended.
    """
    url = f"{base}{endpoint}"
    if query_params:
        kept = [(key, value) for key, value in query_params.items() if value is not None and value != ""]
        if kept:
            url += f"?{urlencode(kept)}"
    return url


def build_headers(api_key: str, has_body: bool) -> dict[str, str]:
    headers = {
        "Authorization": f"AccessKey {api_key}",
        "Accept": "application/json",
    }
    if has_body:
        headers["Content-Type"] = "application/json"
    return headers


def parse_error_body(response: httpx.Response) -> dict[str, Any]:
    """Best-effort JSON parse of an error body; anything unusable becomes {}."""
    try:
        parsed = response.json()
    except ValueError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


def error_description(payload: dict[str, Any]) -> Optional[str]:
    """Pull ``errors[0].description`` out of a MessageBird error payload."""
    errors = payload.get("errors")
    if not isinstance(errors, list) or not errors:
        return None
    first = errors[0]
    if not isinstance(first, dict):
        return None
    description = first.get("description")
    if isinstance(description, str) and description:
        return description
    return None


def classify_response(response: httpx.Response) -> Any:
    """Map an HTTP response to a success value, or raise ApiError."""
    status = response.status_code

    if status == 204:
        return {}

    if 200 <= status < 300:
        return response.json()

    if status == 429:
        raise ApiError(429, RATE_LIMIT_MESSAGE)

    detail = error_description(parse_error_body(response)) or response.reason_phrase
    raise ApiError(status, f"API error ({status}): {detail}")


class MessageBirdClient:
    """Authenticated HTTP dispatcher for the three MessageBird services.

    Args:
        settings: Startup configuration holding the access key.
        transport: Optional httpx transport, used by tests to fake the API.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._settings = settings
        self._transport = transport

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Optional[dict[str, Any]] = None,
        query_params: Optional[dict[str, Optional[str]]] = None,
        target: ApiTarget = ApiTarget.CONVERSATIONS,
    ) -> Any:
        """Perform one call and return its classified result."""
        spec = RequestSpec(
            endpoint=endpoint,
            method=method,
            body=body,
            query_params=query_params,
            target=target,
        )
        return await self.send(spec)

    async def send(self, spec: RequestSpec) -> Any:
        url = build_url(base_url(spec.target), spec.endpoint, spec.query_params)
        has_body = spec.body is not None
        headers = build_headers(self._settings.api_key, has_body)

        async with httpx.AsyncClient(transport=self._transport, timeout=None) as http:
            response = await http.request(
                spec.method,
                url,
                headers=headers,
                json=spec.body if has_body else None,
            )

        return classify_response(response)
