# =============================================================================
# core/client.py  -  Clawsfund API Transport Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues ONE HTTP request against the Clawsfund API and folds every outcome
#   into a CallResult (see core/models.py):
#
#     transport fault, connection marker    ->  Failure(UNREACHABLE)
#     transport fault, anything else        ->  Failure(NETWORK)
#     non-2xx status                        ->  Failure(HTTP_STATUS)
#     2xx with a non-JSON / non-object body ->  Failure(INVALID_BODY)
#     2xx with a JSON object                ->  Success(payload)
#
#   call() NEVER raises.  Handlers can rely on that, which is also what makes
#   asyncio.gather() in core/agents.py a "wait for both" join.
#
# WHAT IT DOES NOT DO:
#   No retries, no caching, no auth headers, no timeout override.  httpx's own
#   default timeout is the only bound on how long a call may suspend.
# =============================================================================

import logging
from typing import Optional

import httpx

from core.config import API_BASE
from core.models import CallResult, Failure, FailureKind, RequestOptions, Success

logger = logging.getLogger(__name__)

# Substrings (lower-cased) that mark a fault as "the backend is not there".
# Covers Node-style codes as well as the messages httpx/OS sockets produce.
CONNECTION_MARKERS = (
    "econnrefused",
    "connection refused",
    "fetch failed",
    "enotfound",
    "name or service not known",
    "nodename nor servname",
    "temporary failure in name resolution",
    "all connection attempts failed",
)


def is_connection_failure(message: str) -> bool:
    """True when a fault message names a refused or unresolvable connection."""
    lowered = message.lower()
    return any(marker in lowered for marker in CONNECTION_MARKERS)


def _fault_text(exc: BaseException) -> str:
    # httpx timeouts are often raised with an empty message
    return str(exc) or type(exc).__name__


def _read_body(response: httpx.Response) -> str:
    try:
        return response.text
    except Exception:  # noqa: BLE001
        return ""


class ClawsfundClient:
    """Async, stateless client for the Clawsfund API.

    Args:
        base_url: Endpoint Base prefixed verbatim to every path.
        transport: Optional httpx transport, used by tests to stub the API.
    """

    def __init__(
        self,
        base_url: str = API_BASE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self._transport = transport

    def _unreachable(self) -> str:
        return (
            f"Clawsfund API is not reachable at {self.base_url}. "
            "Make sure the backend is running."
        )

    async def call(self, path: str, options: Optional[RequestOptions] = None) -> CallResult:
        """Send one request to ``base_url + path`` and classify the outcome.

        Args:
            path: Path (and query string) appended verbatim to the base URL.
            options: Method, headers and body.  Defaults to a bare GET.

        Returns:
            Success with the parsed JSON object, or Failure with a message
            that is safe to hand straight back to the caller.
        """
        options = options or RequestOptions()
        url = f"{self.base_url}{path}"

        # --- Step 1: the request itself ---
        try:
            async with httpx.AsyncClient(transport=self._transport) as http:
                response = await http.request(
                    options.method,
                    url,
                    headers=options.headers,
                    content=options.body,
                )
        except Exception as exc:  # noqa: BLE001 - every fault becomes a Failure
            text = _fault_text(exc)
            logger.warning("%s %s failed: %s", options.method, url, text)
            if is_connection_failure(text):
                return Failure(self._unreachable(), FailureKind.UNREACHABLE)
            return Failure(f"Network error: {text}", FailureKind.NETWORK)

        # --- Step 2: HTTP-level errors ---
        if not response.is_success:
            body = _read_body(response)
            logger.warning("%s %s returned %s", options.method, url, response.status_code)
            return Failure(
                f"API returned {response.status_code}: {body}",
                FailureKind.HTTP_STATUS,
            )

        # --- Step 3: the body must be a JSON object ---
        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("%s %s returned a non-JSON body", options.method, url)
            return Failure(
                f"API returned an invalid JSON body: {exc}",
                FailureKind.INVALID_BODY,
            )
        if not isinstance(payload, dict):
            return Failure(
                f"API returned an invalid JSON body: expected an object, got {type(payload).__name__}",
                FailureKind.INVALID_BODY,
            )

        return Success(payload)
