# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the transport layer)
# =============================================================================
#
# These dataclasses define the shape of everything that flows between the
# tool handlers and the HTTP client:
#
#   RequestOptions  ->  what to send (method, headers, body)
#   CallResult      ->  what came back: Success OR Failure, never an exception
#
# WHY A TAGGED RESULT INSTEAD OF EXCEPTIONS?
#   The consumer of every tool is an LLM, and it needs a renderable string in
#   every case.  If the client returned payloads on success and raised on
#   error, each of the five handlers would need its own try/except for three
#   different failure modes.  Instead each handler does one check:
#
#       result = await client.call(path)
#       if not result.ok:
#           return result.message
#
# All models are frozen: a result is created fresh per call and never mutated.
# =============================================================================

import enum
from dataclasses import dataclass
from typing import Any, Optional, Union


# -----------------------------------------------------------------------------
# RequestOptions - everything beyond the path needed for one HTTP request
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RequestOptions:
    """Method, headers and body for a single upstream request."""

    method: str = "GET"
    headers: Optional[dict[str, str]] = None
    body: Optional[Union[str, bytes]] = None


# -----------------------------------------------------------------------------
# FailureKind - which of the failure categories a Failure belongs to
# -----------------------------------------------------------------------------
class FailureKind(str, enum.Enum):
    HTTP_STATUS = "http_status"      # upstream answered with a non-2xx status
    UNREACHABLE = "unreachable"      # connection refused / DNS failure
    NETWORK = "network"              # any other transport-level fault
    INVALID_BODY = "invalid_body"    # 2xx response whose body is not a JSON object


@dataclass(frozen=True)
class Success:
    """A 2xx response with its parsed JSON object, passed through unmodified."""

    payload: dict[str, Any]
    ok = True


@dataclass(frozen=True)
class Failure:
    """A human-readable description of what went wrong, plus its category."""

    message: str
    kind: FailureKind
    ok = False


CallResult = Union[Success, Failure]
