"""Pydantic models for the Edge CLI request dispatch layer.

These models describe the values that flow through one dispatch: the
per-process request context, the descriptor handed to the authenticator,
the transport's completion value and the success envelope returned to callers.
"""

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from edgecli_sdk._version import __version__

# =============================================================================
# Constants
# =============================================================================

EDGEWORKERS_API_BASE = "/edgeworkers/v1"
EDGEKV_API_BASE = "/edgekv/v1"

EDGEWORKERS_CLIENT_HEADER = "X-EW-CLIENT"
EDGEWORKERS_CLIENT_VALUE = "CLI"
EDGEKV_VERSION_HEADER = "X-AK-EDGEKV-CLI-VER"
EDGEKV_METRIC_HEADER = "X-AK-EDGEKV-CLI"

ACCOUNT_SWITCH_KEY_PARAM = "accountSwitchKey"

# =============================================================================
# Request Context
# =============================================================================


class RequestContext(BaseModel):
    """Values shared by every request of one CLI run.

    Fields:
        account_switch_key: Account to scope every call to, appended to the
            query string when set.
        cli_version: Version string sent to the EdgeKV API.
    """

    account_switch_key: str | None = None
    cli_version: str = __version__

    model_config = {"frozen": True}


# =============================================================================
# Request / Response Models
# =============================================================================


class RequestDescriptor(BaseModel):
    """Request handed to the authenticator for signing.

    Extra fields supplied through ``request_config`` are kept verbatim and
    are visible to the authenticator through ``model_extra``.
    """

    path: str
    method: str
    headers: dict[str, Any] = Field(default_factory=dict)
    body: Any = None

    model_config = {"frozen": True, "extra": "allow"}


class TransportResult(BaseModel):
    """Single completion value of an authenticator's ``send()``."""

    error: Any = None
    response: Any = None
    body: Any = None

    model_config = {"frozen": True}


class ResponseEnvelope(BaseModel):
    """Successful response returned by the dispatcher.

    ``body`` is the parsed JSON value, the raw string when the body is not
    JSON, or None when the API returned an empty body.
    """

    response: Any
    body: Any = None

    model_config = {"frozen": True}


# =============================================================================
# Collaborator Protocols
# =============================================================================


@runtime_checkable
class Authenticator(Protocol):
    """Signs one request and performs its network I/O.

    ``auth`` is called exactly once with the request descriptor, then
    ``send`` is awaited exactly once and resolves to a TransportResult.
    """

    def auth(self, descriptor: RequestDescriptor) -> None: ...

    async def send(self) -> TransportResult: ...
