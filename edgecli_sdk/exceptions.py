"""Public exceptions for the Edge CLI SDK."""

from typing import Any, Literal

from edgecli_sdk._internal.jsonutil import to_json_pretty

MalformedReason = Literal["no_error_object", "incomplete_error", "error_status"]


class EdgeCliError(Exception):
    """Base exception for all Edge CLI SDK errors."""


class EdgeConfigError(EdgeCliError):
    """Configuration error (account key set twice, missing auth step, bad env)."""


class EdgeRequestError(EdgeCliError):
    """A request that did not produce a success envelope."""


class EdgeTimeoutError(EdgeRequestError):
    """The deadline elapsed before the request settled."""

    def __init__(self, timeout_ms: int) -> None:
        super().__init__(f"Timed out in {timeout_ms} ms.")
        self.timeout_ms = timeout_ms


class EdgeApiError(EdgeRequestError):
    """Structured error body returned by the API.

    The payload is the API's error object with ``status`` and ``traceId``
    merged in when available. ``str(error)`` is the payload pretty-printed.
    """

    def __init__(
        self,
        payload: dict[str, Any],
        status_code: int | None = None,
        trace_id: str | None = None,
    ) -> None:
        super().__init__(to_json_pretty(payload))
        self.payload = payload
        self.status_code = status_code
        self.trace_id = trace_id


class EdgeMalformedResponseError(EdgeRequestError):
    """Failure whose error shape could not be interpreted.

    ``raw`` is the unmodified value the failure is surfaced with: the
    response, the transport error, or the response body depending on
    ``reason``.
    """

    def __init__(self, message: str, raw: Any, reason: MalformedReason) -> None:
        super().__init__(message)
        self.raw = raw
        self.reason = reason
