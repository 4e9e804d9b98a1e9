"""Classification of failed requests into normalized errors.

Transport errors arrive in several shapes: ``httpx.HTTPStatusError`` with a
response attached, plain transport errors without one, or test doubles that
expose ``response.data``/``response.status``. Every probe below is guarded,
so a shape that cannot be read falls through to the next, less structured
variant instead of raising.
"""

from collections.abc import Callable, Mapping
from typing import Any

import httpx

from edgecli_sdk._internal.jsonutil import to_json_pretty
from edgecli_sdk.exceptions import (
    EdgeApiError,
    EdgeMalformedResponseError,
    EdgeRequestError,
)

TRACE_ID_HEADER = "x-trace-id"
COMMON_ERROR_MESSAGE = "Failed to retrieve the error response. "


def is_ok_status(code: Any) -> bool:
    """Check whether an HTTP status code is in the 2xx range.

    Numeric strings such as "200" are accepted.
    """
    if isinstance(code, str):
        try:
            code = int(code)
        except ValueError:
            return False
    return isinstance(code, int) and 200 <= code < 300


def _probe(read: Callable[[], Any]) -> Any:
    try:
        return read()
    except Exception:
        return None


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def status_of(response: Any) -> int | None:
    """Read the status code of a transport response, if it has one."""
    if response is None:
        return None
    status = _probe(lambda: _field(response, "status_code"))
    if status is None:
        status = _probe(lambda: _field(response, "status"))
    return status


def _response_data(response: Any) -> Any:
    data = _field(response, "data")
    if data is None and isinstance(response, httpx.Response):
        data = response.json()
    return data


def _structured_error(error: Any) -> EdgeApiError | None:
    if error is None:
        return None
    response = _probe(lambda: _field(error, "response"))
    if response is None:
        return None
    data = _probe(lambda: _response_data(response))
    if not isinstance(data, Mapping):
        return None
    headers = _probe(lambda: _field(response, "headers"))
    if headers is None:
        return None

    payload = dict(data)
    status = status_of(response)
    trace_id = _probe(lambda: headers.get(TRACE_ID_HEADER))
    if status is not None:
        payload["status"] = status
    if trace_id is not None:
        payload["traceId"] = trace_id
    return EdgeApiError(payload, status_code=status, trace_id=trace_id)


def classify_failure(
    error: Any,
    response: Any,
    body: Any,
    *,
    method: str,
    path: str,
) -> EdgeRequestError:
    """Turn a failed transport result into exactly one normalized error.

    Branches, in order:
        1. The error carries a structured body: EdgeApiError with
           ``status`` and ``traceId`` merged in.
        2. There is no error object at all: the raw response.
        3. The error has no response or no status: the raw error.
        4. Otherwise: the raw response body.

    Args:
        error: Transport error, or None when the call completed.
        response: Last response seen by the transport.
        body: Raw response body.
        method: HTTP method, for diagnostics.
        path: Final request path, for diagnostics.

    Returns:
        The normalized error. Never raises.
    """
    structured = _structured_error(error)
    if structured is not None:
        return structured

    if error is None:
        return EdgeMalformedResponseError(
            COMMON_ERROR_MESSAGE
            + f"No error object, but got status code {status_of(response)}",
            raw=response,
            reason="no_error_object",
        )

    error_response = _probe(lambda: _field(error, "response"))
    error_status = status_of(error_response)
    if error_response is None or not error_status:
        return EdgeMalformedResponseError(
            COMMON_ERROR_MESSAGE
            + f"Got error: {to_json_pretty(error)}, but error response section is incomplete",
            raw=error,
            reason="incomplete_error",
        )

    return EdgeMalformedResponseError(
        f"Got error code: {error_status} calling {method} {path}\n{body}",
        raw=body,
        reason="error_status",
    )
