"""Request dispatch client for the EdgeWorkers and EdgeKV APIs."""

import os
import sys
from collections.abc import Callable, Mapping
from typing import Any

from edgecli_sdk._internal.dispatch.builder import build_request
from edgecli_sdk._internal.dispatch.models import (
    Authenticator,
    RequestContext,
    RequestDescriptor,
    ResponseEnvelope,
)
from edgecli_sdk._internal.dispatch.normalize import (
    classify_failure,
    is_ok_status,
    status_of,
)
from edgecli_sdk._internal.dispatch.redaction import redact_payload
from edgecli_sdk._internal.dispatch.timeout import race
from edgecli_sdk._internal.jsonutil import parse_if_json
from edgecli_sdk.exceptions import EdgeConfigError, EdgeMalformedResponseError

JSON_HEADERS = {"Content-Type": "application/json"}


def normalize_body(body: Any) -> Any:
    """Normalize a success body: empty or null-ish bodies become None.

    Empty containers are real values and are kept.
    """
    if body is None or body in ("", "null", b"", b"null"):
        return None
    if isinstance(body, (int, float)) and not body:
        return None
    return parse_if_json(body)


class EdgeRequestClient:
    """Single dispatch point for EdgeWorkers and EdgeKV API calls.

    Every verb helper goes through `dispatch()`, which builds the request,
    has it signed by a fresh authenticator, sends it and normalizes the
    outcome, all under a caller-supplied deadline.

    Use `EdgeRequestClient.from_env()` to pick up the account key and debug
    flag from environment variables.
    """

    def __init__(
        self,
        authenticator_factory: Callable[[], Authenticator],
        *,
        context: RequestContext | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            authenticator_factory: Returns a new authenticator per request.
            context: Request context; defaults to no account key.
            debug: Enable debug logging to stderr.
        """
        self._authenticator_factory = authenticator_factory
        self._context = context or RequestContext()
        self._debug = debug

    @classmethod
    def from_env(
        cls, authenticator_factory: Callable[[], Authenticator]
    ) -> "EdgeRequestClient":
        """Create a client from environment variables.

        Optional environment variables:
            EDGE_CLI_ACCOUNT_KEY: Account switch key added to every request.
            EDGE_CLI_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured EdgeRequestClient.
        """
        account_key = os.environ.get("EDGE_CLI_ACCOUNT_KEY") or None
        debug = os.environ.get("EDGE_CLI_DEBUG", "") == "1"
        return cls(
            authenticator_factory,
            context=RequestContext(account_switch_key=account_key),
            debug=debug,
        )

    @property
    def context(self) -> RequestContext:
        """The request context shared by every call of this client."""
        return self._context

    def set_account_key(self, account: str) -> None:
        """Scope all subsequent requests to ``account``.

        Raises:
            EdgeConfigError: If an account key is already set.
        """
        if self._context.account_switch_key is not None:
            raise EdgeConfigError("Account switch key is already set")
        self._context = self._context.model_copy(update={"account_switch_key": account})

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[edgecli-sdk] {message}", file=sys.stderr)

    def _log_error(self, message: str) -> None:
        """Log a diagnostic message to stderr."""
        print(f"[edgecli-sdk] {message}", file=sys.stderr)

    async def dispatch(
        self,
        path: str,
        method: str,
        body: Any,
        headers: Mapping[str, str],
        timeout_ms: int,
        metric_type: str | None = None,
        request_config: Mapping[str, Any] | None = None,
    ) -> ResponseEnvelope:
        """Authenticate and send a request, racing it against a deadline.

        This is the core dispatch method. All verb helpers call this.

        Args:
            path: Path relative to the API host, optionally with a query string.
            method: HTTP method.
            body: Request body, passed to the authenticator unmodified.
            headers: Caller-supplied headers.
            timeout_ms: Deadline for the whole call in milliseconds.
            metric_type: Classification sent to the EdgeKV API.
            request_config: Extra fields merged into the request descriptor;
                may override path, method, headers or body.

        Returns:
            ResponseEnvelope with the transport response and parsed body.

        Raises:
            EdgeTimeoutError: If the deadline elapsed first.
            EdgeApiError: If the API returned a structured error.
            EdgeMalformedResponseError: If the failure could not be interpreted.
        """
        return await race(
            timeout_ms,
            self._send(path, method, body, headers, metric_type, request_config),
        )

    async def _send(
        self,
        path: str,
        method: str,
        body: Any,
        headers: Mapping[str, str],
        metric_type: str | None,
        request_config: Mapping[str, Any] | None,
    ) -> ResponseEnvelope:
        final_path, final_headers = build_request(
            path, headers, context=self._context, metric_type=metric_type
        )
        descriptor = RequestDescriptor.model_construct(**{
            "path": final_path,
            "method": method,
            "headers": final_headers,
            "body": body,
            **(request_config or {}),
        })

        authenticator = self._authenticator_factory()
        authenticator.auth(descriptor)
        self._log_debug(f"Sending request: {redact_payload(descriptor.model_dump())}")
        result = await authenticator.send()

        if result.error is None and is_ok_status(status_of(result.response)):
            self._log_debug(f"{method} {final_path} succeeded")
            return ResponseEnvelope(response=result.response, body=normalize_body(result.body))

        failure = classify_failure(
            result.error, result.response, result.body, method=method, path=final_path
        )
        if isinstance(failure, EdgeMalformedResponseError):
            self._log_error(str(failure))
        raise failure

    # =========================================================================
    # Verb Helpers
    # =========================================================================

    async def get_json(
        self,
        path: str,
        timeout_ms: int,
        metric_type: str | None = None,
        request_config: Mapping[str, Any] | None = None,
    ) -> ResponseEnvelope:
        """Send a GET request with no body."""
        return await self.dispatch(path, "GET", "", {}, timeout_ms, metric_type, request_config)

    async def delete_request(
        self,
        path: str,
        timeout_ms: int,
        metric_type: str | None = None,
        request_config: Mapping[str, Any] | None = None,
    ) -> ResponseEnvelope:
        """Send a DELETE request with no body."""
        return await self.dispatch(
            path, "DELETE", "", {}, timeout_ms, metric_type, request_config
        )

    async def post_json(
        self,
        path: str,
        body: Any,
        timeout_ms: int,
        metric_type: str | None = None,
        request_config: Mapping[str, Any] | None = None,
    ) -> ResponseEnvelope:
        """Send a POST request with a JSON content type.

        The body is passed through unmodified; serialization is left to the
        authenticator.
        """
        return await self.dispatch(
            path, "POST", body, JSON_HEADERS, timeout_ms, metric_type, request_config
        )

    async def put_json(
        self,
        path: str,
        body: Any,
        timeout_ms: int,
        metric_type: str | None = None,
        request_config: Mapping[str, Any] | None = None,
    ) -> ResponseEnvelope:
        """Send a PUT request with a JSON content type."""
        return await self.dispatch(
            path, "PUT", body, JSON_HEADERS, timeout_ms, metric_type, request_config
        )
