"""Shared HTTP client configuration and the default authenticator."""

from typing import Any

import httpx

from edgecli_sdk._internal.dispatch.models import RequestDescriptor, TransportResult
from edgecli_sdk._version import __version__
from edgecli_sdk.exceptions import EdgeConfigError

DEFAULT_TIMEOUT_MS = 120000


def create_async_http_client(*, base_url: str | None = None) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    The client has no timeout of its own; request deadlines are enforced by
    the dispatcher's timeout race.

    Args:
        base_url: Optional base URL for all requests.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=None,
        base_url=base_url or "",
        headers={"User-Agent": f"edgecli-sdk/{__version__}"},
    )


class HttpxAuthenticator:
    """Authenticator that sends requests with httpx.

    Signing is delegated to ``signer``, any ``httpx.Auth`` implementation
    (for example an EdgeGrid signer). One instance handles one request.
    """

    def __init__(
        self,
        base_url: str,
        *,
        signer: httpx.Auth | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the authenticator.

        Args:
            base_url: Scheme and host of the API, e.g. "https://akab-xxx.luna.akamaiapis.net".
            signer: httpx auth flow that signs the outgoing request.
            client: Optional client to send through. A short-lived client is
                created per request when omitted.
        """
        self._base_url = base_url.rstrip("/")
        self._signer = signer
        self._client = client
        self._request: httpx.Request | None = None

    def auth(self, descriptor: RequestDescriptor) -> None:
        """Prepare the request described by ``descriptor``."""
        kwargs: dict[str, Any] = {"headers": descriptor.headers}
        body = descriptor.body
        if isinstance(body, (str, bytes)):
            if body:
                kwargs["content"] = body
        elif body is not None:
            kwargs["json"] = body

        self._request = httpx.Request(
            descriptor.method,
            f"{self._base_url}{descriptor.path}",
            **kwargs,
        )

    async def send(self) -> TransportResult:
        """Send the prepared request.

        Transport errors and non-2xx responses are returned in the result,
        never raised.

        Returns:
            TransportResult with the error (if any), response and body text.
        """
        if self._request is None:
            raise EdgeConfigError("auth() must be called before send()")

        try:
            if self._client is not None:
                response = await self._client.send(self._request, auth=self._signer)
            else:
                async with create_async_http_client() as client:
                    response = await client.send(self._request, auth=self._signer)
        except httpx.HTTPError as e:
            return TransportResult(error=e)

        body = response.text
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            return TransportResult(error=e, response=response, body=body)
        return TransportResult(response=response, body=body)
