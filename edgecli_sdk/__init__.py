"""Edge CLI SDK for Python.

Request dispatch layer shared by the EdgeWorkers and EdgeKV command-line
clients.

Public API:
    EdgeRequestClient - Dispatcher with GET/POST/PUT/DELETE helpers
    RequestContext - Per-run values (account switch key, CLI version)
    HttpxAuthenticator - Default authenticator backed by httpx
"""

from edgecli_sdk._internal.dispatch import (
    EdgeRequestClient,
    RequestContext,
    ResponseEnvelope,
)
from edgecli_sdk._internal.http import DEFAULT_TIMEOUT_MS, HttpxAuthenticator
from edgecli_sdk._version import __version__

__all__ = [
    "__version__",
    "DEFAULT_TIMEOUT_MS",
    "EdgeRequestClient",
    "HttpxAuthenticator",
    "RequestContext",
    "ResponseEnvelope",
]
