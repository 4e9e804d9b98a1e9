"""Request dispatch for the EdgeWorkers and EdgeKV APIs."""

from edgecli_sdk._internal.dispatch.builder import build_request
from edgecli_sdk._internal.dispatch.client import EdgeRequestClient
from edgecli_sdk._internal.dispatch.models import (
    Authenticator,
    RequestContext,
    RequestDescriptor,
    ResponseEnvelope,
    TransportResult,
)
from edgecli_sdk._internal.dispatch.normalize import classify_failure, is_ok_status
from edgecli_sdk._internal.dispatch.timeout import race

__all__ = [
    "EdgeRequestClient",
    "Authenticator",
    "RequestContext",
    "RequestDescriptor",
    "ResponseEnvelope",
    "TransportResult",
    "build_request",
    "classify_failure",
    "is_ok_status",
    "race",
]
