"""Final path and header assembly for outgoing requests."""

from collections.abc import Mapping

from edgecli_sdk._internal.dispatch.models import (
    ACCOUNT_SWITCH_KEY_PARAM,
    EDGEKV_API_BASE,
    EDGEKV_METRIC_HEADER,
    EDGEKV_VERSION_HEADER,
    EDGEWORKERS_API_BASE,
    EDGEWORKERS_CLIENT_HEADER,
    EDGEWORKERS_CLIENT_VALUE,
    RequestContext,
)


def scope_to_account(path: str, account_switch_key: str | None) -> str:
    """Append the account switch key to ``path`` when one is set."""
    if not account_switch_key:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{ACCOUNT_SWITCH_KEY_PARAM}={account_switch_key}"


def build_request(
    path: str,
    headers: Mapping[str, str],
    *,
    context: RequestContext,
    metric_type: str | None = None,
) -> tuple[str, dict[str, str]]:
    """Build the final path and header set for a request.

    The caller's headers are copied, never mutated. API identification
    headers are chosen by substring match on the final path; a path matching
    both API bases gets both header sets.

    Args:
        path: Path relative to the API host, optionally with a query string.
        headers: Caller-supplied headers.
        context: Request context holding the account key and CLI version.
        metric_type: Classification sent to the EdgeKV API.

    Returns:
        Tuple of (final path, final headers).
    """
    final_path = scope_to_account(path, context.account_switch_key)
    final_headers = dict(headers)

    if EDGEWORKERS_API_BASE in final_path:
        final_headers[EDGEWORKERS_CLIENT_HEADER] = EDGEWORKERS_CLIENT_VALUE

    if EDGEKV_API_BASE in final_path:
        final_headers[EDGEKV_VERSION_HEADER] = context.cli_version
        if metric_type is not None:
            final_headers[EDGEKV_METRIC_HEADER] = metric_type

    return final_path, final_headers
