"""Redaction of credential-like values before request details are logged."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "authorization",
    "client_token",
    "client_secret",
    "access_token",
    "api_key",
    "token",
    "secret",
    "password",
    "private_key",
    "credentials",
    "edgerc",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Recursively redact sensitive keys from a request description.

    Creates a copy - the original payload is never mutated. Keys are
    compared case-insensitively with dashes treated as underscores, so
    ``Authorization`` and ``client-secret`` both match.

    Args:
        payload: The dictionary to redact sensitive values from.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    return _redact_recursive(payload)


def _normalize_key(key: Any) -> Any:
    if isinstance(key, str):
        return key.lower().replace("-", "_")
    return key


def _redact_recursive(obj: Any) -> Any:
    """Recursively redact sensitive keys."""
    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            if _normalize_key(key) in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = _redact_recursive(value)
        return result
    elif isinstance(obj, list):
        return [_redact_recursive(item) for item in obj]
    else:
        return obj
