"""JSON helpers shared by the dispatch layer."""

import json
from typing import Any


def parse_if_json(value: Any) -> Any:
    """Parse ``value`` as JSON when possible, otherwise return it unchanged."""
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except ValueError:
        return value


def to_json_pretty(value: Any) -> str:
    """Render ``value`` as 2-space indented JSON."""
    return json.dumps(value, indent=2, default=str)
