"""JSON serialization helpers using optional orjson."""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json

from annodm.errors import DecodeError


def json_dumps(data: object, indent: bool = False) -> str:
    """Serialize data to a JSON string.

    Key order of mappings is preserved as given; callers that need a
    particular order build their mappings in that order.

    Args:
        data: Data structure to serialize.
        indent: Pretty-print with two-space indentation.

    Returns:
        JSON representation of ``data``.
    """

    if orjson is not None:
        option = orjson.OPT_INDENT_2 if indent else 0
        return orjson.dumps(data, option=option).decode()
    return json.dumps(data, ensure_ascii=False, indent=2 if indent else None)


def json_loads(data: str | bytes) -> object:
    """Deserialize JSON data from a string or bytes.

    Args:
        data: JSON content as ``str`` or ``bytes``.

    Returns:
        Parsed JSON object.

    Throws:
        DecodeError: If ``data`` is not well-formed JSON.
    """

    try:
        if orjson is not None:
            return orjson.loads(data)
        if isinstance(data, (bytes, bytearray)):
            return json.loads(data.decode())
        return json.loads(data)
    except ValueError as exc:
        # Both orjson.JSONDecodeError and json.JSONDecodeError (and
        # UnicodeDecodeError) derive from ValueError.
        raise DecodeError(f"malformed JSON: {exc}") from exc
