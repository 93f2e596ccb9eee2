"""JSON serialization helpers using optional orjson."""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import datetime
import enum
import json
from pathlib import PurePath


def to_jsonable(obj: object) -> object:
    """Convert values the JSON encoders do not know about.

    Args:
        obj: Object that could not be serialized directly.

    Returns:
        A JSON compatible representation of ``obj``.

    Raises:
        TypeError: If ``obj`` has no known representation.
    """

    if isinstance(obj, PurePath):
        return obj.as_posix()
    if isinstance(obj, (datetime.date, datetime.time)):
        return obj.isoformat()
    if isinstance(obj, enum.Enum):
        return obj.value
    raise TypeError(f"Object of type {type(obj).__name__} is not serializable")


def json_dumps(data: object, indent: bool = False) -> str:
    """Serialize data to a JSON string.

    Args:
        data: Data structure to serialize. Paths, dates and enums are
            converted through ``to_jsonable``.
        indent: Pretty print with two space indentation.

    Returns:
        JSON representation of ``data``.
    """

    if orjson is not None:
        option = orjson.OPT_NON_STR_KEYS
        if indent:
            option |= orjson.OPT_INDENT_2
        return orjson.dumps(data, default=to_jsonable, option=option).decode()
    return json.dumps(
        data,
        default=to_jsonable,
        ensure_ascii=False,
        indent=2 if indent else None,
    )


def json_loads(data: str | bytes) -> object:
    """Deserialize JSON data from a string or bytes.

    Args:
        data: JSON content as ``str`` or ``bytes``.

    Returns:
        Parsed JSON object.
    """

    if orjson is not None:
        return orjson.loads(data)
    if isinstance(data, (bytes, bytearray)):
        return json.loads(data.decode())
    return json.loads(data)
