"""
Serialization of JSON values to compact or indented text.

The encoder walks containers with an explicit stack of frames, producing
text chunks that are joined once at the end. Scalars and strings are
rendered by small helpers shared by both layouts.
"""

import math
from collections.abc import Iterator
from typing import Any

from ._config import DEFAULT_ENCODE_CONFIG
from ._config import EncodeConfig
from ._profiling import ProfileContext

_ASCII_LIMIT = 127

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
for _code in range(0x20):
    _ESCAPES.setdefault(chr(_code), f"\\u{_code:04x}")
del _code

_NOTHING: Any = object()


def _encode_string(s: str, ensure_ascii: bool) -> str:
    """Encode string with proper escape sequences."""
    result = ['"']
    for char in s:
        escaped = _ESCAPES.get(char)
        if escaped is not None:
            result.append(escaped)
        elif ensure_ascii and ord(char) > _ASCII_LIMIT:
            code = ord(char)
            if code > 0xFFFF:
                code -= 0x10000
                result.append(
                    f"\\u{0xD800 | (code >> 10):04x}"
                    f"\\u{0xDC00 | (code & 0x3FF):04x}"
                )
            else:
                result.append(f"\\u{code:04x}")
        else:
            result.append(char)
    result.append('"')
    return "".join(result)


def _encode_number(n: int | float) -> str:
    """Encode numeric values, dropping the '.0' of integral floats."""
    if isinstance(n, int):
        return str(n)
    if math.isnan(n) or math.isinf(n):
        msg = "Out of range float values are not JSON compliant"
        raise ValueError(msg)
    text = repr(n)
    if text.endswith(".0"):
        return text[:-2]
    return text


def _encode_scalar(obj: Any, config: EncodeConfig) -> str:
    if obj is None:
        return "null"
    elif obj is True:
        return "true"
    elif obj is False:
        return "false"
    elif isinstance(obj, str):
        return _encode_string(obj, config.ensure_ascii)
    elif isinstance(obj, int | float):
        return _encode_number(obj)
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)


def _object_items(d: dict[Any, Any], config: EncodeConfig) -> list[Any]:
    items = list(d.items())
    for key, _ in items:
        if not isinstance(key, str):
            msg = f"keys must be strings, not {type(key).__name__}"
            raise TypeError(msg)
    if config.sort_keys:
        items.sort(key=lambda item: item[0])
    return items


class _Frame:
    """An open container: its remaining members and how to close it."""

    __slots__ = ("members", "closer", "is_object", "started", "marker")

    def __init__(
        self, members: Iterator[Any], closer: str, is_object: bool, marker: int
    ) -> None:
        self.members = members
        self.closer = closer
        self.is_object = is_object
        self.started = False
        self.marker = marker


def _iter_encode(obj: Any, config: EncodeConfig) -> Iterator[str]:
    """Yields the text of ``obj`` chunk by chunk."""
    pretty = config.pretty
    indent = " " * config.indent
    key_separator = ": " if pretty else ":"

    stack: list[_Frame] = []
    open_ids: set[int] = set()
    pending = obj

    while True:
        if pending is not _NOTHING:
            if isinstance(pending, dict | list | tuple):
                marker = id(pending)
                if marker in open_ids:
                    raise ValueError("Circular reference detected")
                if isinstance(pending, dict):
                    members: list[Any] = _object_items(pending, config)
                    opener, closer = "{", "}"
                else:
                    members = list(pending)
                    opener, closer = "[", "]"

                if members:
                    open_ids.add(marker)
                    stack.append(
                        _Frame(
                            iter(members),
                            closer,
                            isinstance(pending, dict),
                            marker,
                        )
                    )
                    yield opener
                else:
                    yield opener + closer
            else:
                yield _encode_scalar(pending, config)
            pending = _NOTHING

        if not stack:
            return

        frame = stack[-1]
        member = next(frame.members, _NOTHING)
        if member is _NOTHING:
            stack.pop()
            open_ids.discard(frame.marker)
            if pretty:
                yield "\n" + indent * len(stack)
            yield frame.closer
            continue

        if frame.started:
            yield ","
        frame.started = True
        if pretty:
            yield "\n" + indent * len(stack)

        if frame.is_object:
            key, pending = member
            yield _encode_string(key, config.ensure_ascii) + key_separator
        else:
            pending = member


def encode(obj: Any, config: EncodeConfig = DEFAULT_ENCODE_CONFIG) -> str:
    """Renders any JSON-serializable value as a complete string."""
    with ProfileContext("encode") as profile:
        text = "".join(_iter_encode(obj, config))
        profile.items = len(text)
        return text
