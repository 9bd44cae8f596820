"""
Value model and materialization of event streams.

JSON values are represented with native Python types: None, bool, float,
str, list and dict. ``materialize`` folds a parse event sequence into such a
tree with an explicit value stack, so arbitrarily deep documents never
recurse.
"""

import logging
from collections.abc import Iterable
from typing import Any

from ._config import DEFAULT_PARSE_CONFIG
from ._config import ParseConfig
from ._parser import EventKind
from ._parser import ParseEvent
from ._profiling import ProfileContext

logger = logging.getLogger(__name__)

# Type aliases for domain concepts - recursive definition
JsonScalar = str | float | bool | None
JsonValue = (
    str | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)

# Values produced by object hooks are opaque to the fold
JsonValueOrTransformed = JsonValue | Any

_NOTHING: Any = object()


class _ObjectBuilder:
    __slots__ = ("pairs", "key")

    def __init__(self) -> None:
        self.pairs: list[tuple[str, JsonValueOrTransformed]] = []
        self.key: str = _NOTHING

    def add(self, value: JsonValueOrTransformed) -> None:
        if self.key is _NOTHING:
            raise ValueError("Object member value without a preceding key")
        self.pairs.append((self.key, value))
        self.key = _NOTHING

    def finish(self, config: ParseConfig) -> JsonValueOrTransformed:
        if self.key is not _NOTHING:
            raise ValueError(f"Object key {self.key!r} has no value")
        if config.object_pairs_hook is not None:
            return config.object_pairs_hook(self.pairs)
        obj = dict(self.pairs)
        if config.object_hook is not None:
            return config.object_hook(obj)
        return obj


def _malformed(message: str) -> ValueError:
    logger.debug("Malformed event sequence: %s", message)
    return ValueError(message)


def materialize(
    events: Iterable[ParseEvent], config: ParseConfig = DEFAULT_PARSE_CONFIG
) -> JsonValueOrTransformed:
    """
    Folds a complete event sequence into a single JSON value.

    Containers are pushed on START events and attached to their parent on
    the matching END event. An ERROR event re-raises the error it carries.
    Raises ValueError when the sequence is truncated or out of order.
    """
    with ProfileContext("materialize") as profile:
        stack: list[_ObjectBuilder | list[JsonValueOrTransformed]] = []
        keys: dict[str, str] = {}
        result: JsonValueOrTransformed = _NOTHING

        for event in events:
            profile.items += 1
            kind = event.kind

            if kind is EventKind.KEY:
                top = stack[-1] if stack else None
                if not isinstance(top, _ObjectBuilder):
                    raise _malformed("KEY event outside of an object")
                if top.key is not _NOTHING:
                    raise _malformed(f"KEY event after key {top.key!r}")
                top.key = keys.setdefault(event.value, event.value)
                continue
            if kind is EventKind.ERROR:
                raise event.value
            if result is not _NOTHING:
                raise _malformed(f"{kind.name} event after the document ended")

            if kind is EventKind.START_OBJECT:
                stack.append(_ObjectBuilder())
                continue
            if kind is EventKind.START_ARRAY:
                stack.append([])
                continue

            if kind is EventKind.SCALAR:
                value = event.value
            elif kind is EventKind.END_OBJECT:
                top = stack.pop() if stack else None
                if not isinstance(top, _ObjectBuilder):
                    raise _malformed("END_OBJECT without a matching object")
                value = top.finish(config)
            elif kind is EventKind.END_ARRAY:
                top = stack.pop() if stack else None
                if not isinstance(top, list):
                    raise _malformed("END_ARRAY without a matching array")
                value = top
            else:
                raise _malformed(f"Unknown event kind {kind!r}")

            if not stack:
                result = value
            elif isinstance(stack[-1], list):
                stack[-1].append(value)
            else:
                stack[-1].add(value)

        if stack or result is _NOTHING:
            raise _malformed("Event sequence ended before the value completed")
        return result
