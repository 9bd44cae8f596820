"""Immutable parse and encode settings."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

ObjectHook = Callable[[dict[str, Any]], Any] | None
ObjectPairsHook = Callable[[list[tuple[str, Any]]], Any] | None


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures tokenizing and materialization.

    ``strict`` rejects raw control characters inside string literals. The
    hooks run on every completed object while materializing; the pairs hook
    takes priority when both are given.
    """

    strict: bool = True
    object_hook: ObjectHook = None
    object_pairs_hook: ObjectPairsHook = None

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if self.object_hook is not None and not callable(self.object_hook):
            raise TypeError("object_hook must be callable")
        if self.object_pairs_hook is not None and not callable(
            self.object_pairs_hook
        ):
            raise TypeError("object_pairs_hook must be callable")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures serialization layout.

    Compact output is the default; ``pretty`` switches to one member per
    line indented by ``indent`` spaces per nesting level.
    """

    pretty: bool = False
    indent: int = 2
    sort_keys: bool = False
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.pretty, bool):
            raise TypeError("pretty must be a boolean")
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise TypeError("indent must be an integer")
        if self.indent < 0:
            raise ValueError("indent must be non-negative")
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")
        if not isinstance(self.ensure_ascii, bool):
            raise TypeError("ensure_ascii must be a boolean")


DEFAULT_PARSE_CONFIG = ParseConfig()
DEFAULT_ENCODE_CONFIG = EncodeConfig()
