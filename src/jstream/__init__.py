"""
Streaming JSON tokenizer, pull parser and serializer.

Text is scanned into positioned tokens, turned into a lazy sequence of
structural parse events by an explicit-stack state machine, and optionally
materialized into native Python values. Values serialize back to compact or
indented JSON text.
"""

import logging
from typing import IO
from typing import Any

from ._config import EncodeConfig
from ._config import ParseConfig
from ._encoder import encode
from ._errors import JSONDecodeError
from ._errors import LexError
from ._errors import ParseError
from ._errors import TrailingData
from ._errors import UnexpectedEndOfInput
from ._errors import UnexpectedToken
from ._lexer import Tokenizer
from ._parser import EventKind
from ._parser import ParseEvent
from ._parser import ParserContext
from ._parser import StreamingParser
from ._profiling import HotPathStats
from ._profiling import clear_hot_path_stats
from ._profiling import get_hot_path_stats
from ._profiling import profiling_enabled
from ._profiling import set_profiling
from ._tokens import Token
from ._tokens import TokenKind
from ._value import JsonScalar
from ._value import JsonValue
from ._value import JsonValueOrTransformed
from ._value import materialize

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def _require_text(s: Any) -> None:
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON object must be str, not {type(s).__name__}"
        )


def tokenize(s: str, **kwargs: Any) -> Tokenizer:
    """Returns a lazy token iterator over ``s``."""
    _require_text(s)
    return Tokenizer(s, ParseConfig(**kwargs))


def parse_events(
    s: str, *, yield_errors: bool = False, **kwargs: Any
) -> StreamingParser:
    """
    Returns a lazy iterator of parse events for the document ``s``.

    Nothing is scanned until the first event is requested. Errors are raised
    from the iterator, or yielded as a final ERROR event when
    ``yield_errors`` is set.
    """
    _require_text(s)
    return StreamingParser(Tokenizer(s, ParseConfig(**kwargs)), yield_errors)


def loads(s: str, **kwargs: Any) -> JsonValueOrTransformed:
    """
    Parses a whole JSON document into Python objects.

    Streams events from the pull parser and materializes them, so nesting
    depth is bounded by memory rather than by the interpreter stack.
    """
    _require_text(s)
    config = ParseConfig(**kwargs)
    return materialize(StreamingParser(Tokenizer(s, config)), config)


def load(fp: IO[str], **kwargs: Any) -> JsonValueOrTransformed:
    """Parses a JSON document read from a file-like object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


def dumps(obj: Any, **kwargs: Any) -> str:
    """
    Serializes a JSON value to a string.

    Compact by default; ``pretty=True`` indents nested members.
    """
    return encode(obj, EncodeConfig(**kwargs))


def dump(obj: Any, fp: IO[str], **kwargs: Any) -> None:
    """Serializes a JSON value into a file-like object."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(dumps(obj, **kwargs))


def stringify(obj: Any) -> str:
    """Serializes a JSON value to compact text."""
    return encode(obj, EncodeConfig())


def stringify_pretty(obj: Any) -> str:
    """Serializes a JSON value to text indented two spaces per level."""
    return encode(obj, EncodeConfig(pretty=True))


__all__ = [
    "EncodeConfig",
    "EventKind",
    "HotPathStats",
    "JSONDecodeError",
    "JsonScalar",
    "JsonValue",
    "LexError",
    "ParseConfig",
    "ParseError",
    "ParseEvent",
    "ParserContext",
    "StreamingParser",
    "Token",
    "TokenKind",
    "Tokenizer",
    "TrailingData",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "get_hot_path_stats",
    "load",
    "loads",
    "materialize",
    "parse_events",
    "profiling_enabled",
    "set_profiling",
    "stringify",
    "stringify_pretty",
]
