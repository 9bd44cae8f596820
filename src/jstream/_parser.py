"""
Pull-based streaming parser.

Turns a token sequence into structural parse events using an explicit stack
of nesting contexts instead of call-stack recursion. Every ``next()`` pulls
only the tokens needed to decide the next event, so memory is bounded by the
nesting depth and a consumer may stop after any prefix.
"""

import logging
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from enum import unique
from typing import Any
from typing import NoReturn

from ._errors import JSONDecodeError
from ._errors import TrailingData
from ._errors import UnexpectedEndOfInput
from ._errors import UnexpectedToken
from ._lexer import Tokenizer
from ._tokens import SCALAR_KINDS
from ._tokens import Token
from ._tokens import TokenKind

logger = logging.getLogger(__name__)

_TOP_LEVEL_EXPECTED = "a value"


@unique
class ParserContext(Enum):
    """What the innermost open container expects next."""

    ARRAY_VALUE_OR_END = "array_value_or_end"
    ARRAY_VALUE = "array_value"
    ARRAY_COMMA_OR_END = "array_comma_or_end"
    OBJECT_KEY_OR_END = "object_key_or_end"
    OBJECT_KEY = "object_key"
    OBJECT_COLON = "object_colon"
    OBJECT_VALUE = "object_value"
    OBJECT_COMMA_OR_END = "object_comma_or_end"

    @property
    def description(self) -> str:
        """Expected-input text used in UnexpectedToken messages."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ParserContext.ARRAY_VALUE_OR_END: "a value or ']'",
    ParserContext.ARRAY_VALUE: "a value",
    ParserContext.ARRAY_COMMA_OR_END: "',' or ']'",
    ParserContext.OBJECT_KEY_OR_END: "a string key or '}'",
    ParserContext.OBJECT_KEY: "a string key",
    ParserContext.OBJECT_COLON: "':'",
    ParserContext.OBJECT_VALUE: "a value",
    ParserContext.OBJECT_COMMA_OR_END: "',' or '}'",
}


_VALUE_CONTEXTS = frozenset(
    {
        ParserContext.ARRAY_VALUE_OR_END,
        ParserContext.ARRAY_VALUE,
        ParserContext.OBJECT_VALUE,
    }
)

# Frame a container moves to once one of its values is complete
_AFTER_VALUE = {
    ParserContext.ARRAY_VALUE_OR_END: ParserContext.ARRAY_COMMA_OR_END,
    ParserContext.ARRAY_VALUE: ParserContext.ARRAY_COMMA_OR_END,
    ParserContext.OBJECT_VALUE: ParserContext.OBJECT_COMMA_OR_END,
}


@unique
class EventKind(Enum):
    """Structural parse event categories."""

    START_OBJECT = "start_object"
    KEY = "key"
    END_OBJECT = "end_object"
    START_ARRAY = "start_array"
    END_ARRAY = "end_array"
    SCALAR = "scalar"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ParseEvent:
    """
    One unit of streaming parse output.

    ``value`` holds the key text for KEY, the scalar for SCALAR and the
    exception for ERROR. Positions are informational and ignored by
    equality.
    """

    kind: EventKind
    value: Any = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


class StreamingParser:
    """
    Lazy, single-pass iterator of ParseEvent over a Tokenizer.

    Errors end the sequence. By default they are raised from ``next()``;
    with ``yield_errors`` they are delivered once as a terminal ERROR event.
    """

    def __init__(self, tokens: Tokenizer, yield_errors: bool = False) -> None:
        self.tokens = tokens
        self.yield_errors = yield_errors
        self._stack: list[ParserContext] = []
        self._completed = False
        self._finished = False

    @property
    def depth(self) -> int:
        """Current nesting depth."""
        return len(self._stack)

    def __iter__(self) -> "StreamingParser":
        return self

    def __next__(self) -> ParseEvent:
        if self._finished:
            raise StopIteration
        try:
            event = self._step()
        except JSONDecodeError as exc:
            self._finished = True
            logger.debug("Parse terminated at depth %d: %s", self.depth, exc)
            if self.yield_errors:
                return ParseEvent(
                    EventKind.ERROR, exc, exc.lineno, exc.colno
                )
            raise
        if event is None:
            self._finished = True
            raise StopIteration
        return event

    def _step(self) -> ParseEvent | None:
        if self._completed:
            return self._after_document()

        while True:
            token = self.tokens.next_token()
            if token is None:
                return self._end_of_input()

            if not self._stack:
                return self._begin_value(token, _TOP_LEVEL_EXPECTED)

            context = self._stack[-1]
            kind = token.kind

            if context in _VALUE_CONTEXTS:
                if (
                    kind is TokenKind.RIGHT_BRACKET
                    and context is ParserContext.ARRAY_VALUE_OR_END
                ):
                    return self._close(token, EventKind.END_ARRAY)
                return self._begin_value(token, context.description)

            if context is ParserContext.ARRAY_COMMA_OR_END:
                if kind is TokenKind.COMMA:
                    self._stack[-1] = ParserContext.ARRAY_VALUE
                    continue
                if kind is TokenKind.RIGHT_BRACKET:
                    return self._close(token, EventKind.END_ARRAY)

            elif context in (
                ParserContext.OBJECT_KEY_OR_END,
                ParserContext.OBJECT_KEY,
            ):
                if kind is TokenKind.STRING:
                    self._stack[-1] = ParserContext.OBJECT_COLON
                    return ParseEvent(
                        EventKind.KEY, token.value, token.line, token.column
                    )
                if (
                    kind is TokenKind.RIGHT_BRACE
                    and context is ParserContext.OBJECT_KEY_OR_END
                ):
                    return self._close(token, EventKind.END_OBJECT)

            elif context is ParserContext.OBJECT_COLON:
                if kind is TokenKind.COLON:
                    self._stack[-1] = ParserContext.OBJECT_VALUE
                    continue

            elif context is ParserContext.OBJECT_COMMA_OR_END:
                if kind is TokenKind.COMMA:
                    self._stack[-1] = ParserContext.OBJECT_KEY
                    continue
                if kind is TokenKind.RIGHT_BRACE:
                    return self._close(token, EventKind.END_OBJECT)

            raise UnexpectedToken(token, context.description, self.tokens.text)

    def _begin_value(self, token: Token, expected: str) -> ParseEvent:
        """Starts a value in the current position: a scalar or a container."""
        kind = token.kind
        if kind is TokenKind.LEFT_BRACE:
            self._value_started()
            self._stack.append(ParserContext.OBJECT_KEY_OR_END)
            event_kind, value = EventKind.START_OBJECT, None
        elif kind is TokenKind.LEFT_BRACKET:
            self._value_started()
            self._stack.append(ParserContext.ARRAY_VALUE_OR_END)
            event_kind, value = EventKind.START_ARRAY, None
        elif kind in SCALAR_KINDS:
            self._value_started()
            if not self._stack:
                self._completed = True
            event_kind, value = EventKind.SCALAR, token.value
        else:
            raise UnexpectedToken(token, expected, self.tokens.text)
        return ParseEvent(event_kind, value, token.line, token.column)

    def _value_started(self) -> None:
        # The enclosing frame is past this value as soon as it begins
        if self._stack:
            self._stack[-1] = _AFTER_VALUE[self._stack[-1]]

    def _close(self, token: Token, event_kind: EventKind) -> ParseEvent:
        self._stack.pop()
        if not self._stack:
            self._completed = True
        return ParseEvent(event_kind, None, token.line, token.column)

    def _after_document(self) -> None:
        # Anything but whitespace is extra data, whether or not it would lex
        tokens = self.tokens
        tokens.skip_whitespace()
        if tokens.pos >= tokens.length:
            return None
        raise TrailingData(
            "Extra data: only one JSON value per document",
            tokens.text,
            tokens.pos,
            tokens.line,
            tokens.column,
        )

    def _end_of_input(self) -> NoReturn:
        if self._stack:
            expected = self._stack[-1].description
        else:
            expected = _TOP_LEVEL_EXPECTED
        raise UnexpectedEndOfInput(
            f"Unexpected end of input: expected {expected}",
            self.tokens.text,
            self.tokens.pos,
            self.tokens.line,
            self.tokens.column,
        )
