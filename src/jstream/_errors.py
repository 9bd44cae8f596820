"""
Error taxonomy for lexing and streaming parsing.

Every error is a JSONDecodeError carrying the offending document, the
character offset and the 1-indexed line/column, so callers can point at the
exact character that stopped the scan.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._tokens import Token

type Position = int


class JSONDecodeError(ValueError):
    """
    Handles JSON decoding failures with precise position information.

    Line and column are derived from the document when the producer did not
    track them itself.
    """

    def __init__(
        self,
        msg: str,
        doc: str = "",
        pos: Position = 0,
        lineno: int | None = None,
        colno: int | None = None,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        if lineno is None:
            lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        if colno is None:
            colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1
        self.lineno = lineno
        self.colno = colno

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    @property
    def line(self) -> int:
        return self.lineno

    @property
    def column(self) -> int:
        return self.colno

    def __reduce__(self):  # type: ignore[no-untyped-def]
        return (
            self.__class__,
            (self.msg, self.doc, self.pos, self.lineno, self.colno),
        )


class LexError(JSONDecodeError):
    """Raised when the input characters cannot form a valid token."""


class ParseError(JSONDecodeError):
    """Base class for structural errors raised by the streaming parser."""


class UnexpectedToken(ParseError):
    """
    The next token does not fit the current grammar position.

    ``expected`` describes the token set that would have been accepted.
    """

    def __init__(self, token: Token, expected: str, doc: str = "") -> None:
        self.token = token
        self.expected = expected
        super().__init__(
            f"Unexpected {token.describe()}: expected {expected}",
            doc,
            token.start,
            token.line,
            token.column,
        )

    def __reduce__(self):  # type: ignore[no-untyped-def]
        return (self.__class__, (self.token, self.expected, self.doc))


class UnexpectedEndOfInput(ParseError):
    """Input ended inside an open container or before any value."""


class TrailingData(ParseError):
    """Content follows the single top-level value."""


__all__ = [
    "JSONDecodeError",
    "LexError",
    "ParseError",
    "Position",
    "TrailingData",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
]
