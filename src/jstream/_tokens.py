"""Token model shared by the tokenizer and the streaming parser."""

from dataclasses import dataclass
from enum import Enum
from enum import unique

from ._errors import Position


@unique
class TokenKind(Enum):
    """Lexical categories of JSON input."""

    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    COLON = ":"
    COMMA = ","
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


STRUCTURAL_KINDS: dict[str, TokenKind] = {
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
}

SCALAR_KINDS = frozenset(
    {TokenKind.STRING, TokenKind.NUMBER, TokenKind.BOOLEAN, TokenKind.NULL}
)


@dataclass(frozen=True, slots=True)
class Token:
    """
    A single lexical unit with its source position.

    ``line`` and ``column`` are 1-indexed and point at the first character of
    the lexeme; ``start`` and ``end`` are 0-based character offsets.
    """

    kind: TokenKind
    value: str | float | bool | None
    line: int
    column: int
    start: Position
    end: Position

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        if self.kind is TokenKind.STRING:
            return f"string {self.value!r}"
        if self.kind is TokenKind.NUMBER:
            return f"number {self.value!r}"
        if self.kind is TokenKind.BOOLEAN:
            return "'true'" if self.value else "'false'"
        return f"'{self.kind.value}'"
