"""
Lexical scanner for JSON text.

Scans character by character with an explicit cursor (offset, line, column)
and produces one positioned token per call. The cursor never rewinds, and a
lexical error exhausts the scanner.
"""

import string

from ._config import DEFAULT_PARSE_CONFIG
from ._config import ParseConfig
from ._errors import LexError
from ._errors import Position
from ._profiling import ProfileContext
from ._tokens import STRUCTURAL_KINDS
from ._tokens import Token
from ._tokens import TokenKind

_BOM = "\ufeff"
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)
_NUMBER_CHARS = frozenset(string.digits + "+-.eE")
_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_LITERAL_STARTS = frozenset("tfn")

_LITERALS: dict[str, tuple[TokenKind, bool | None]] = {
    "true": (TokenKind.BOOLEAN, True),
    "false": (TokenKind.BOOLEAN, False),
    "null": (TokenKind.NULL, None),
}

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def _skip_digits(lexeme: str, i: int) -> int:
    while i < len(lexeme) and lexeme[i] in _DIGITS:
        i += 1
    return i


def _number_error(lexeme: str) -> str | None:
    """
    Checks a greedily scanned numeric run against the JSON number grammar.

    Returns a description of the first violation, or None when valid.
    """
    length = len(lexeme)
    i = 1 if lexeme.startswith("-") else 0

    # Integer part: a single zero or a non-zero-led digit run
    if i >= length or lexeme[i] not in _DIGITS:
        return "Invalid number"
    if lexeme[i] == "0":
        i += 1
        if i < length and lexeme[i] in _DIGITS:
            return "Leading zeros not allowed"
    else:
        i = _skip_digits(lexeme, i)

    if i < length and lexeme[i] == ".":
        i += 1
        if i >= length or lexeme[i] not in _DIGITS:
            return "Invalid decimal number"
        i = _skip_digits(lexeme, i)

    if i < length and lexeme[i] in "eE":
        i += 1
        if i < length and lexeme[i] in "+-":
            i += 1
        if i >= length or lexeme[i] not in _DIGITS:
            return "Invalid exponent"
        i = _skip_digits(lexeme, i)

    if i != length:
        return "Invalid number"
    return None


class Tokenizer:
    """
    Tokenizes JSON input into a lazy, single-pass token sequence.

    Handles whitespace, strings (with escape and surrogate pair decoding),
    numbers, literals and structural characters. Iterating yields Token
    objects; a malformed lexeme raises LexError and ends the sequence.
    """

    def __init__(
        self, text: str, config: ParseConfig = DEFAULT_PARSE_CONFIG
    ) -> None:
        self.text = text
        self.length = len(text)
        self.config = config
        self.pos: Position = 0
        self.line = 1
        self.column = 1
        self._exhausted = False

    def __iter__(self) -> "Tokenizer":
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Token | None:
        """Returns the next token, or None once the input is used up."""
        if self._exhausted:
            return None
        try:
            token = self._scan_token()
        except LexError:
            self._exhausted = True
            raise
        if token is None:
            self._exhausted = True
        return token

    def advance(self) -> str:
        """Returns current character and moves the cursor past it."""
        char = self.text[self.pos]
        self.pos += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def skip_whitespace(self) -> None:
        """Skips whitespace characters defined by RFC 8259."""
        while self.pos < self.length:
            char = self.text[self.pos]
            if char == "\n":
                self.line += 1
                self.column = 1
            elif char in " \t\r":
                self.column += 1
            else:
                break
            self.pos += 1

    def _error(
        self,
        msg: str,
        pos: Position | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> LexError:
        if pos is None:
            pos, line, column = self.pos, self.line, self.column
        return LexError(msg, self.text, pos, line, column)

    def _scan_token(self) -> Token | None:
        if self.pos == 0 and self.text.startswith(_BOM):
            raise self._error(
                "JSON input should not contain BOM (Byte Order Mark)"
            )

        self.skip_whitespace()
        if self.pos >= self.length:
            return None

        char = self.text[self.pos]
        kind = STRUCTURAL_KINDS.get(char)
        if kind is not None:
            start, line, column = self.pos, self.line, self.column
            self.advance()
            return Token(kind, char, line, column, start, self.pos)
        if char == '"':
            return self.scan_string()
        if char == "-" or char in _DIGITS:
            return self.scan_number()
        if char in _LITERAL_STARTS:
            return self.scan_literal()
        raise self._error(f"Unexpected character {char!r}")

    def scan_string(self) -> Token:
        """Scans a string literal and decodes its escape sequences."""
        with ProfileContext("scan_string") as profile:
            start, line, column = self.pos, self.line, self.column
            text = self.text
            strict = self.config.strict
            self.advance()

            chunks: list[str] = []
            while True:
                chunk_start = self.pos
                while self.pos < self.length:
                    char = text[self.pos]
                    if char == '"' or char == "\\":
                        break
                    if char < " " and strict:
                        raise self._error(
                            f"Invalid control character {char!r} in string"
                        )
                    self.advance()
                chunks.append(text[chunk_start : self.pos])

                if self.pos >= self.length:
                    raise self._error(
                        "Unterminated string", start, line, column
                    )
                if text[self.pos] == '"':
                    self.advance()
                    profile.items = self.pos - start
                    return Token(
                        TokenKind.STRING,
                        "".join(chunks),
                        line,
                        column,
                        start,
                        self.pos,
                    )
                chunks.append(self._scan_escape(start, line, column))

    def _scan_escape(self, start: Position, line: int, column: int) -> str:
        """Decodes one escape sequence; the cursor sits on the backslash."""
        escape = (self.pos, self.line, self.column)
        self.advance()
        if self.pos >= self.length:
            raise self._error(
                "Unterminated string", start, line, column
            )

        char = self.advance()
        simple = _SIMPLE_ESCAPES.get(char)
        if simple is not None:
            return simple
        if char != "u":
            raise self._error(f"Invalid escape sequence: \\{char}", *escape)

        code = self._scan_hex_quad(escape)
        if code in _LOW_SURROGATES:
            raise self._error(
                f"Unpaired low surrogate: \\u{code:04X}", *escape
            )
        if code not in _HIGH_SURROGATES:
            return chr(code)

        # A high surrogate must be followed immediately by a low one
        if self.text.startswith("\\u", self.pos):
            low_escape = (self.pos, self.line, self.column)
            self.advance()
            self.advance()
            low = self._scan_hex_quad(low_escape)
            if low in _LOW_SURROGATES:
                return chr(
                    0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                )
        raise self._error(f"Unpaired high surrogate: \\u{code:04X}", *escape)

    def _scan_hex_quad(self, escape: tuple[Position, int, int]) -> int:
        digits = self.text[self.pos : self.pos + 4]
        if len(digits) != 4 or not all(d in _HEX_DIGITS for d in digits):
            raise self._error(
                f"Invalid unicode escape sequence: \\u{digits}", *escape
            )
        self.pos += 4
        self.column += 4
        return int(digits, 16)

    def scan_number(self) -> Token:
        """Scans the longest numeric run and validates it as a JSON number."""
        with ProfileContext("scan_number") as profile:
            start = end = self.pos
            while end < self.length and self.text[end] in _NUMBER_CHARS:
                end += 1
            lexeme = self.text[start:end]

            message = _number_error(lexeme)
            if message is not None:
                raise self._error(f"{message}: {lexeme!r}")

            line, column = self.line, self.column
            self.pos = end
            self.column += end - start
            profile.items = end - start
            return Token(
                TokenKind.NUMBER, float(lexeme), line, column, start, end
            )

    def scan_literal(self) -> Token:
        """Scans literal tokens: true, false, null."""
        with ProfileContext("scan_literal") as profile:
            start = end = self.pos
            while end < self.length and self.text[end] in _WORD_CHARS:
                end += 1
            word = self.text[start:end]

            literal = _LITERALS.get(word)
            if literal is None:
                raise self._error(f"Invalid literal {word!r}")

            kind, value = literal
            line, column = self.line, self.column
            self.pos = end
            self.column += end - start
            profile.items = end - start
            return Token(kind, value, line, column, start, end)
