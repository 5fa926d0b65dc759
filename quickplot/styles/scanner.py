from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from quickplot.errors import LexError
from quickplot.styles.model import NAMED_COLORS


FIGURE_KIND_CHARS = frozenset("@%")
MARKER_CHARS = frozenset(".,><")
STROKE_CHARS = frozenset("~/-")


class TokenKind(str, Enum):
    FIGURE_KIND = "figure_kind"
    COLOR = "color"
    HEX_COLOR = "hex_color"
    MARKER = "marker"
    DIGITS = "digits"
    STROKE = "stroke"
    STROKE_DASH = "stroke_dash"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int

    @property
    def end(self) -> int:
        return self.position + len(self.text)


class Scanner:
    """Splits a style string into tokens with one token of look-ahead.

    Multi-character tokens are resolved while scanning: ``#`` swallows the
    alphanumeric run after it, a digit run is maximal, and a stroke character
    repeated immediately is emitted as a separate ``STROKE_DASH`` token.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._pos = 0
        self._lookahead: Token | None = None
        self._dash_at = -1

    @property
    def position(self) -> int:
        if self._lookahead is not None:
            return self._lookahead.position
        return self._pos

    def peek(self) -> Token | None:
        if self._lookahead is None:
            self._lookahead = self._scan()
        return self._lookahead

    def advance(self) -> Token | None:
        token = self.peek()
        self._lookahead = None
        return token

    def tokens(self) -> list[Token]:
        out: list[Token] = []
        while (token := self.advance()) is not None:
            out.append(token)
        return out

    def _scan(self) -> Token | None:
        text = self.text
        start = self._pos
        if start >= len(text):
            return None
        ch = text[start]

        if ch.isspace():
            end = start + 1
            while end < len(text) and text[end].isspace():
                end += 1
            return self._emit(TokenKind.SEPARATOR, start, end)
        if ch in FIGURE_KIND_CHARS:
            return self._emit(TokenKind.FIGURE_KIND, start, start + 1)
        if ch in NAMED_COLORS:
            return self._emit(TokenKind.COLOR, start, start + 1)
        if ch == "#":
            end = start + 1
            while end < len(text) and text[end].isascii() and text[end].isalnum():
                end += 1
            return self._emit(TokenKind.HEX_COLOR, start, end)
        if ch in MARKER_CHARS:
            return self._emit(TokenKind.MARKER, start, start + 1)
        if ch.isascii() and ch.isdigit():
            end = start + 1
            while end < len(text) and text[end].isascii() and text[end].isdigit():
                end += 1
            return self._emit(TokenKind.DIGITS, start, end)
        if ch in STROKE_CHARS:
            # A run like "~~~" alternates STROKE, STROKE_DASH, STROKE.
            if start == self._dash_at:
                self._dash_at = -1
                return self._emit(TokenKind.STROKE_DASH, start, start + 1)
            if start + 1 < len(text) and text[start + 1] == ch:
                self._dash_at = start + 1
            return self._emit(TokenKind.STROKE, start, start + 1)
        raise LexError(position=start, text=text)

    def _emit(self, kind: TokenKind, start: int, end: int) -> Token:
        self._pos = end
        return Token(kind=kind, text=self.text[start:end], position=start)


def scan(text: str) -> list[Token]:
    return Scanner(text).tokens()
