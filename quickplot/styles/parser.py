from __future__ import annotations

from collections.abc import Collection
from enum import Enum
import logging
import re
import string

from quickplot.errors import LexError, ParseError
from quickplot.styles.model import (
    COLOR_CODES,
    DEFAULT_MARKER_SIZE,
    DEFAULT_STROKE_WIDTH,
    NAMED_COLORS,
    Curve,
    FigureKind,
    Marker,
    MarkerShape,
    Stroke,
    Style,
)
from quickplot.styles.scanner import Scanner, Token, TokenKind

LOGGER = logging.getLogger(__name__)

DEFAULT_COLOR_MAP = "viridis"

KIND_PREFIXES: dict[FigureKind, str] = {
    FigureKind.NORMAL: "",
    FigureKind.AREA: "@",
    FigureKind.COLUMN: "%",
}
MARKER_CODES: dict[str, tuple[MarkerShape, bool]] = {
    ".": (MarkerShape.CIRCLE, True),
    ">": (MarkerShape.CIRCLE, False),
    ",": (MarkerShape.SQUARE, True),
    "<": (MarkerShape.SQUARE, False),
}
CURVE_CODES: dict[str, Curve] = {
    "~": Curve.SMOOTH,
    "/": Curve.STRAIGHT,
    "-": Curve.STEPLINE,
}

_KIND_BY_CHAR = {prefix: kind for kind, prefix in KIND_PREFIXES.items() if prefix}
_MARKER_CHARS = {value: code for code, value in MARKER_CODES.items()}
_CURVE_CHARS = {curve: code for code, curve in CURVE_CODES.items()}
_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
_HEX_DIGITS = frozenset(string.hexdigits)


class _State(Enum):
    EXPECT_KIND = "expect_kind"
    EXPECT_COLOR = "expect_color"
    EXPECT_MARKER = "expect_marker"
    EXPECT_MARKER_SIZE = "expect_marker_size"
    EXPECT_STROKE = "expect_stroke"
    EXPECT_STROKE_WIDTH = "expect_stroke_width"
    DONE = "done"


def _peek_group(scanner: Scanner) -> Token | None:
    # Whitespace may separate groups, never the pieces of one group.
    token = scanner.peek()
    while token is not None and token.kind is TokenKind.SEPARATOR:
        scanner.advance()
        token = scanner.peek()
    return token


def _parse_hex_color(token: Token, text: str) -> str:
    digits = token.text[1:]
    if len(digits) not in (3, 6) or any(ch not in _HEX_DIGITS for ch in digits):
        raise ParseError(position=token.position, text=text, expected="'#' followed by 3 or 6 hex digits")
    return token.text


def parse_style(text: str) -> Style:
    """Parse a style string such as ``"r.10~4"`` or ``"@#333<12~~6"``.

    Groups are read left to right: optional figure-kind prefix, mandatory
    color, optional marker (shape char plus size), optional stroke (curve
    char, doubled for dashes, plus width). Raises ``ParseError`` (or its
    subclass ``LexError``) with the offending position.
    """
    if not isinstance(text, str):
        raise TypeError(f"style must be a string, not {type(text).__name__}")

    scanner = Scanner(text)
    kind = FigureKind.NORMAL
    color: str | None = None
    marker: Marker | None = None
    stroke: Stroke | None = None
    shape, filled = MarkerShape.CIRCLE, True
    curve, dashed = Curve.SMOOTH, False

    state = _State.EXPECT_KIND
    while state is not _State.DONE:
        if state is _State.EXPECT_KIND:
            token = _peek_group(scanner)
            if token is not None and token.kind is TokenKind.FIGURE_KIND:
                kind = _KIND_BY_CHAR[token.text]
                scanner.advance()
            state = _State.EXPECT_COLOR

        elif state is _State.EXPECT_COLOR:
            token = _peek_group(scanner)
            if token is None or token.kind not in (TokenKind.COLOR, TokenKind.HEX_COLOR):
                raise ParseError(position=scanner.position, text=text, expected="a color")
            if token.kind is TokenKind.COLOR:
                color = NAMED_COLORS[token.text]
            else:
                color = _parse_hex_color(token, text)
            scanner.advance()
            state = _State.EXPECT_MARKER

        elif state is _State.EXPECT_MARKER:
            token = _peek_group(scanner)
            if token is not None and token.kind is TokenKind.MARKER:
                shape, filled = MARKER_CODES[token.text]
                scanner.advance()
                state = _State.EXPECT_MARKER_SIZE
            else:
                state = _State.EXPECT_STROKE

        elif state is _State.EXPECT_MARKER_SIZE:
            token = scanner.peek()
            size = DEFAULT_MARKER_SIZE
            if token is not None and token.kind is TokenKind.DIGITS:
                size = int(token.text)
                scanner.advance()
            marker = Marker(shape=shape, size=size, filled=filled)
            state = _State.EXPECT_STROKE

        elif state is _State.EXPECT_STROKE:
            token = _peek_group(scanner)
            if token is not None and token.kind is TokenKind.STROKE:
                curve = CURVE_CODES[token.text]
                scanner.advance()
                follow = scanner.peek()
                dashed = follow is not None and follow.kind is TokenKind.STROKE_DASH
                if dashed:
                    scanner.advance()
                state = _State.EXPECT_STROKE_WIDTH
            else:
                state = _State.DONE

        elif state is _State.EXPECT_STROKE_WIDTH:
            token = scanner.peek()
            width = DEFAULT_STROKE_WIDTH
            if token is not None and token.kind is TokenKind.DIGITS:
                width = int(token.text)
                scanner.advance()
            stroke = Stroke(curve=curve, width=width, dashed=dashed)
            state = _State.DONE

    if _peek_group(scanner) is not None:
        raise ParseError(position=scanner.position, text=text, expected="end of style")

    style = Style(kind=kind, color=color, marker=marker, stroke=stroke)
    LOGGER.debug("parsed style %r as %r", text, style)
    return style


def _format_color(color: str) -> str:
    if color in COLOR_CODES:
        return COLOR_CODES[color]
    if _HEX_COLOR.fullmatch(color):
        return color
    raise ValueError(f"color {color!r} has no style-string form (use a palette name or #RGB/#RRGGBB)")


def format_style(style: Style) -> str:
    """Canonical style string; sizes and widths are always written out."""
    if style.color is None:
        raise ValueError("cannot format a style without a color")
    parts = [KIND_PREFIXES[style.kind], _format_color(style.color)]
    if style.marker is not None:
        parts.append(f"{_MARKER_CHARS[(style.marker.shape, style.marker.filled)]}{style.marker.size}")
    if style.stroke is not None:
        code = _CURVE_CHARS[style.stroke.curve] * (2 if style.stroke.dashed else 1)
        parts.append(f"{code}{style.stroke.width}")
    return "".join(parts)


def parse_color_map(name: str | None = None, known: Collection[str] | None = None) -> str:
    """Reduced grammar for the image path: nothing, or one color-map name token.

    Membership is only checked when the color-map collaborator supplies ``known``.
    """
    if name is None or name == "":
        return DEFAULT_COLOR_MAP
    for position, ch in enumerate(name):
        allowed = ch.isascii() and (ch.islower() or (position > 0 and (ch.isdigit() or ch == "_")))
        if not allowed:
            raise LexError(position=position, text=name)
    if known is not None and name not in known:
        raise ParseError(position=0, text=name, expected="a known color map")
    return name
