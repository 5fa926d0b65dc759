from .model import (
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
from .parser import DEFAULT_COLOR_MAP, format_style, parse_color_map, parse_style
from .scanner import Scanner, Token, TokenKind, scan

__all__ = [
    "Curve",
    "DEFAULT_COLOR_MAP",
    "DEFAULT_MARKER_SIZE",
    "DEFAULT_STROKE_WIDTH",
    "FigureKind",
    "Marker",
    "MarkerShape",
    "NAMED_COLORS",
    "Scanner",
    "Stroke",
    "Style",
    "Token",
    "TokenKind",
    "format_style",
    "parse_color_map",
    "parse_style",
    "scan",
]
