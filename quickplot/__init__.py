from quickplot.api import imshow, plot, series, style
from quickplot.errors import DimensionMismatch, LexError, ParseError, PlotDataError, QuickplotError, StyleSyntaxError
from quickplot.figure import Figure, FigureBuilder, ImageFigure, ImageFigureBuilder
from quickplot.series import Series
from quickplot.styles import (
    Curve,
    FigureKind,
    Marker,
    MarkerShape,
    Stroke,
    Style,
    format_style,
    parse_color_map,
    parse_style,
)

__all__ = [
    "Curve",
    "DimensionMismatch",
    "Figure",
    "FigureBuilder",
    "FigureKind",
    "ImageFigure",
    "ImageFigureBuilder",
    "LexError",
    "Marker",
    "MarkerShape",
    "ParseError",
    "PlotDataError",
    "QuickplotError",
    "Series",
    "Stroke",
    "Style",
    "StyleSyntaxError",
    "format_style",
    "imshow",
    "parse_color_map",
    "parse_style",
    "plot",
    "series",
    "style",
]
