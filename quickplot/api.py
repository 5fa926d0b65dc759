from __future__ import annotations

from collections.abc import Collection
from typing import Any

from quickplot.figure import Figure, FigureBuilder, ImageFigure, ImageFigureBuilder
from quickplot.series import Series
from quickplot.styles import Style, parse_style


def style(text: str) -> Style:
    return parse_style(text)


def series(*args: Any, name: str | None = None) -> Series:
    """Build a series from ``(y)``, ``(y, style)``, ``(x, y)`` or ``(x, y, style)``."""
    if len(args) == 1:
        return Series(y=args[0], name=name)
    if len(args) == 2:
        if isinstance(args[1], (str, Style)):
            return Series(y=args[0], style=args[1], name=name)
        return Series(x=args[0], y=args[1], name=name)
    if len(args) == 3:
        return Series(x=args[0], y=args[1], style=args[2], name=name)
    raise TypeError(f"series() takes 1 to 3 positional arguments but {len(args)} were given")


def plot(*items: Series | tuple[Any, ...], title: str | None = None, palette: int = 0) -> Figure:
    """Compose a figure; each item is a ``Series`` or a tuple of ``series()`` arguments.

    >>> fig = plot(([0, 1, 2], [3, 1, 2], "r.10~4"), ([5, 6, 7], "%b"))
    """
    builder = FigureBuilder(title=title).with_palette(palette)
    for item in items:
        if isinstance(item, Series):
            builder.with_series(item)
        elif isinstance(item, tuple):
            builder.with_series(series(*item))
        else:
            raise TypeError(f"plot() items must be Series or tuples, not {type(item).__name__}")
    return builder.build()


def imshow(
    image: Any,
    color_map: str | None = None,
    *,
    title: str | None = None,
    known: Collection[str] | None = None,
) -> ImageFigure:
    builder = ImageFigureBuilder(image, title=title)
    if color_map is not None:
        builder.with_color_map(color_map, known=known)
    return builder.build()
