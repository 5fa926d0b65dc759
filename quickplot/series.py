from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

import numpy as np

from quickplot.adapters import normalize_xy
from quickplot.styles import Style, parse_style


@dataclass(frozen=True, eq=False)
class Series:
    """One (x, y) data sequence plus an optional style.

    ``x`` defaults to the index range ``0..len(y)``. Data are copied into
    read-only float64 arrays at construction, so a built series never aliases
    caller buffers. Length disagreement raises ``DimensionMismatch`` here, not
    when the figure is built.
    """

    x: Any = None
    y: Any = None
    style: Style | str | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        x_arr, y_arr = normalize_xy(self.y, x=self.x)
        object.__setattr__(self, "x", x_arr)
        object.__setattr__(self, "y", y_arr)
        if isinstance(self.style, str):
            object.__setattr__(self, "style", parse_style(self.style))
        elif self.style is not None and not isinstance(self.style, Style):
            raise TypeError(f"style must be a Style or a style string, not {type(self.style).__name__}")

    @classmethod
    def new(cls, x: Any, y: Any) -> "Series":
        return cls(x=x, y=y)

    @classmethod
    def from_y(cls, y: Any) -> "Series":
        return cls(y=y)

    def with_style(self, style: Style | str | None) -> "Series":
        if isinstance(style, str):
            style = parse_style(style)
        return replace(self, style=style)

    def with_name(self, name: str | None) -> "Series":
        return replace(self, name=name)

    @property
    def resolved_style(self) -> Style:
        return self.style if self.style is not None else Style()

    def data(self) -> list[tuple[float, float]]:
        return list(zip(self.x.tolist(), self.y.tolist()))

    def __len__(self) -> int:
        return int(self.y.size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return (
            np.array_equal(self.x, other.x, equal_nan=True)
            and np.array_equal(self.y, other.y, equal_nan=True)
            and self.resolved_style == other.resolved_style
        )

    __hash__ = None  # type: ignore[assignment]
