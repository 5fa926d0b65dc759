from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field
from itertools import cycle
import logging
from typing import Any

from PIL import Image

from quickplot.adapters import normalize_image
from quickplot.collaborators import ColorMapApplier, FigureRenderer
from quickplot.series import Series
from quickplot.styles import FigureKind, parse_color_map

LOGGER = logging.getLogger(__name__)

DEFAULT_FIGURE_SIZE = (1280, 720)
DEFAULT_FIGURE_NAME = "figure"
COLOR_PALETTES: tuple[tuple[str, ...], ...] = (
    ("#008ffb", "#00e396", "#feb019", "#ff4560", "#775dd0"),
    ("#3f51b5", "#03a9f4", "#4caf50", "#f9ce1d", "#ff9800"),
    ("#33b2df", "#546e7a", "#d4526e", "#13d8aa", "#a5978b"),
    ("#4ecdc4", "#c7f464", "#81d4fa", "#546e7a", "#fd6a6a"),
    ("#2b908f", "#f9a3a4", "#90ee7e", "#fa4443", "#69d2e7"),
    ("#449dd1", "#f86624", "#ea3546", "#662e9b", "#c5d86d"),
    ("#d7263d", "#1b998b", "#2e294e", "#f46036", "#e2c044"),
    ("#662e9b", "#f86624", "#f9c80e", "#ea3546", "#43bccd"),
    ("#5c4742", "#a5978b", "#8d5b4c", "#5a2a27", "#c4bbaf"),
    ("#a300d6", "#7d02eb", "#5653fe", "#2983ff", "#00b1f2"),
)


def _require_size(width: int, height: int) -> tuple[int, int]:
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")
    return int(width), int(height)


def _resolve_kind(series: Collection[Series]) -> FigureKind:
    for item in series:
        if item.style is not None:
            return item.style.kind
    return FigureKind.NORMAL


@dataclass(frozen=True, eq=False)
class Figure:
    series: tuple[Series, ...] = ()
    title: str | None = None
    width: int = DEFAULT_FIGURE_SIZE[0]
    height: int = DEFAULT_FIGURE_SIZE[1]
    palette: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))
        object.__setattr__(self, "palette", self.palette % len(COLOR_PALETTES))
        _require_size(self.width, self.height)

    @property
    def name(self) -> str:
        return self.title or DEFAULT_FIGURE_NAME

    @property
    def kind(self) -> FigureKind:
        """Figure-level kind: the first styled series decides."""
        return _resolve_kind(self.series)

    def series_colors(self) -> list[str]:
        palette = cycle(COLOR_PALETTES[self.palette])
        colors: list[str] = []
        for item in self.series:
            color = item.resolved_style.color
            colors.append(color if color is not None else next(palette))
        return colors

    def render_with(self, renderer: FigureRenderer) -> str:
        return renderer.render(self)

    def __len__(self) -> int:
        return len(self.series)

    def __eq__(self, other: object) -> bool:
        # Structural equality covers series data and resolved styles only.
        if not isinstance(other, Figure):
            return NotImplemented
        if len(self.series) != len(other.series):
            return False
        return all(a == b for a, b in zip(self.series, other.series))

    __hash__ = None  # type: ignore[assignment]


@dataclass
class FigureBuilder:
    title: str | None = None
    width: int = DEFAULT_FIGURE_SIZE[0]
    height: int = DEFAULT_FIGURE_SIZE[1]
    palette_index: int = 0
    _series: list[Series] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.width, self.height = _require_size(self.width, self.height)
        self.palette_index = self.palette_index % len(COLOR_PALETTES)

    def with_series(self, series: Series) -> "FigureBuilder":
        if not isinstance(series, Series):
            raise TypeError(f"expected Series, got {type(series).__name__}")
        if series.style is not None:
            kind = _resolve_kind(self._series)
            styled = any(item.style is not None for item in self._series)
            if styled and series.style.kind is not kind:
                LOGGER.warning(
                    "series %d requests figure kind %r but the figure is %r; keeping %r at figure level",
                    len(self._series),
                    series.style.kind.value,
                    kind.value,
                    kind.value,
                )
        self._series.append(series)
        return self

    def with_title(self, title: str | None) -> "FigureBuilder":
        self.title = title
        return self

    def with_size(self, width: int, height: int) -> "FigureBuilder":
        self.width, self.height = _require_size(width, height)
        return self

    def with_palette(self, palette: int) -> "FigureBuilder":
        self.palette_index = palette % len(COLOR_PALETTES)
        return self

    def palette(self) -> tuple[str, ...]:
        return COLOR_PALETTES[self.palette_index]

    def build(self) -> Figure:
        return Figure(
            series=tuple(self._series),
            title=self.title,
            width=self.width,
            height=self.height,
            palette=self.palette_index,
        )


@dataclass(frozen=True)
class ImageFigure:
    image: Image.Image
    title: str | None = None
    width: int = DEFAULT_FIGURE_SIZE[0]
    height: int = DEFAULT_FIGURE_SIZE[1]
    color_map: str | None = None

    @property
    def name(self) -> str:
        return self.title or DEFAULT_FIGURE_NAME

    def apply_color_map(self, applier: ColorMapApplier) -> Image.Image:
        if self.color_map is None:
            return self.image.copy()
        return applier.apply(self.image, self.color_map)


class ImageFigureBuilder:
    """Heatmap figure over an image; color-map math stays with the collaborator."""

    def __init__(self, image: Any, title: str | None = None) -> None:
        self._image = normalize_image(image)
        self.title = title
        self.width, self.height = self._image.size
        self.color_map: str | None = None

    def with_title(self, title: str | None) -> "ImageFigureBuilder":
        self.title = title
        return self

    def with_size(self, width: int, height: int) -> "ImageFigureBuilder":
        self.width, self.height = _require_size(width, height)
        return self

    def with_color_map(self, name: str | None = None, known: Collection[str] | None = None) -> "ImageFigureBuilder":
        self.color_map = parse_color_map(name, known=known)
        return self

    def build(self) -> ImageFigure:
        return ImageFigure(
            image=self._image.copy(),
            title=self.title,
            width=self.width,
            height=self.height,
            color_map=self.color_map,
        )
