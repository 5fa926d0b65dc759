from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from PIL import ImageColor


DEFAULT_MARKER_SIZE = 4
DEFAULT_STROKE_WIDTH = 0

NAMED_COLORS: dict[str, str] = {
    "b": "blue",
    "g": "green",
    "r": "red",
    "c": "cyan",
    "m": "magenta",
    "y": "yellow",
    "o": "orange",
    "k": "black",
    "w": "white",
}
COLOR_CODES: dict[str, str] = {name: code for code, name in NAMED_COLORS.items()}


class FigureKind(str, Enum):
    NORMAL = "line"
    AREA = "area"
    COLUMN = "column"


class MarkerShape(str, Enum):
    CIRCLE = "circle"
    SQUARE = "square"


class Curve(str, Enum):
    SMOOTH = "smooth"
    STRAIGHT = "straight"
    STEPLINE = "stepline"


def _coerce_enum(enum_cls: type[Enum], value: object, *, label: str) -> Enum:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"unsupported {label}: {value!r} (expected one of {allowed})") from None


def _require_non_negative(value: int, *, label: str) -> int:
    if isinstance(value, bool) or int(value) != value:
        raise ValueError(f"{label} must be an integer")
    if value < 0:
        raise ValueError(f"{label} must be >= 0")
    return int(value)


@dataclass(frozen=True)
class Marker:
    shape: MarkerShape = MarkerShape.CIRCLE
    size: int = DEFAULT_MARKER_SIZE
    filled: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", _coerce_enum(MarkerShape, self.shape, label="marker shape"))
        object.__setattr__(self, "size", _require_non_negative(self.size, label="marker size"))
        object.__setattr__(self, "filled", bool(self.filled))

    @property
    def visible(self) -> bool:
        return self.size > 0


@dataclass(frozen=True)
class Stroke:
    curve: Curve = Curve.SMOOTH
    width: int = DEFAULT_STROKE_WIDTH
    dashed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "curve", _coerce_enum(Curve, self.curve, label="stroke curve"))
        object.__setattr__(self, "width", _require_non_negative(self.width, label="stroke width"))
        object.__setattr__(self, "dashed", bool(self.dashed))

    @property
    def visible(self) -> bool:
        return self.width > 0


MarkerLike = Marker | tuple[MarkerShape | str, int, bool]
StrokeLike = Stroke | tuple[Curve | str, int, bool]


def _coerce_part(value: object, part_cls: type, *, label: str) -> object:
    if value is None or isinstance(value, part_cls):
        return value
    if isinstance(value, tuple):
        try:
            return part_cls(*value)
        except TypeError:
            raise ValueError(f"{label} tuple has too many fields: {value!r}") from None
    raise ValueError(f"{label} must be a {part_cls.__name__}, a tuple or None, not {type(value).__name__}")


def validate_color(color: str) -> str:
    if color in COLOR_CODES:
        return color
    try:
        ImageColor.getrgb(color)
    except ValueError:
        raise ValueError(f"unsupported color: {color!r}") from None
    return color


@dataclass(frozen=True)
class Style:
    """Visual treatment of one series.

    ``marker`` / ``stroke`` set to ``None`` mean the feature was never requested,
    which is tracked separately from a present feature with size or width 0.
    """

    kind: FigureKind = FigureKind.NORMAL
    color: str | None = None
    marker: Marker | None = None
    stroke: Stroke | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", _coerce_enum(FigureKind, self.kind, label="figure kind"))
        if self.color is not None:
            validate_color(self.color)
        object.__setattr__(self, "marker", _coerce_part(self.marker, Marker, label="marker"))
        object.__setattr__(self, "stroke", _coerce_part(self.stroke, Stroke, label="stroke"))

    @classmethod
    def parse(cls, text: str) -> "Style":
        from quickplot.styles.parser import parse_style

        return parse_style(text)

    def with_kind(self, kind: FigureKind | str) -> "Style":
        return replace(self, kind=kind)

    def with_color(self, color: str) -> "Style":
        return replace(self, color=color)

    def with_marker(self, marker: MarkerLike | None) -> "Style":
        return replace(self, marker=marker)

    def with_stroke(self, stroke: StrokeLike | None) -> "Style":
        return replace(self, stroke=stroke)

    def __str__(self) -> str:
        from quickplot.styles.parser import format_style

        return format_style(self)
