from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from PIL import Image

if TYPE_CHECKING:
    from quickplot.figure import Figure


class FigureRenderer(Protocol):
    """Turns a built figure into a charting library's document (HTML, JSON, ...)."""

    def render(self, figure: "Figure") -> str:
        ...


class ColorMapApplier(Protocol):
    """Owns the preset color maps and the gradient math for the image path."""

    def names(self) -> frozenset[str]:
        ...

    def apply(self, image: Image.Image, name: str) -> Image.Image:
        ...
