from .image import normalize_image
from .normalize import normalize_xy

__all__ = ["normalize_image", "normalize_xy"]
