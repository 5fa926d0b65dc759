from __future__ import annotations

from typing import Any

import numpy as np
from PIL import Image

from quickplot.errors import PlotDataError


_SUPPORTED_CHANNELS = (1, 3, 4)


def normalize_image(image: Any) -> Image.Image:
    """Return a private PIL copy of ``image`` (a PIL image or an (H, W[, C]) array)."""
    if isinstance(image, Image.Image):
        return image.copy()
    if not isinstance(image, np.ndarray):
        raise PlotDataError(f"unsupported image input type: {type(image)!r}")

    arr = image
    if arr.ndim == 3 and arr.shape[2] == 1:
        arr = arr[:, :, 0]
    if arr.ndim == 2:
        channels = 1
    elif arr.ndim == 3:
        channels = arr.shape[2]
    else:
        raise PlotDataError("image array must have shape (H, W) or (H, W, C)")
    if channels not in _SUPPORTED_CHANNELS:
        raise PlotDataError(f"image array must have 1, 3 or 4 channels, got {channels}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise PlotDataError("image must be at least 1x1")
    # uint8 arrays map to L, RGB or RGBA by channel count.
    return Image.fromarray(_to_uint8(arr))


def _to_uint8(arr: np.ndarray) -> np.ndarray:
    if arr.dtype == np.uint8:
        return np.ascontiguousarray(arr)
    if arr.dtype.kind == "b":
        return np.ascontiguousarray(arr.astype(np.uint8) * 255)
    if arr.dtype.kind == "f":
        if not np.all(np.isfinite(arr)):
            raise PlotDataError("image contains non-finite values")
        # Float images are expected in [0, 1].
        return np.ascontiguousarray(np.clip(np.rint(arr * 255.0), 0, 255).astype(np.uint8))
    if arr.dtype.kind in {"i", "u"}:
        return np.ascontiguousarray(np.clip(arr, 0, 255).astype(np.uint8))
    raise PlotDataError(f"unsupported image dtype: {arr.dtype}")
