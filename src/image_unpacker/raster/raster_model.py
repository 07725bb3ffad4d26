"""
raster_model.py — quantized RGB bytes → RGBA raster → PNG file.

WHAT THIS MODULE DOES
---------------------
  1) make_image : flat R,G,B bytes → (H, W, 4) uint8 raster, alpha = 255
  2) encode_png : raster → PNG bytes (Pillow, in memory)
  3) save_png   : encode first, then write; nothing touches disk if
                  encoding fails

© 2025 Ali Pouya — Image Unpacker
"""

from __future__ import annotations
import io
import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image as PILImage

from image_unpacker.errors import EncodeFailureError, IOFailureError

logger = logging.getLogger(__name__)

OPAQUE = 255


# -----------------------------------------------------------------------------
# Assembly
# -----------------------------------------------------------------------------
def make_image(pixels: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Arrange row-major RGB bytes into an opaque RGBA raster.

    Parameters
    ----------
    pixels : uint8 array of length 3 * width * height
    width, height : raster size in pixels

    Returns
    -------
    image : read-only uint8 array, shape (height, width, 4)
    """
    rgb = np.asarray(pixels, dtype=np.uint8).reshape(height, width, 3)
    image = np.empty((height, width, 4), dtype=np.uint8)
    image[..., :3] = rgb
    image[..., 3] = OPAQUE
    image.flags.writeable = False
    return image


# -----------------------------------------------------------------------------
# Encoding & output
# -----------------------------------------------------------------------------
def encode_png(image: np.ndarray) -> bytes:
    """Encode an (H, W, 4) uint8 raster as PNG."""
    out = io.BytesIO()
    try:
        PILImage.fromarray(np.ascontiguousarray(image)).save(out, format="PNG")
    except (ValueError, TypeError, OSError) as err:
        raise EncodeFailureError(f"PNG encoding failed: {err}") from err
    return out.getvalue()


def save_png(image: np.ndarray, path: Union[str, Path]) -> Path:
    path = Path(path)
    data = encode_png(image)
    try:
        path.write_bytes(data)
    except OSError as err:
        raise IOFailureError(f"Cannot write {path}: {err}") from err
    logger.debug("wrote %d PNG bytes to %s", len(data), path)
    return path
