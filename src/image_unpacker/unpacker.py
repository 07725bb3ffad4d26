"""
unpacker.py — raw float-RGB buffer → RGBA raster, end to end.

Pipeline
--------
  1) Header     : width, height from the first 4 bytes
  2) Validate   : dimension bounds, exact buffer length
  3) Decode     : payload → float64 samples
  4) Gamma      : f ** (1 / gamma), skipped for gamma == 1
  5) Quantize   : trunc(clamp(f * 255.99, 0, 255))
  6) Assemble   : (H, W, 4) raster, alpha = 255

convert_file() adds the file read in front and the PNG write behind. The
output file is written only after the image is fully assembled.

© 2025 Ali Pouya — Image Unpacker
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

import numpy as np

from image_unpacker.codec.raw_format import (
    HEADER_SIZE,
    decode_samples,
    read_dimensions,
    read_raw_file,
    validate_size,
)
from image_unpacker.raster.raster_model import make_image, save_png
from image_unpacker.tone.tone_model import (
    ToneParams,
    gamma_correct,
    standard_dynamic_range,
)
from image_unpacker.utils.metrics_module import clipping_stats

logger = logging.getLogger(__name__)


def _as_params(params: Union[ToneParams, float, None]) -> ToneParams:
    if params is None:
        return ToneParams()
    if isinstance(params, ToneParams):
        return params
    return ToneParams(gamma=float(params))


def unpack(buf: bytes, params: Union[ToneParams, float, None] = None) -> np.ndarray:
    """
    Convert a raw buffer into an RGBA raster and apply gamma correction.

    Parameters
    ----------
    buf : bytes
        Header + payload, already fully in memory.
    params : ToneParams | float | None
        Gamma exponent or full tone parameters; defaults to gamma 2.0.

    Returns
    -------
    image : read-only uint8 array, shape (height, width, 4)

    Raises
    ------
    TooSmallInputError, DimensionTooLargeError, CorruptFileError
    """
    params = _as_params(params)

    width, height = read_dimensions(buf)
    validate_size(buf, width, height)
    logger.debug("header: %dx%d, %d bytes", width, height, len(buf))

    samples = decode_samples(buf[HEADER_SIZE:])
    samples = gamma_correct(samples, params.gamma)

    stats = clipping_stats(samples)
    if stats.clipped:
        logger.warning(
            "%d of %d samples (%.2f%%) outside [0, 1] after gamma (%d below, %d above, %d NaN); clamped",
            stats.clipped, stats.total, 100.0 * stats.fraction, stats.below, stats.above, stats.nan,
        )

    pixels = standard_dynamic_range(samples, params.scale)
    return make_image(pixels, width, height)


def convert_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    params: Union[ToneParams, float, None] = None,
) -> np.ndarray:
    """Read a raw file, unpack it and save the result as PNG."""
    buf = read_raw_file(input_path)
    image = unpack(buf, params)
    save_png(image, output_path)
    return image
