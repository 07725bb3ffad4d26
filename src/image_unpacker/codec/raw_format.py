"""
raw_format.py — reader for the raw float-RGB buffer format.

FILE LAYOUT (little-endian)
---------------------------
    offset 0   : uint16 width
    offset 2   : uint16 height
    offset 4.. : width*height × { float32 r; float32 g; float32 b; }, row-major

Samples are expected in [0, 1] but this is not enforced here; the tone
stage clamps after gamma correction.

WHAT THIS MODULE DOES
---------------------
  1) read_raw_file   : whole file → bytes (no streaming)
  2) read_dimensions : header → (width, height)
  3) validate_size   : dimension bounds, then exact buffer length
  4) decode_samples  : payload → float64 sample array

NOTES
-----
• Dimensions above MAX_IMAGE_DIMENSION are not a technical limit; they are
  treated as a sign that the encoder wrote garbage into the header.
• Validation always runs before decoding, so a mismatched buffer is never
  reinterpreted as floats.

© 2025 Ali Pouya — Image Unpacker
"""

from __future__ import annotations
import logging
import struct
from pathlib import Path
from typing import Tuple, Union

import numpy as np

from image_unpacker.errors import (
    CorruptFileError,
    DimensionTooLargeError,
    IOFailureError,
    TooSmallInputError,
)

logger = logging.getLogger(__name__)

# Format constants
MAX_IMAGE_DIMENSION = 8192  # pixels
HEADER_SIZE = 4             # bytes
FLOAT_SIZE = 4              # bytes
ELEMENT_SIZE = 12           # bytes, one RGB triple

_HEADER = struct.Struct("<HH")
_SAMPLE_DTYPE = np.dtype("<f4")


# -----------------------------------------------------------------------------
# File input
# -----------------------------------------------------------------------------
def read_raw_file(path: Union[str, Path]) -> bytes:
    """Read the whole input file into memory."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as err:
        raise IOFailureError(f"Cannot read {path}: {err}") from err
    logger.debug("read %d bytes from %s", len(data), path)
    return data


# -----------------------------------------------------------------------------
# Header
# -----------------------------------------------------------------------------
def read_dimensions(buf: bytes) -> Tuple[int, int]:
    """
    Decode (width, height) from the first HEADER_SIZE bytes.

    Raises
    ------
    TooSmallInputError
        If the buffer cannot hold a header.
    """
    if len(buf) < HEADER_SIZE:
        raise TooSmallInputError(
            f"File is too small: {len(buf)} bytes, header needs {HEADER_SIZE}"
        )
    width, height = _HEADER.unpack_from(buf, 0)
    return width, height


def expected_size(width: int, height: int) -> int:
    return ELEMENT_SIZE * width * height + HEADER_SIZE


def validate_size(buf: bytes, width: int, height: int) -> None:
    """
    Check the declared dimensions against the format limits and the buffer.

    Order matters: an oversized header is reported as DimensionTooLargeError
    whatever the buffer length, and a length mismatch as CorruptFileError.
    """
    if width > MAX_IMAGE_DIMENSION or height > MAX_IMAGE_DIMENSION:
        raise DimensionTooLargeError(width, height)
    if width == 0 or height == 0:
        raise CorruptFileError(
            f"File is corrupted, image size header is empty ({width}x{height})"
        )

    expected = expected_size(width, height)
    if len(buf) != expected:
        raise CorruptFileError(
            "File is corrupted, image size header incorrect: "
            f"{width}x{height} needs {expected} bytes, got {len(buf)}"
        )


# -----------------------------------------------------------------------------
# Payload
# -----------------------------------------------------------------------------
def decode_samples(payload: bytes) -> np.ndarray:
    """
    Reinterpret the payload as little-endian IEEE-754 float32 values.

    Parameters
    ----------
    payload : bytes
        Buffer without its header; length must be a multiple of FLOAT_SIZE.

    Returns
    -------
    samples : float64 array, shape (len(payload) // FLOAT_SIZE,)
        Flat r, g, b, r, g, b, ... sequence in row-major pixel order.
    """
    if len(payload) % FLOAT_SIZE != 0:
        raise ValueError(
            f"payload length {len(payload)} is not a multiple of {FLOAT_SIZE}"
        )
    return np.frombuffer(payload, dtype=_SAMPLE_DTYPE).astype(np.float64)
