"""
image_unpacker
==============
Decodes a raw float-RGB buffer (uint16 width/height header followed by
little-endian float32 r, g, b triples) into a PNG image, organized as:
    codec → tone → raster → utils (diagnostics)
Each subpackage holds one stage of the pipeline; `unpacker` wires them.

© 2025 Ali Pouya — Image Unpacker
"""

from image_unpacker.errors import (
    UnpackError,
    TooSmallInputError,
    CorruptFileError,
    DimensionTooLargeError,
    IOFailureError,
    EncodeFailureError,
)
from image_unpacker.tone.tone_model import ToneParams
from image_unpacker.unpacker import unpack, convert_file

__version__ = "1.0.0"

__all__ = [
    "UnpackError",
    "TooSmallInputError",
    "CorruptFileError",
    "DimensionTooLargeError",
    "IOFailureError",
    "EncodeFailureError",
    "ToneParams",
    "unpack",
    "convert_file",
]
