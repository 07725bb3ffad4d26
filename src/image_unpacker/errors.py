"""
errors.py — failure kinds raised by the unpack pipeline.

All of them derive from UnpackError, so the command line can catch one
type and exit. Library code only raises; printing and exit codes belong
to main_unpack.py.

© 2025 Ali Pouya — Image Unpacker
"""


class UnpackError(Exception):
    """Base class for every failure of a raw → PNG conversion."""


class TooSmallInputError(UnpackError):
    """Buffer is shorter than the 4-byte header."""


class CorruptFileError(UnpackError):
    """Payload length does not match the width/height declared in the header."""


class DimensionTooLargeError(UnpackError):
    """Width or height exceeds MAX_IMAGE_DIMENSION."""

    def __init__(self, width: int, height: int):
        super().__init__(f"File is too large, width: {width} height: {height}")
        self.width = width
        self.height = height


class IOFailureError(UnpackError):
    """Reading the input or writing the output failed."""


class EncodeFailureError(UnpackError):
    """The image library could not encode the assembled raster."""
