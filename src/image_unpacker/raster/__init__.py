"""
image_unpacker.raster
---------------------
Assembles quantized RGB bytes into an opaque RGBA raster and encodes it
as PNG with Pillow.
"""
