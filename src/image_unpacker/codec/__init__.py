"""
image_unpacker.codec
--------------------
Raw buffer format: header reader, size validator and float32 sample
decoder, plus the whole-file read that feeds them.
"""
