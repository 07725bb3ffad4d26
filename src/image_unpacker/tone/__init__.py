"""
image_unpacker.tone
-------------------
Gamma correction and 8-bit quantization of linear float samples.
"""
