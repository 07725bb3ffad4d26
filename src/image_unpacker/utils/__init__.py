"""
image_unpacker.utils
--------------------
Diagnostics: out-of-range sample counts and channel histograms.
"""
