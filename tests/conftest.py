import struct

import pytest


def pack_raw(width, height, triples, header=None):
    """Build a raw buffer: uint16 width/height header + float32 r, g, b triples."""
    head = header if header is not None else struct.pack("<HH", width, height)
    body = b"".join(struct.pack("<3f", *t) for t in triples)
    return head + body


@pytest.fixture
def raw_buffer():
    return pack_raw


@pytest.fixture
def raw_file(tmp_path):
    def _write(width, height, triples, name="frame.raw"):
        path = tmp_path / name
        path.write_bytes(pack_raw(width, height, triples))
        return path
    return _write
