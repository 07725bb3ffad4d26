import pytest
from PIL import Image as PILImage

from image_unpacker.main_unpack import main


@pytest.fixture
def good_raw(raw_file):
    return raw_file(2, 1, [(1.0, 0.0, 0.5), (1.0, 0.0, 0.5)])


def test_converts_file(good_raw, tmp_path, capsys):
    out = tmp_path / "out.png"
    assert main(["-i", str(good_raw), "-o", str(out)]) == 0
    assert "[OK] Saved 2x1 image" in capsys.readouterr().out
    with PILImage.open(out) as im:
        assert im.getpixel((0, 0)) == (255, 0, 181, 255)


def test_gamma_flag(good_raw, tmp_path):
    out = tmp_path / "out.png"
    assert main(["-i", str(good_raw), "-o", str(out), "-gamma", "1"]) == 0
    with PILImage.open(out) as im:
        assert im.getpixel((1, 0)) == (255, 0, 127, 255)


def test_histogram_flag(good_raw, tmp_path):
    out = tmp_path / "out.png"
    hist = tmp_path / "hist.png"
    assert main(["-i", str(good_raw), "-o", str(out), "-hist", str(hist)]) == 0
    assert hist.exists()


@pytest.mark.parametrize("argv", [[], ["-i", "in.raw"], ["-o", "out.png"]])
def test_missing_flags_print_usage(argv, capsys):
    assert main(argv) == 1
    assert "usage:" in capsys.readouterr().err


def test_wrong_extension(good_raw, tmp_path, capsys):
    out = tmp_path / "out.jpg"
    assert main(["-i", str(good_raw), "-o", str(out)]) == 1
    assert "usage:" in capsys.readouterr().err
    assert not out.exists()


def test_non_positive_gamma(good_raw, tmp_path):
    assert main(["-i", str(good_raw), "-o", str(tmp_path / "o.png"), "-gamma", "0"]) == 1


def test_decode_failure_exits_nonzero(tmp_path, caplog):
    bad = tmp_path / "bad.raw"
    bad.write_bytes(b"\x01\x00")
    out = tmp_path / "out.png"
    assert main(["-i", str(bad), "-o", str(out)]) == 1
    assert "too small" in caplog.text
    assert not out.exists()


def test_missing_input_exits_nonzero(tmp_path):
    assert main(["-i", str(tmp_path / "nope.raw"), "-o", str(tmp_path / "out.png")]) == 1
