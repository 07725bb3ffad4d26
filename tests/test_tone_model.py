import numpy as np
import pytest

from image_unpacker.tone.tone_model import (
    SDR_SCALE,
    ToneParams,
    gamma_correct,
    standard_dynamic_range,
)


def test_boundary_values_quantize():
    out = standard_dynamic_range(np.array([1.0, 0.0, -0.5, 2.0]))
    assert out.dtype == np.uint8
    assert out.tolist() == [255, 0, 0, 255]


def test_quantize_truncates_after_scaling():
    # 0.5 * 255.99 = 127.995
    assert standard_dynamic_range(np.array([0.5])).tolist() == [127]
    assert standard_dynamic_range(np.array([0.999])).tolist() == [255]


def test_quantize_nan_and_inf():
    out = standard_dynamic_range(np.array([np.nan, np.inf, -np.inf]))
    assert out.tolist() == [0, 255, 0]


def test_gamma_identity_returns_input():
    samples = np.array([0.25, -1.0, 3.0])
    assert gamma_correct(samples, 1.0) is samples


def test_gamma_identity_matches_raw_quantization():
    samples = np.linspace(-0.2, 1.2, 50)
    np.testing.assert_array_equal(
        standard_dynamic_range(gamma_correct(samples, 1.0)),
        standard_dynamic_range(samples),
    )


def test_gamma_two_is_square_root():
    out = gamma_correct(np.array([0.25, 1.0, 0.0]), 2.0)
    np.testing.assert_allclose(out, [0.5, 1.0, 0.0])


def test_gamma_negative_sample_is_nan_then_zero():
    corrected = gamma_correct(np.array([-0.5]), 2.2)
    assert np.isnan(corrected[0])
    assert standard_dynamic_range(corrected).tolist() == [0]


@pytest.mark.parametrize("gamma", [0.0, -1.0, float("inf"), float("nan")])
def test_invalid_gamma_rejected(gamma):
    with pytest.raises(ValueError):
        ToneParams(gamma=gamma)
    with pytest.raises(ValueError):
        gamma_correct(np.array([0.5]), gamma)


def test_tone_params_defaults():
    p = ToneParams()
    assert p.gamma == 2.0
    assert p.scale == SDR_SCALE
