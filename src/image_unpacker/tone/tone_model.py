"""
tone_model.py — linear float samples → gamma-corrected 8-bit channel values.

WHAT THIS MODULE DOES
---------------------
  1) Gamma correction: f → f ** (1 / gamma), skipped when gamma == 1
  2) Standard dynamic range: byte = trunc(clamp(f * 255.99, 0, 255))

LEARNING NOTES
--------------
• Scaling by 255.99 instead of 255 lets an exact 1.0 land on 255 after
  truncation while keeping every bucket almost the same width.
• Clamp happens before truncation; inputs outside [0, 1] (over-exposed or
  negative samples) saturate at 255 or 0.
• Negative samples under a non-integer exponent are NaN. They are not
  clamped before gamma; the quantizer maps NaN to 0.

© 2025 Ali Pouya — Image Unpacker
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_GAMMA = 2.0
SDR_SCALE = 255.99
SDR_MAX = 255


# -----------------------------------------------------------------------------
# Parameters
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToneParams:
    """
    Tone-mapping parameters for one conversion.

    gamma : display gamma exponent; samples are raised to 1/gamma
    scale : multiplier applied before clamping to [0, SDR_MAX]
    """
    gamma: float = DEFAULT_GAMMA
    scale: float = SDR_SCALE

    def __post_init__(self):
        if not math.isfinite(self.gamma) or self.gamma <= 0.0:
            raise ValueError(f"gamma must be a positive finite number, got {self.gamma}")


# -----------------------------------------------------------------------------
# Gamma
# -----------------------------------------------------------------------------
def gamma_correct(samples: np.ndarray, gamma: float = DEFAULT_GAMMA) -> np.ndarray:
    """
    Apply f ** (1 / gamma) to every sample.

    gamma == 1.0 returns the input unchanged. Negative samples yield NaN
    for non-integer exponents; that is accepted, not an error.
    """
    if gamma == 1.0:
        return samples
    if not math.isfinite(gamma) or gamma <= 0.0:
        raise ValueError(f"gamma must be a positive finite number, got {gamma}")

    with np.errstate(invalid="ignore"):
        return np.power(samples, 1.0 / gamma)


# -----------------------------------------------------------------------------
# Quantization
# -----------------------------------------------------------------------------
def standard_dynamic_range(samples: np.ndarray, scale: float = SDR_SCALE) -> np.ndarray:
    """
    Quantize samples to uint8.

    Parameters
    ----------
    samples : float array, nominally in [0, 1]
    scale : pre-clamp multiplier (255.99 for bit-compatible output)

    Returns
    -------
    bytes : uint8 array, same shape as `samples`
    """
    scaled = np.asarray(samples, dtype=np.float64) * scale
    scaled = np.where(np.isnan(scaled), 0.0, scaled)
    return np.clip(scaled, 0.0, float(SDR_MAX)).astype(np.uint8)

