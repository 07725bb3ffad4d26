"""
metrics_module.py — small diagnostics for the unpack pipeline

WHAT THIS MODULE PROVIDES
-------------------------
• clipping_stats(samples)
    Counts gamma-corrected samples that fall outside [0, 1] or are NaN.
    Those are the ones the quantizer saturates, so a large count usually
    means the encoder wrote unnormalized (HDR) values.

• plot_channel_histogram(image, path)
    R/G/B histograms of the output raster, saved as a figure. Good for
    spotting clipping at 0/255 and a wrong gamma (mass piled at one end).

LEARNING NOTES
--------------
• With gamma 2.0 a linear mid-grey of 0.5 lands at byte 181, not 127;
  histograms of correctly encoded files lean to the right.

© 2025 Ali Pouya — Image Unpacker
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np

CHANNELS = ("red", "green", "blue")


# -----------------------------------------------------------------------------
# Out-of-range samples
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ClipStats:
    total: int
    below: int
    above: int
    nan: int

    @property
    def clipped(self) -> int:
        return self.below + self.above + self.nan

    @property
    def fraction(self) -> float:
        return self.clipped / self.total if self.total else 0.0


def clipping_stats(samples: np.ndarray) -> ClipStats:
    """
    Count samples the quantizer will saturate.

    Parameters
    ----------
    samples : float array
        Gamma-corrected samples, nominally in [0, 1].

    Returns
    -------
    ClipStats with counts of values < 0, > 1 and NaN.
    """
    y = np.asarray(samples, dtype=np.float64)
    nan = np.isnan(y)
    finite = y[~nan]
    return ClipStats(
        total=int(y.size),
        below=int(np.count_nonzero(finite < 0.0)),
        above=int(np.count_nonzero(finite > 1.0)),
        nan=int(np.count_nonzero(nan)),
    )


# -----------------------------------------------------------------------------
# Histogram helper
# -----------------------------------------------------------------------------
def plot_channel_histogram(
    image: np.ndarray,
    path: Union[str, Path],
    title: str = "Channel histogram",
    bins: int = 64,
) -> Path:
    """
    Save per-channel histograms of an (H, W, 3|4) uint8 raster.

    Alpha, when present, is ignored. Returns the written path.
    """
    from matplotlib.figure import Figure

    path = Path(path)
    # pyplot-free; the caller's backend is left as is
    fig = Figure(figsize=(6, 4))
    ax = fig.subplots()
    for c, name in enumerate(CHANNELS):
        ax.hist(image[..., c].ravel(), bins=int(bins), range=(0, 255),
                color=name, alpha=0.5, label=name[0].upper())
    ax.set_title(title)
    ax.set_xlabel("Value")
    ax.set_ylabel("Count")
    ax.legend()
    fig.tight_layout()
    fig.savefig(path, dpi=100)
    return path
