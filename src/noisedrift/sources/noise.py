"""Cheap per-sample noise colours driven by an injected random generator."""

from __future__ import annotations

import numpy as np
from scipy.signal import lfilter

NOISE_TYPES = ("pink", "gray", "brown", "white")

# Output gains of the coloured blocks used by segment crossfades.
SEGMENT_GAINS = {
    "white": 0.8,
    "pink": 0.7,
    "brown": 1.2,
    "gray": 0.6,
}

BROWN_DAMPING = 0.98
BROWN_SCALE = 0.02


def _check(noise_type: str) -> None:
    if noise_type not in NOISE_TYPES:
        raise ValueError(f"Unsupported noise type '{noise_type}'")


class NoiseModel:
    """Draw noise samples of a given colour from one random stream.

    The colours are rough spectral approximations rather than filtered noise:
    white and gray are full-range uniform, pink is a softened sum of two
    uniforms and brown a narrow uniform. ``block`` consumes the stream in the
    same order as repeated ``sample`` calls, so both paths stay in lockstep.
    """

    def __init__(self, rng: np.random.Generator) -> None:
        self.rng = rng

    def sample(self, noise_type: str) -> float:
        _check(noise_type)
        random = self.rng.random
        if noise_type == "pink":
            return (random() + random() - 1) * 0.5
        if noise_type == "brown":
            return (random() - 0.5) * 0.3
        return random() * 2 - 1

    def block(self, noise_type: str, count: int) -> np.ndarray:
        _check(noise_type)
        if noise_type == "pink":
            pairs = self.rng.random((count, 2))
            return (pairs[:, 0] + pairs[:, 1] - 1) * 0.5
        uniform = self.rng.random(count)
        if noise_type == "brown":
            return (uniform - 0.5) * 0.3
        return uniform * 2 - 1

    def segment(self, noise_type: str, length: int) -> np.ndarray:
        """Coloured block for segment crossfades.

        Brown noise here is a damped random walk started from rest.
        """
        _check(noise_type)
        gain = SEGMENT_GAINS[noise_type]
        random = self.rng.random
        if noise_type == "pink":
            return (random(length) + random(length) - 1) * 0.5 * gain
        steps = random(length) * 2 - 1
        if noise_type == "brown":
            walk = lfilter([1.0], [1.0, -BROWN_DAMPING], steps)
            return walk * BROWN_SCALE * gain
        return steps * gain
