"""Wavelength and amplitude drift for a single oscillator.

Each oscillator blends linearly from its current wavelength/amplitude towards
randomly chosen targets. The blend window lasts ``current_wavelength``
seconds; once it has elapsed the targets are committed and new ones drawn.
The commit happens before the blend is read, so the first sample after a
commit always sits at ``t = 0`` and the blended values stay continuous
across the seam.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Tuple

import numpy as np

if TYPE_CHECKING:  # pragma: no cover
    from ..sources.oscillator import WaveOscillator


def lerp(
    start: np.ndarray | float, end: np.ndarray | float, t: np.ndarray | float
) -> np.ndarray | float:
    return start + (end - start) * t


def window(osc: WaveOscillator) -> float:
    """Length of the current blend window in samples."""
    return osc.current_wavelength * osc.config.sample_rate


def draw_targets(osc: WaveOscillator) -> None:
    config = osc.config
    osc.next_wavelength = osc.transition_rng.uniform(config.min_wavelength, config.max_wavelength)
    osc.next_amplitude = osc.transition_rng.uniform(config.min_volume, config.max_volume)


def retarget(osc: WaveOscillator) -> None:
    osc.current_wavelength = osc.next_wavelength
    osc.amplitude = osc.next_amplitude
    draw_targets(osc)
    osc.transition_samples = 0


def prepare(osc: WaveOscillator) -> None:
    """Commit the pending targets if the blend window has elapsed."""
    if osc.transition_samples >= window(osc):
        retarget(osc)


def remaining(osc: WaveOscillator) -> int:
    """Samples left before the next commit (call after ``prepare``)."""
    return math.ceil(window(osc)) - osc.transition_samples


def advance(osc: WaveOscillator) -> Tuple[float, float]:
    """Step one sample and return the blended ``(wavelength, amplitude)``."""
    prepare(osc)
    t = osc.transition_samples / window(osc)
    osc.transition_samples += 1
    return (
        lerp(osc.current_wavelength, osc.next_wavelength, t),
        lerp(osc.amplitude, osc.next_amplitude, t),
    )


def advance_block(osc: WaveOscillator, count: int) -> Tuple[np.ndarray, np.ndarray]:
    """Vectorized ``advance`` over ``count`` samples of one blend window."""
    prepare(osc)
    if count > remaining(osc):
        raise ValueError(f"Block of {count} samples crosses a transition commit")
    ticks = osc.transition_samples + np.arange(count)
    t = ticks / window(osc)
    osc.transition_samples += count
    return (
        lerp(osc.current_wavelength, osc.next_wavelength, t),
        lerp(osc.amplitude, osc.next_amplitude, t),
    )
