"""Slow periodic gain applied on top of an oscillator's drifting amplitude."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:  # pragma: no cover
    from ..sources.oscillator import WaveOscillator

TWO_PI = 2.0 * math.pi


def envelope_value(elapsed: np.ndarray | float, cycle_length: float) -> np.ndarray | float:
    """Raised sine in ``[0, 1]`` for ``elapsed`` seconds into a cycle."""
    progress = np.mod(elapsed / cycle_length, 1.0)
    return 0.5 + 0.5 * np.sin(TWO_PI * progress)


def remaining(osc: WaveOscillator) -> int:
    """Samples left before the envelope cycle wraps."""
    return math.ceil(osc.envelope_cycle_length * osc.config.sample_rate) - osc.envelope_samples


def _wrap_if_due(osc: WaveOscillator) -> None:
    config = osc.config
    if osc.envelope_samples >= osc.envelope_cycle_length * config.sample_rate:
        osc.envelope_samples = 0
        osc.envelope_cycle_length = osc.envelope_rng.uniform(
            config.min_wavelength, config.max_wavelength
        )


def advance(osc: WaveOscillator) -> float:
    value = envelope_value(osc.envelope_samples / osc.config.sample_rate, osc.envelope_cycle_length)
    osc.envelope_samples += 1
    _wrap_if_due(osc)
    return float(value)


def advance_block(osc: WaveOscillator, count: int) -> np.ndarray:
    if count > remaining(osc):
        raise ValueError(f"Block of {count} samples crosses an envelope wrap")
    ticks = osc.envelope_samples + np.arange(count)
    values = envelope_value(ticks / osc.config.sample_rate, osc.envelope_cycle_length)
    osc.envelope_samples += count
    _wrap_if_due(osc)
    return values
