"""Noise-modulated sine oscillators with drifting pitch and loudness."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

import numpy as np

from ..config import SynthesisConfig
from ..modulation import envelope, transition
from .noise import NoiseModel

TWO_PI = 2.0 * math.pi


def sine_value(elapsed: np.ndarray | float, wavelength: np.ndarray | float) -> np.ndarray | float:
    """``sin(2*pi*elapsed/wavelength)`` with whole cycles dropped first.

    Keeps the trig argument inside one period however long the run is.
    """
    return np.sin(TWO_PI * np.mod(elapsed / wavelength, 1.0))


@dataclass
class WaveOscillator:
    """One layer of the bank.

    Phase, transition progress and envelope time are counted in samples so
    long runs accumulate no rounding drift; ``phase`` and ``envelope_time``
    give the same values in seconds.
    """

    noise_type: str
    config: SynthesisConfig
    current_wavelength: float
    next_wavelength: float
    amplitude: float
    next_amplitude: float
    envelope_cycle_length: float
    transition_rng: np.random.Generator = field(repr=False)
    envelope_rng: np.random.Generator = field(repr=False)
    noise: NoiseModel = field(repr=False)
    phase_samples: int = 0
    transition_samples: int = 0
    envelope_samples: int = 0

    @classmethod
    def create(cls, noise_type: str, config: SynthesisConfig, rng: np.random.Generator) -> "WaveOscillator":
        """Build an oscillator with randomized starting parameters.

        ``rng`` is split into independent transition, envelope and noise
        streams so each can be consumed sample by sample or in blocks.
        """
        transition_rng, envelope_rng, noise_rng = rng.spawn(3)
        low, high = config.min_wavelength, config.max_wavelength
        return cls(
            noise_type=noise_type,
            config=config,
            current_wavelength=transition_rng.uniform(low, high),
            next_wavelength=transition_rng.uniform(low, high),
            amplitude=config.initial_amplitude,
            next_amplitude=transition_rng.uniform(config.min_volume, config.max_volume),
            envelope_cycle_length=envelope_rng.uniform(low, high),
            transition_rng=transition_rng,
            envelope_rng=envelope_rng,
            noise=NoiseModel(noise_rng),
        )

    @property
    def phase(self) -> float:
        return self.phase_samples / self.config.sample_rate

    @property
    def envelope_time(self) -> float:
        return self.envelope_samples / self.config.sample_rate

    def tick(self) -> float:
        """Advance one sample and return this layer's contribution."""
        wavelength, amplitude = transition.advance(self)
        gain = envelope.advance(self)
        sine = sine_value(self.phase, wavelength)
        self.phase_samples += 1
        return float(sine * self.noise.sample(self.noise_type) * amplitude * gain)

    def render(self, count: int) -> np.ndarray:
        """Produce the next ``count`` samples, continuing from the current state.

        Works in spans that end at the next transition commit or envelope
        wrap, whichever comes first.
        """
        out = np.empty(count, dtype=np.float64)
        sample_rate = self.config.sample_rate
        pos = 0
        while pos < count:
            transition.prepare(self)
            span = min(count - pos, transition.remaining(self), envelope.remaining(self))
            wavelengths, amplitudes = transition.advance_block(self, span)
            gains = envelope.advance_block(self, span)
            elapsed = (self.phase_samples + np.arange(span)) / sample_rate
            sine = sine_value(elapsed, wavelengths)
            noise = self.noise.block(self.noise_type, span)
            out[pos:pos + span] = sine * noise * amplitudes * gains
            self.phase_samples += span
            pos += span
        return out


def create_bank(config: SynthesisConfig, rng: np.random.Generator) -> List[WaveOscillator]:
    """Create ``config.total_waves`` oscillators, ``waves_per_type`` per noise type."""
    children = rng.spawn(config.total_waves)
    return [
        WaveOscillator.create(config.noise_types[index // config.waves_per_type], config, child)
        for index, child in enumerate(children)
    ]
