"""Immutable synthesis configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Tuple

from .sources.noise import NOISE_TYPES


@dataclass(frozen=True)
class SynthesisConfig:
    """All parameters of a render, fixed for the lifetime of the run.

    Wavelengths and envelope cycle lengths are drawn from
    ``[min_wavelength, max_wavelength]`` seconds, retargeted amplitudes from
    ``[min_volume, max_volume]``. The ``segment_*``, ``crossfade_seconds`` and
    ``layer*`` fields only matter to the segment crossfade policy.
    """

    sample_rate: int = 44100
    duration_seconds: float = 360
    min_wavelength: float = 5.0
    max_wavelength: float = 7.0
    min_volume: float = 0.8
    max_volume: float = 1.0
    initial_amplitude: float = 1.0
    noise_types: Tuple[str, ...] = ("pink", "gray", "brown", "white")
    waves_per_type: int = 7
    transition_policy: str = "continuous"
    segment_min_seconds: float = 3.0
    segment_max_seconds: float = 7.0
    crossfade_seconds: float = 1.0
    layer_count: int = 5
    max_layer_offset_seconds: float = 1.0
    output_path: str = "smooth_noise_output_final.wav"

    def __post_init__(self) -> None:
        if self.sample_rate <= 0:
            raise ValueError("sample_rate must be positive")
        if self.duration_seconds < 0:
            raise ValueError("duration_seconds cannot be negative")
        if self.min_wavelength <= 0:
            raise ValueError("min_wavelength must be positive")
        if self.max_wavelength < self.min_wavelength:
            raise ValueError("max_wavelength must not be below min_wavelength")
        if self.max_volume < self.min_volume:
            raise ValueError("max_volume must not be below min_volume")
        if not self.noise_types:
            raise ValueError("At least one noise type is required")
        unknown = [tag for tag in self.noise_types if tag not in NOISE_TYPES]
        if unknown:
            raise ValueError(f"Unknown noise types: {', '.join(unknown)}")
        if self.waves_per_type < 1:
            raise ValueError("waves_per_type must be at least 1")
        if not 0 < self.segment_min_seconds <= self.segment_max_seconds:
            raise ValueError("Segment bounds must satisfy 0 < min <= max")
        if self.crossfade_seconds < 0 or self.max_layer_offset_seconds < 0:
            raise ValueError("Crossfade and layer offsets cannot be negative")
        if self.layer_count < 1:
            raise ValueError("layer_count must be at least 1")

    @property
    def total_waves(self) -> int:
        return len(self.noise_types) * self.waves_per_type

    @property
    def total_samples(self) -> int:
        return int(self.sample_rate * self.duration_seconds)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["noise_types"] = list(self.noise_types)
        data.update({
            "total_waves": self.total_waves,
            "total_samples": self.total_samples,
        })
        return data


DEFAULT_CONFIG = SynthesisConfig()
