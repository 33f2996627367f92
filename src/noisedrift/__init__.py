"""noisedrift - Procedural drifting ambient noise synthesis."""

from .config import DEFAULT_CONFIG, SynthesisConfig
from .core.base import SynthesisCancelled, TransitionPolicy
from .core.engine import SynthesisEngine
from .core.registry import registry
from .policies.continuous import ContinuousInterpolation
from .policies.crossfade import SegmentCrossfade
from .sources.noise import NoiseModel
from .sources.oscillator import WaveOscillator, create_bank

__all__ = [
    "DEFAULT_CONFIG",
    "SynthesisConfig",
    "SynthesisCancelled",
    "TransitionPolicy",
    "SynthesisEngine",
    "registry",
    "ContinuousInterpolation",
    "SegmentCrossfade",
    "NoiseModel",
    "WaveOscillator",
    "create_bank",
]
