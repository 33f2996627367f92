"""Synthesis engine that runs a transition policy and prepares its output."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable, Optional

import numpy as np

from ..config import SynthesisConfig
from ..utils.audio import normalize, peak
from .base import TransitionPolicy
from .registry import registry

logger = logging.getLogger(__name__)


def mix_into(target: np.ndarray, buffers: Iterable[np.ndarray]) -> np.ndarray:
    """Add buffers into ``target`` one after another, in iteration order."""
    for buffer in buffers:
        length = min(len(target), len(buffer))
        target[:length] += buffer[:length]
    return target


def finalize(buffer: np.ndarray) -> np.ndarray:
    """Peak-normalize to prevent clipping and hand back a float32 buffer."""
    max_abs = peak(buffer)
    if max_abs > 1.0:
        logger.info("Normalizing peak %.4f down to 1.0", max_abs)
    return normalize(buffer).astype(np.float32)


@dataclass
class SynthesisEngine:
    """Coordinate one render: configuration, random source and policy.

    The generator is owned by the engine; seed it for reproducible output.
    When no policy is given the one named by ``config.transition_policy`` is
    created from the registry.
    """

    config: SynthesisConfig = field(default_factory=SynthesisConfig)
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    policy: Optional[TransitionPolicy] = None

    def __post_init__(self) -> None:
        if self.policy is None:
            self.policy = registry.create_policy(self.config.transition_policy)

    def render(self, cancel: Optional[threading.Event] = None) -> np.ndarray:
        """Render the full buffer and normalize it."""
        config = self.config
        logger.info(
            "Rendering %.1fs at %d Hz with %s (%d waves)",
            config.duration_seconds,
            config.sample_rate,
            self.policy.name,
            config.total_waves,
        )
        combined = self.policy.render(config, self.rng, cancel)
        buffer = finalize(combined)
        logger.info("Rendered %d samples", len(buffer))
        return buffer

    def configuration(self) -> dict:
        return {
            "config": self.config.to_dict(),
            "policy": self.policy.to_dict(),
        }
