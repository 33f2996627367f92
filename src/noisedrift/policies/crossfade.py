"""Discrete noise segments joined by linear crossfades."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..config import SynthesisConfig
from ..core.base import TransitionPolicy, check_cancelled
from ..core.engine import mix_into
from ..core.registry import registry
from ..modulation.transition import lerp
from ..sources.noise import NOISE_TYPES, NoiseModel

logger = logging.getLogger(__name__)


@dataclass
@registry.register_policy
class SegmentCrossfade(TransitionPolicy):
    """Chain randomly coloured noise segments, then thicken with offset layers.

    Each segment lasts between ``segment_min_seconds`` and
    ``segment_max_seconds``; its tail is faded into noise of the next colour
    over ``crossfade_seconds``. The finished track is overlaid
    ``layer_count`` times with random sub-``max_layer_offset_seconds``
    delays and averaged.
    """

    name: str = "segment-crossfade"
    initial_noise: str = "white"

    def __post_init__(self) -> None:
        if self.initial_noise not in NOISE_TYPES:
            raise ValueError(f"Unsupported noise type '{self.initial_noise}'")

    def render(
        self,
        config: SynthesisConfig,
        rng: np.random.Generator,
        cancel: Optional[threading.Event] = None,
    ) -> np.ndarray:
        base = self._render_segments(config, rng, cancel)
        return self._layer(config, rng, base)

    def _render_segments(self, config, rng, cancel) -> np.ndarray:
        total = config.total_samples
        sample_rate = config.sample_rate
        fade_samples = int(config.crossfade_seconds * sample_rate)
        noise = NoiseModel(rng)
        base = np.zeros(total, dtype=np.float64)
        current = self.initial_noise
        write = 0
        while write < total:
            check_cancelled(cancel)
            seconds = rng.uniform(config.segment_min_seconds, config.segment_max_seconds)
            length = min(max(1, int(seconds * sample_rate)), total - write)
            following = config.noise_types[rng.integers(len(config.noise_types))]
            body = noise.segment(current, length)
            fade = min(fade_samples, length)
            if fade:
                ramp = np.arange(fade) / fade
                incoming = noise.segment(following, fade)
                body[-fade:] = lerp(body[-fade:], incoming, ramp)
            base[write:write + length] = body
            logger.debug("Segment %s -> %s at %d (%d samples)", current, following, write, length)
            write += length
            current = following
        return base

    def _layer(self, config, rng, base: np.ndarray) -> np.ndarray:
        max_offset = int(config.max_layer_offset_seconds * config.sample_rate)
        layered = np.zeros_like(base)

        def shifted(offset: int) -> np.ndarray:
            layer = np.zeros_like(base)
            offset = min(offset, len(base))
            layer[offset:] = base[:len(base) - offset]
            return layer / config.layer_count

        offsets = rng.integers(0, max_offset, size=config.layer_count) if max_offset else [0] * config.layer_count
        return mix_into(layered, (shifted(int(offset)) for offset in offsets))

    def to_dict(self) -> dict[str, object]:
        data = super().to_dict()
        data.update({"initial_noise": self.initial_noise})
        return data
