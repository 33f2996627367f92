"""Continuous multi-wave interpolation: the default drifting noise bank."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..config import SynthesisConfig
from ..core.base import TransitionPolicy, check_cancelled
from ..core.engine import mix_into
from ..core.registry import registry
from ..sources.oscillator import create_bank

logger = logging.getLogger(__name__)


@dataclass
@registry.register_policy
class ContinuousInterpolation(TransitionPolicy):
    """Sum a bank of oscillators whose parameters drift continuously.

    The buffer is filled in blocks of ``block_seconds``. Within a block each
    oscillator renders its next chunk (on a thread pool when ``workers`` is
    above one) and the chunks are summed in oscillator order, so the result
    does not depend on ``workers``. ``vectorized=False`` runs the plain
    sample-by-sample loop instead.
    """

    name: str = "continuous"
    block_seconds: float = 10.0
    workers: int = 1
    vectorized: bool = True

    def render(
        self,
        config: SynthesisConfig,
        rng: np.random.Generator,
        cancel: Optional[threading.Event] = None,
    ) -> np.ndarray:
        oscillators = create_bank(config, rng)
        combined = np.zeros(config.total_samples, dtype=np.float64)
        if self.vectorized:
            self._render_blocks(config, oscillators, combined, cancel)
        else:
            self._render_samples(oscillators, combined, cancel)
        return combined

    def _render_samples(self, oscillators, combined, cancel) -> None:
        for index in range(len(combined)):
            check_cancelled(cancel)
            total = 0.0
            for osc in oscillators:
                total += osc.tick()
            combined[index] = total

    def _render_blocks(self, config, oscillators, combined, cancel) -> None:
        block = max(1, int(self.block_seconds * config.sample_rate))
        executor = ThreadPoolExecutor(max_workers=self.workers) if self.workers > 1 else None
        mapper = executor.map if executor is not None else map
        try:
            for start in range(0, len(combined), block):
                check_cancelled(cancel)
                count = min(block, len(combined) - start)
                chunks = mapper(lambda osc: osc.render(count), oscillators)
                mix_into(combined[start:start + count], chunks)
                logger.debug("Rendered samples %d-%d", start, start + count)
        finally:
            if executor is not None:
                executor.shutdown()

    def to_dict(self) -> dict[str, object]:
        data = super().to_dict()
        data.update({
            "block_seconds": self.block_seconds,
            "workers": self.workers,
            "vectorized": self.vectorized,
        })
        return data
