"""Core abstract interfaces for transition policies."""

from __future__ import annotations

import abc
import threading
from typing import Any, Optional

import numpy as np

from ..config import SynthesisConfig


class SynthesisCancelled(RuntimeError):
    """Raised when a render is cancelled before the buffer is complete."""


def check_cancelled(cancel: Optional[threading.Event]) -> None:
    if cancel is not None and cancel.is_set():
        raise SynthesisCancelled("Synthesis cancelled")


class TransitionPolicy(abc.ABC):
    """Base class for the strategies that turn a configuration into audio."""

    name: str = "transition_policy"

    @abc.abstractmethod
    def render(
        self,
        config: SynthesisConfig,
        rng: np.random.Generator,
        cancel: Optional[threading.Event] = None,
    ) -> np.ndarray:
        """Produce the raw, un-normalized buffer of ``config.total_samples`` samples."""

    def to_dict(self) -> dict[str, Any]:
        """Serializable representation for configuration export."""
        return {"type": self.__class__.__name__}
