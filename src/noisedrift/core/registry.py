"""Central registry for discovering transition policies."""

from __future__ import annotations

from typing import Dict, Iterable, Type

from .base import TransitionPolicy


class _Registry:
    """Simple pluggable registry of policies keyed by name."""

    def __init__(self) -> None:
        self._policies: Dict[str, Type[TransitionPolicy]] = {}

    def register_policy(self, cls: Type[TransitionPolicy]) -> Type[TransitionPolicy]:
        self._policies[cls.name] = cls
        return cls

    def policies(self) -> Iterable[str]:
        return sorted(self._policies.keys())

    def create_policy(self, name: str, **kwargs) -> TransitionPolicy:
        if name not in self._policies:
            raise KeyError(f"Unknown transition policy '{name}'")
        return self._policies[name](**kwargs)  # type: ignore[arg-type]


registry = _Registry()
