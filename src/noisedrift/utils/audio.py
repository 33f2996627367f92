"""Audio utility helpers for serialization and level control."""

from __future__ import annotations

import io
import wave
from pathlib import Path

import numpy as np


def _pcm16(buffer: np.ndarray) -> bytes:
    scaled = np.clip(buffer, -1.0, 1.0)
    return (scaled * 32767).astype(np.int16).tobytes()


def _write_mono(target, buffer: np.ndarray, sample_rate: int) -> None:
    with wave.open(target, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        wf.writeframes(_pcm16(buffer))


def write_wav(path: Path | str, buffer: np.ndarray, sample_rate: int) -> Path:
    """Write a mono 16-bit WAV file from a normalized floating point buffer."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    _write_mono(str(path), buffer, sample_rate)
    return path


def encode_wav_bytes(buffer: np.ndarray, sample_rate: int) -> bytes:
    """Return WAV-formatted bytes for an in-memory buffer."""

    with io.BytesIO() as bio:
        _write_mono(bio, buffer, sample_rate)
        return bio.getvalue()


def peak(buffer: np.ndarray) -> float:
    if len(buffer) == 0:
        return 0.0
    return float(np.max(np.abs(buffer)))


def normalize(buffer: np.ndarray) -> np.ndarray:
    """Scale the buffer down by its peak if it would clip.

    Buffers already within ``[-1, 1]`` (including silence) come back
    unchanged, so the level is only bounded, never fixed.
    """
    max_amp = peak(buffer)
    if max_amp <= 1.0:
        return buffer
    return buffer / max_amp
