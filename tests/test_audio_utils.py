import wave

import numpy as np

from noisedrift.utils.audio import encode_wav_bytes, normalize, peak, write_wav


def test_encode_wav_bytes_contains_riff_header():
    buffer = np.zeros(800, dtype=np.float32)
    data = encode_wav_bytes(buffer, 8000)

    assert data.startswith(b"RIFF")
    assert b"WAVE" in data[:16]


def test_write_wav_creates_mono_pcm_file(tmp_path):
    buffer = np.linspace(-1.0, 1.0, 441, dtype=np.float32)
    path = write_wav(tmp_path / "renders" / "out.wav", buffer, 44100)

    with wave.open(str(path), "rb") as wf:
        assert wf.getnchannels() == 1
        assert wf.getsampwidth() == 2
        assert wf.getframerate() == 44100
        assert wf.getnframes() == 441


def test_normalize_only_reduces_clipping_buffers():
    quiet = np.array([0.1, -0.5, 0.25])
    loud = np.array([0.5, -4.0, 2.0])

    assert normalize(quiet) is quiet
    assert normalize(loud).tolist() == [0.125, -1.0, 0.5]


def test_normalize_is_idempotent():
    buffer = np.random.default_rng(3).standard_normal(1000) * 5
    once = normalize(buffer)

    assert peak(once) <= 1.0 + 1e-12
    assert np.allclose(normalize(once), once)


def test_silence_is_left_alone():
    silence = np.zeros(16)

    assert peak(silence) == 0.0
    assert np.array_equal(normalize(silence), silence)
    assert peak(np.zeros(0)) == 0.0
