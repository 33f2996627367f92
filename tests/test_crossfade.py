import numpy as np
import pytest

from noisedrift import SegmentCrossfade, SynthesisConfig
from noisedrift.sources.noise import SEGMENT_GAINS


def white_config(**overrides):
    params = dict(
        sample_rate=100,
        duration_seconds=3,
        noise_types=("white",),
        waves_per_type=1,
        segment_min_seconds=1.0,
        segment_max_seconds=1.0,
        crossfade_seconds=0.5,
        layer_count=1,
        max_layer_offset_seconds=0.0,
    )
    params.update(overrides)
    return SynthesisConfig(**params)


def white_block(rng, length):
    return (rng.random(length) * 2 - 1) * SEGMENT_GAINS["white"]


def test_segment_tails_blend_into_next_colour():
    config = white_config()

    base = SegmentCrossfade()._render_segments(config, np.random.default_rng(17), None)

    replay = np.random.default_rng(17)
    ramp = np.arange(50) / 50
    expected = []
    for _ in range(3):
        replay.uniform(1.0, 1.0)
        replay.integers(1)
        body = white_block(replay, 100)
        incoming = white_block(replay, 50)
        body[-50:] = body[-50:] + (incoming - body[-50:]) * ramp
        expected.append(body)

    assert len(base) == 300
    assert np.allclose(base, np.concatenate(expected), rtol=0, atol=1e-12)


def test_segments_tile_buffer_within_length_bounds():
    config = white_config(
        sample_rate=400,
        duration_seconds=5,
        segment_min_seconds=0.2,
        segment_max_seconds=0.4,
        crossfade_seconds=0.0,
    )

    base = SegmentCrossfade()._render_segments(config, np.random.default_rng(23), None)

    replay = np.random.default_rng(23)
    lengths = []
    blocks = []
    while sum(lengths) < config.total_samples:
        seconds = replay.uniform(0.2, 0.4)
        length = min(int(seconds * 400), config.total_samples - sum(lengths))
        replay.integers(1)
        blocks.append(white_block(replay, length))
        lengths.append(length)

    assert sum(lengths) == len(base) == 2000
    assert all(80 <= length <= 160 for length in lengths[:-1])
    assert 1 <= lengths[-1] <= 160
    assert np.allclose(base, np.concatenate(blocks), rtol=0, atol=1e-12)


def test_single_unshifted_layer_is_base_track():
    config = white_config()
    base = np.random.default_rng(4).standard_normal(300)

    layered = SegmentCrossfade()._layer(config, np.random.default_rng(5), base)

    assert np.array_equal(layered, base)


def test_layers_are_scaled_and_delayed_within_offset():
    config = white_config(layer_count=4, max_layer_offset_seconds=0.2)
    impulse = np.zeros(300)
    impulse[0] = 1.0

    layered = SegmentCrossfade()._layer(config, np.random.default_rng(8), impulse)

    offsets = np.random.default_rng(8).integers(0, 20, size=4)
    expected = np.zeros(300)
    for offset in offsets:
        expected[offset] += 0.25
    assert np.allclose(layered, expected)
    assert layered.sum() == pytest.approx(1.0)
    assert np.flatnonzero(layered).max() < 20


def test_unknown_initial_noise_rejected_on_creation():
    with pytest.raises(ValueError):
        SegmentCrossfade(initial_noise="violet")
