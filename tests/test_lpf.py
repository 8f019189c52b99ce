"""Tests for lpf module."""

import math
from itertools import islice, repeat

import numpy as np
import pytest

from fours.dft import dft
from fours.generator import SignalGenerator
from fours.lpf import LowPassConfig, LowPassFilter, apply_low_pass


def _expected_alpha(cutoff: float) -> float:
    rc = 1.0 / (cutoff * 2.0 * math.pi)
    return 1.0 / (1.0 + rc)


def test_config_alpha():
    """alpha = 1 / (1 + RC) with RC = 1 / (2*pi*cutoff)."""
    for cutoff in (0.01, 0.5, 1.0, 10.0, 1000.0):
        config = LowPassConfig(cutoff)
        assert config.rc == pytest.approx(1.0 / (cutoff * 2.0 * math.pi), rel=1e-6)
        assert config.alpha == pytest.approx(_expected_alpha(cutoff), rel=1e-6)
        assert 0.0 < config.alpha <= 1.0


def test_config_is_frozen():
    """Config fields cannot be reassigned."""
    config = LowPassConfig(1.0)
    with pytest.raises(AttributeError):
        config.cutoff = 2.0


@pytest.mark.parametrize("cutoff", [0.0, -1.0, float("nan"), float("inf"), 1e-46, 1e-45])
def test_invalid_cutoff_rejected(cutoff):
    """Non-positive or non-finite cutoffs fail at construction."""
    with pytest.raises(ValueError, match="cutoff"):
        LowPassConfig(cutoff)
    with pytest.raises(ValueError, match="cutoff"):
        apply_low_pass([1, 2, 3], cutoff)


def test_invalid_cutoff_fails_before_pulling():
    """The guard fires without touching the source."""
    pulled = []

    def source():
        pulled.append(True)
        yield 1

    with pytest.raises(ValueError):
        apply_low_pass(source(), 0.0)
    assert pulled == []


def test_step_response_values():
    """Exact transient for a step of 100 with cutoff 1."""
    out = list(apply_low_pass([100] * 5, cutoff=1.0))
    assert out == [86, 98, 99, 99, 99]


def test_first_output_from_zero_state():
    """The first output is trunc(alpha * vin) since prev starts at 0."""
    for cutoff in (0.1, 1.0, 5.0):
        alpha = LowPassConfig(cutoff).alpha
        first = next(apply_low_pass([12345], cutoff))
        assert first == int(np.float32(0) + alpha * np.float32(12345))


def test_truncates_toward_zero():
    """Negative values are truncated toward zero, not floored."""
    out = list(apply_low_pass([-100] * 3, cutoff=1.0))
    assert out == [-86, -98, -99]


def test_zero_stream_stays_zero():
    """A zero input stream yields zeros."""
    assert list(apply_low_pass([0] * 50, cutoff=3.0)) == [0] * 50


def test_constant_stream_converges():
    """A constant stream converges monotonically toward its value."""
    value = 1000
    cutoff = 0.1
    filt = apply_low_pass(repeat(value), cutoff)
    out = list(islice(filt, 200))

    assert all(b >= a for a, b in zip(out, out[1:]))
    assert out[-1] <= value
    # Truncation stalls once alpha * (value - prev) < 1
    assert value - out[-1] < 1.0 / float(filt.alpha) + 1


def test_length_preserved():
    """One output per input, ending when the source ends."""
    for n in (0, 1, 7, 64):
        assert len(list(apply_low_pass(range(n), cutoff=2.0))) == n


def test_state_properties():
    """prev tracks the last output; alpha and cutoff are exposed."""
    filt = LowPassFilter(iter([100, 100]), 1.0)
    assert filt.prev == 0
    assert filt.cutoff == 1.0
    first = next(filt)
    assert filt.prev == first
    next(filt)
    with pytest.raises(StopIteration):
        next(filt)


def test_accepts_config():
    """A prepared LowPassConfig can be passed instead of a cutoff."""
    config = LowPassConfig(1.0)
    assert list(LowPassFilter([100] * 5, config)) == [86, 98, 99, 99, 99]


def test_rejects_non_integer_samples():
    """Float samples are not silently truncated."""
    filt = apply_low_pass([1.5], cutoff=1.0)
    with pytest.raises(TypeError):
        next(filt)


def test_accepts_numpy_integers():
    """numpy integer samples are accepted."""
    out = list(apply_low_pass(np.array([100] * 3, dtype=np.int32), cutoff=1.0))
    assert out == [86, 98, 99]


def test_filter_generated_signal():
    """Chaining: generate a signal, then smooth it."""
    x = [0, 1000, 0, -1000] * 4
    gen = SignalGenerator(dft(x))
    source = (int(round(float(next(gen).real))) for _ in range(len(x)))

    out = list(apply_low_pass(source, cutoff=0.05))

    assert len(out) == len(x)
    assert max(abs(v) for v in out) < 1000


def test_tiny_cutoff_keeps_alpha_in_range():
    """The smallest accepted cutoffs still give a positive finite alpha."""
    config = LowPassConfig(1e-30)
    assert np.isfinite(config.rc)
    assert 0.0 < config.alpha <= 1.0
