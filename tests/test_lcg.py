"""Tests for the 64-bit LCG stream generator."""

import random

import pytest
import torch

from jumphash.hashing.lcg import (
    LCG_MULTIPLIER,
    MASK64,
    LCGStream,
    from_int64,
    lcg_next,
    lcg_next_tensor,
    to_int64,
    u64,
)


def test_lcg_known_steps() -> None:
    """Test first steps from small seeds."""
    assert lcg_next(0) == 1
    assert lcg_next(1) == 2862933555777941758
    assert lcg_next(2) == 5725867111555883515


def test_lcg_wraps_modulo_2_64() -> None:
    """Overflow wraps instead of growing past 64 bits."""
    assert lcg_next(MASK64) == 15583810517931609860
    assert lcg_next(MASK64) == (MASK64 * LCG_MULTIPLIER + 1) % 2**64

    random.seed(7)
    for _ in range(1000):
        state = random.getrandbits(64)
        nxt = lcg_next(state)
        assert 0 <= nxt <= MASK64
        assert nxt == (state * LCG_MULTIPLIER + 1) % 2**64


def test_lcg_masks_input() -> None:
    """Out-of-range inputs are reduced to their uint64 value first."""
    assert lcg_next(-1) == lcg_next(MASK64)
    assert lcg_next(2**64 + 5) == lcg_next(5)
    assert u64(-1) == MASK64


def test_stream_matches_function() -> None:
    """LCGStream yields the iterated lcg_next sequence."""
    stream = LCGStream(12345)
    state = 12345
    for sample in stream.take(50):
        state = lcg_next(state)
        assert sample == state
    assert stream.state == state


def test_stream_reproducible() -> None:
    """Two streams from the same seed agree; different seeds diverge."""
    a = LCGStream(0xDEADBEEF)
    b = LCGStream(0xDEADBEEF)
    c = LCGStream(0xDEADBEF0)

    seq_a = a.take(100)
    assert seq_a == b.take(100)
    assert seq_a != c.take(100)


def test_stream_is_iterator() -> None:
    """Iterating a stream advances it."""
    stream = LCGStream(1)
    it = iter(stream)
    assert next(it) == 2862933555777941758
    assert stream.state == 2862933555777941758
    assert next(stream) == lcg_next(2862933555777941758)


def test_stream_validation() -> None:
    """Bad seeds and negative take counts are rejected."""
    with pytest.raises(TypeError):
        LCGStream("1")
    with pytest.raises(TypeError):
        LCGStream(True)
    with pytest.raises(ValueError):
        LCGStream(1).take(-1)
    assert LCGStream(1).take(0) == []
    assert LCGStream(-1).state == MASK64


def test_int64_conversion() -> None:
    """uint64 <-> int64 bit-pattern conversion."""
    assert to_int64(0) == 0
    assert to_int64(2**63 - 1) == 2**63 - 1
    assert to_int64(2**63) == -(2**63)
    assert to_int64(MASK64) == -1
    assert from_int64(-1) == MASK64

    random.seed(3)
    for _ in range(100):
        x = random.getrandbits(64)
        assert from_int64(to_int64(x)) == x


def test_lcg_tensor_bit_exact() -> None:
    """lcg_next_tensor matches lcg_next on the uint64 interpretation."""
    random.seed(42)
    states = [0, 1, MASK64, 2**63, 2**63 - 1] + [random.getrandbits(64) for _ in range(200)]

    state_t = torch.tensor([to_int64(s) for s in states], dtype=torch.long)
    for _ in range(5):
        state_t = lcg_next_tensor(state_t)
        states = [lcg_next(s) for s in states]
        expected = torch.tensor([to_int64(s) for s in states], dtype=torch.long)
        assert torch.equal(state_t, expected)


def test_lcg_tensor_rejects_float() -> None:
    """Only int64 tensors can carry uint64 state."""
    with pytest.raises(TypeError):
        lcg_next_tensor(torch.zeros(3))
