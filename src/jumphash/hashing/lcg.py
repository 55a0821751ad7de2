"""64-bit linear congruential stream generator.

This module provides the pseudo-random stream that drives jump hashing:
state = state * 2862933555777941757 + 1 (mod 2^64). All functions operate
on Python ints masked to 64 bits, or on int64 tensors whose bit patterns
are read as uint64, so results are identical across runs and platforms.
"""

from typing import TYPE_CHECKING, Iterator, List

if TYPE_CHECKING:
    import torch

# 64-bit mask for uint64 wrap semantics
MASK64 = (1 << 64) - 1  # 0xFFFFFFFFFFFFFFFF

# Numerical Recipes 64-bit LCG constants
LCG_MULTIPLIER = 2862933555777941757
LCG_INCREMENT = 1


def u64(x: int) -> int:
    """Force integer into unsigned 64-bit domain.

    Args:
        x: Input integer (can be negative or any size)

    Returns:
        Unsigned 64-bit integer (value modulo 2^64)
    """
    return x & MASK64


def to_int64(x: int) -> int:
    """Reinterpret a uint64 value as the int64 with the same bit pattern."""
    x = u64(x)
    if x < 2**63:
        return x
    return x - 2**64


def from_int64(x: int) -> int:
    """Reinterpret an int64 value as the uint64 with the same bit pattern."""
    return u64(x)


def lcg_next(state: int) -> int:
    """Advance the generator by one step.

    The returned value is both the new state and the next sample.
    Overflow wraps modulo 2^64.

    Args:
        state: Current state (masked to 64 bits)

    Returns:
        Next state (uint64)

    Example:
        >>> lcg_next(0)
        1
        >>> lcg_next(1)
        2862933555777941758
    """
    return u64(u64(state) * LCG_MULTIPLIER + LCG_INCREMENT)


def lcg_next_tensor(state: "torch.Tensor") -> "torch.Tensor":
    """Vectorized generator step over an int64 tensor.

    int64 multiply/add wrap in two's complement, which gives the same bit
    pattern as uint64 arithmetic modulo 2^64.

    Args:
        state: State tensor of any shape (torch.long, read as uint64)

    Returns:
        Next state tensor of same shape
    """
    import torch

    if state.dtype != torch.long:
        raise TypeError(f"state must be torch.long dtype, got {state.dtype}")
    return state * LCG_MULTIPLIER + LCG_INCREMENT


class LCGStream:
    """Reproducible stream of uint64 samples from a seed.

    Each stream owns its state; two streams built from the same seed yield
    the same sequence.
    """

    def __init__(self, seed: int) -> None:
        """Initialize stream.

        Args:
            seed: Initial state (masked to 64 bits)
        """
        if not isinstance(seed, int) or isinstance(seed, bool):
            raise TypeError(f"seed must be int, got {type(seed).__name__}")
        self._state = u64(seed)

    @property
    def state(self) -> int:
        """Current state (the most recently returned sample, or the seed)."""
        return self._state

    def next_u64(self) -> int:
        """Advance the state and return the new sample."""
        self._state = lcg_next(self._state)
        return self._state

    def take(self, n: int) -> List[int]:
        """Return the next n samples.

        Args:
            n: Number of samples (non-negative)

        Returns:
            List of n uint64 samples
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return [self.next_u64() for _ in range(n)]

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next_u64()

    def __repr__(self) -> str:
        return f"LCGStream(state={self._state:#018x})"
