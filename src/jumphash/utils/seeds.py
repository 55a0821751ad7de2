"""Seed management for determinism."""

import random
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import torch


def seed_everything(seed: int) -> None:
    """Set all random seeds for deterministic behavior.

    Sets seeds for Python random, NumPy, and PyTorch (CPU and CUDA).
    Jump hashing itself never reads these; they only fix randomly drawn
    keys in tests and diagnostics.

    Args:
        seed: Random seed value (should be non-negative integer)
    """
    import torch

    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)

    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(seed)


def random_keys(n: int, seed: int) -> "torch.Tensor":
    """Draw n uniformly random 64-bit keys as an int64 tensor.

    Uses a private torch.Generator so global RNG state is untouched.

    Args:
        n: Number of keys
        seed: Generator seed

    Returns:
        Tensor of shape [n] (torch.long), bit patterns uniform over uint64
    """
    import torch

    gen = torch.Generator().manual_seed(seed)
    # Signed high half so hi * 2^32 stays inside int64
    hi = torch.randint(-(1 << 31), 1 << 31, (n,), generator=gen, dtype=torch.long)
    lo = torch.randint(0, 1 << 32, (n,), generator=gen, dtype=torch.long)
    return (hi * (1 << 32)) | lo
