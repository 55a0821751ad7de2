"""Diagnostic functions for bucket assignment analysis."""

import math
from typing import Any, Dict, Union

import numpy as np
import torch

from jumphash.hashing.jump import MAX_BUCKETS, jump_hash_tensor, validate_num_buckets
from jumphash.utils.logger import get_logger

logger = get_logger(__name__)

ArrayLike = Union[torch.Tensor, np.ndarray]


def _to_numpy(indices: ArrayLike) -> np.ndarray:
    if isinstance(indices, torch.Tensor):
        return indices.detach().cpu().numpy().ravel()
    return np.asarray(indices).ravel()


def bucket_loads(indices: ArrayLike, num_buckets: int) -> np.ndarray:
    """
    Compute bucket loads (keys per bucket).

    Args:
        indices: Bucket indices, any shape (flattened)
        num_buckets: Number of buckets

    Returns:
        Array of counts per bucket, shape [num_buckets]
    """
    validate_num_buckets(num_buckets)
    indices_np = _to_numpy(indices).astype(np.int64)
    if indices_np.size and (indices_np.min() < 0 or indices_np.max() >= num_buckets):
        raise ValueError(f"indices must lie in [0, {num_buckets})")
    return np.bincount(indices_np, minlength=num_buckets)


def chi_square_uniformity(indices: ArrayLike, num_buckets: int) -> Dict[str, float]:
    """
    Pearson chi-square statistic against a uniform bucket distribution.

    z_score uses the normal approximation (stat - dof) / sqrt(2 * dof);
    values within a few units of zero are consistent with uniformity.

    Args:
        indices: Bucket indices, any shape (flattened)
        num_buckets: Number of buckets

    Returns:
        Dictionary with statistic, dof, expected (per bucket), z_score
    """
    loads = bucket_loads(indices, num_buckets)
    total = int(loads.sum())
    if total == 0:
        raise ValueError("chi-square needs at least one index")

    expected = total / num_buckets
    statistic = float(np.sum((loads - expected) ** 2) / expected)
    dof = num_buckets - 1
    z_score = (statistic - dof) / math.sqrt(2 * dof) if dof > 0 else 0.0

    return {
        "statistic": statistic,
        "dof": dof,
        "expected": float(expected),
        "z_score": float(z_score),
    }


def gini_of_load(loads: np.ndarray) -> float:
    """
    Compute Gini coefficient from load array.

    Empty buckets count, so an assignment that leaves buckets unused is
    penalised.

    Args:
        loads: Array of load values

    Returns:
        Gini coefficient (0 = perfectly even, towards 1 = concentrated)
    """
    loads = np.asarray(loads, dtype=np.float64)
    if loads.size == 0 or loads.sum() == 0:
        return 0.0

    sorted_loads = np.sort(loads)
    n = len(sorted_loads)
    cumsum = np.cumsum(sorted_loads)
    gini = (2 * np.sum((np.arange(1, n + 1)) * sorted_loads)) / (n * cumsum[-1]) - (
        n + 1
    ) / n

    return float(gini)


def occupancy_summary(
    indices: ArrayLike, num_buckets: int, topk: int = 10
) -> Dict[str, Any]:
    """
    Compute compact occupancy summary.

    Args:
        indices: Bucket indices, any shape (flattened)
        num_buckets: Number of buckets
        topk: Number of most-loaded buckets to return

    Returns:
        Dictionary with:
        - total_keys: int
        - buckets_used: int
        - mean_load: float
        - std_load: float
        - min_load: int
        - max_load: int
        - top_buckets: List[Tuple[int, int]] of (bucket, load) pairs
        - gini: float
    """
    loads = bucket_loads(indices, num_buckets)
    total_keys = int(loads.sum())

    if total_keys == 0:
        return {
            "total_keys": 0,
            "buckets_used": 0,
            "mean_load": 0.0,
            "std_load": 0.0,
            "min_load": 0,
            "max_load": 0,
            "top_buckets": [],
            "gini": 0.0,
        }

    top = np.argsort(loads, kind="stable")[::-1][:topk]
    top_buckets = [(int(b), int(loads[b])) for b in top if loads[b] > 0]

    return {
        "total_keys": total_keys,
        "buckets_used": int(np.count_nonzero(loads)),
        "mean_load": float(loads.mean()),
        "std_load": float(loads.std()),
        "min_load": int(loads.min()),
        "max_load": int(loads.max()),
        "top_buckets": top_buckets,
        "gini": gini_of_load(loads),
    }


def remap_summary(keys: torch.Tensor, num_buckets: int) -> Dict[str, Any]:
    """
    Measure how assignments change when growing from N to N+1 buckets.

    A key may only stay put or move to the new bucket N; moved_to_other
    counts violations and is 0 for a correct jump hash.

    Args:
        keys: Key tensor (torch.long, read as uint64)
        num_buckets: Bucket count N before growth

    Returns:
        Dictionary with:
        - num_keys: int
        - moved: int
        - moved_fraction: float
        - expected_fraction: float, 1 / (N + 1)
        - moved_to_other: int
    """
    validate_num_buckets(num_buckets)
    if num_buckets >= MAX_BUCKETS:
        raise ValueError(
            f"num_buckets must be < {MAX_BUCKETS} so that N+1 buckets fit, got {num_buckets}"
        )
    before = jump_hash_tensor(keys, num_buckets)
    after = jump_hash_tensor(keys, num_buckets + 1)

    changed = before != after
    moved = int(changed.sum())
    moved_to_other = int((changed & (after != num_buckets)).sum())
    num_keys = keys.numel()

    if moved_to_other:
        logger.warning(
            "%d of %d keys moved to an existing bucket going from %d to %d buckets",
            moved_to_other, num_keys, num_buckets, num_buckets + 1,
        )

    return {
        "num_keys": num_keys,
        "moved": moved,
        "moved_fraction": moved / num_keys if num_keys else 0.0,
        "expected_fraction": 1.0 / (num_buckets + 1),
        "moved_to_other": moved_to_other,
    }
