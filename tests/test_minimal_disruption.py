"""Tests for minimal remapping when the bucket count grows."""

import math
import random

import pytest
import torch

from jumphash import MAX_BUCKETS, jump_hash, jump_hash_tensor, remap_summary


def test_keys_only_move_to_new_bucket_scalar() -> None:
    """Growing N -> N+1 leaves a key in place or moves it to bucket N."""
    random.seed(42)
    keys = [random.getrandbits(64) for _ in range(300)]
    for key in keys:
        prev = jump_hash(key, 1)
        for n in range(2, 300):
            cur = jump_hash(key, n)
            assert cur == prev or cur == n - 1, (
                f"key={key} moved from {prev} to existing bucket {cur} at n={n}"
            )
            prev = cur


def test_keys_only_move_to_new_bucket_tensor(keys: torch.Tensor) -> None:
    """Same property over a large key sample, N in [1, 1000]."""
    prev = jump_hash_tensor(keys, 1)
    for n in range(2, 1001):
        cur = jump_hash_tensor(keys, n)
        moved = cur != prev
        assert bool((cur[moved] == n - 1).all()), f"keys moved to an existing bucket at n={n}"
        prev = cur


def test_moved_fraction_bounded(keys: torch.Tensor) -> None:
    """Keys moved per step stay near 1/(N+1) of the total."""
    num_keys = keys.numel()
    for n in range(5, 1001):
        summary = remap_summary(keys, n)
        assert summary["moved_to_other"] == 0

        moved = summary["moved"]
        # Close to the per-bucket share, or a small share of all keys
        within_proportion = moved < (num_keys / n) * 1.15
        small_overall = moved / num_keys < 0.02
        assert within_proportion or small_overall, f"n={n}: moved {moved} of {num_keys}"


@pytest.mark.parametrize("num_buckets", [1, 2, 3, 9, 31, 100, 255, 999])
def test_moved_fraction_matches_expectation(keys: torch.Tensor, num_buckets: int) -> None:
    """Moved fraction is within 5 binomial standard deviations of 1/(N+1)."""
    summary = remap_summary(keys, num_buckets)
    p = summary["expected_fraction"]
    m = summary["num_keys"]

    assert p == pytest.approx(1.0 / (num_buckets + 1))
    sigma = math.sqrt(m * p * (1 - p))
    assert abs(summary["moved"] - m * p) < 5 * sigma + 1


def test_remap_summary_fields(keys: torch.Tensor) -> None:
    summary = remap_summary(keys[:100], 10)
    assert summary["num_keys"] == 100
    assert 0 <= summary["moved"] <= 100
    assert summary["moved_fraction"] == summary["moved"] / 100
    assert summary["expected_fraction"] == pytest.approx(1 / 11)


def test_remap_summary_rejects_bad_count(keys: torch.Tensor) -> None:
    with pytest.raises(ValueError):
        remap_summary(keys[:10], 0)


def test_remap_summary_rejects_count_without_room_to_grow() -> None:
    """N = MAX_BUCKETS is rejected up front since N+1 buckets cannot fit."""
    with pytest.raises(ValueError, match="N\\+1 buckets fit"):
        remap_summary(torch.tensor([1, 2], dtype=torch.long), MAX_BUCKETS)


def test_remap_summary_largest_growable_count() -> None:
    summary = remap_summary(torch.tensor([1, 2], dtype=torch.long), MAX_BUCKETS - 1)
    assert summary["num_keys"] == 2
    assert summary["moved_to_other"] == 0
