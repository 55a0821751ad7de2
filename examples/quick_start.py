"""Quick start guide for jumphash.

Demonstrates:
1. Hashing integer and string keys
2. Growing the bucket count with minimal remapping
3. Batch hashing with tensors and load diagnostics
4. Loading a JumpHash from YAML config
"""

from pathlib import Path

from jumphash import (
    JumpHash,
    jump_hash,
    jump_hash_str,
    load_jump_config,
    random_keys,
    remap_summary,
)


def example_1_basic_usage():
    """Example 1: Map keys to buckets."""
    print("=" * 60)
    print("Example 1: Basic Usage")
    print("=" * 60)

    num_buckets = 10
    for key in [0, 1, 256, 0xDEADBEEF]:
        print(f"  jump_hash({key:#x}, {num_buckets}) = {jump_hash(key, num_buckets)}")
    for key in ["user:1", "user:2", "session:abc"]:
        print(f"  jump_hash_str({key!r}, {num_buckets}) = {jump_hash_str(key, num_buckets)}")
    print()


def example_2_growing():
    """Example 2: Adding a bucket only moves keys into the new bucket."""
    print("=" * 60)
    print("Example 2: Growing From N to N+1 Buckets")
    print("=" * 60)

    keys = random_keys(100_000, seed=42)
    for n in [1, 4, 9, 99]:
        summary = remap_summary(keys, n)
        print(
            f"  {n:>3} -> {n + 1:<3} moved {summary['moved_fraction']:.4f} "
            f"(expected {summary['expected_fraction']:.4f}), "
            f"moved to existing buckets: {summary['moved_to_other']}"
        )
    print()


def example_3_diagnostics():
    """Example 3: Batch hashing and load diagnostics."""
    print("=" * 60)
    print("Example 3: Batch Hashing and Diagnostics")
    print("=" * 60)

    hasher = JumpHash.from_buckets(100)
    keys = random_keys(100_000, seed=7)
    diag = hasher.diagnostics(keys)

    occupancy = diag["occupancy_summary"]
    chi = diag["chi_square"]
    print(f"  keys={occupancy['total_keys']:,} buckets used={occupancy['buckets_used']}")
    print(f"  load min/mean/max = {occupancy['min_load']}/{occupancy['mean_load']:.1f}/{occupancy['max_load']}")
    print(f"  chi2={chi['statistic']:.1f} (dof={chi['dof']}, z={chi['z_score']:.2f})")
    print()


def example_4_config():
    """Example 4: Build a JumpHash from YAML."""
    print("=" * 60)
    print("Example 4: YAML Config")
    print("=" * 60)

    cfg = load_jump_config(Path(__file__).parent / "config.yaml")
    hasher = JumpHash(cfg)
    print(f"  {hasher}")
    print(f"  bucket('orders/2024') = {hasher.bucket('orders/2024')}")
    print()


if __name__ == "__main__":
    example_1_basic_usage()
    example_2_growing()
    example_3_diagnostics()
    example_4_config()
