"""Hashing modules for jumphash."""

from .lcg import (
    LCG_INCREMENT,
    LCG_MULTIPLIER,
    MASK64,
    LCGStream,
    from_int64,
    lcg_next,
    lcg_next_tensor,
    to_int64,
    u64,
)
from .jump import (
    MAX_BUCKETS,
    jump_hash,
    jump_hash_str,
    jump_hash_tensor,
    validate_key_seed,
    validate_num_buckets,
)
from .diagnostics import (
    bucket_loads,
    chi_square_uniformity,
    gini_of_load,
    occupancy_summary,
    remap_summary,
)

# JumpHash is exported from the package root (it imports jumphash.config)

__all__ = [
    # Stream generator
    "LCGStream",
    "lcg_next",
    "lcg_next_tensor",
    "LCG_MULTIPLIER",
    "LCG_INCREMENT",
    "MASK64",
    "u64",
    "to_int64",
    "from_int64",
    # Jump hash
    "jump_hash",
    "jump_hash_str",
    "jump_hash_tensor",
    "validate_num_buckets",
    "validate_key_seed",
    "MAX_BUCKETS",
    # Diagnostics
    "bucket_loads",
    "chi_square_uniformity",
    "gini_of_load",
    "occupancy_summary",
    "remap_summary",
]
