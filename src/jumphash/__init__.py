"""jumphash: Jump Consistent Hash library."""

from .config import JumpConfig, load_config, load_jump_config
from .hashing import (
    MAX_BUCKETS,
    LCGStream,
    bucket_loads,
    chi_square_uniformity,
    gini_of_load,
    jump_hash,
    jump_hash_str,
    jump_hash_tensor,
    lcg_next,
    lcg_next_tensor,
    occupancy_summary,
    remap_summary,
)
from .hashing.jump_hash import JumpHash
from .utils import get_logger, random_keys, seed_everything

__version__ = "0.1.0"

__all__ = [
    # Core
    "jump_hash",
    "jump_hash_str",
    "jump_hash_tensor",
    "MAX_BUCKETS",
    "JumpHash",
    # Stream generator
    "LCGStream",
    "lcg_next",
    "lcg_next_tensor",
    # Diagnostics
    "bucket_loads",
    "chi_square_uniformity",
    "gini_of_load",
    "occupancy_summary",
    "remap_summary",
    # Config
    "JumpConfig",
    "load_config",
    "load_jump_config",
    # Utils
    "get_logger",
    "seed_everything",
    "random_keys",
]
