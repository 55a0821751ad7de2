"""Jump consistent hash.

Implements the algorithm from "A Fast, Minimal Memory, Consistent Hash
Algorithm" (Lamping & Veach, 2014, arXiv:1406.2294). A key is mapped to a
bucket in [0, num_buckets) by jumping forward through bucket indices driven
by a 64-bit LCG stream seeded with the key. Growing the bucket count from
N to N+1 moves only the keys that land in bucket N.

Invalid bucket counts are rejected (strict mode) before any computation.
"""

from typing import TYPE_CHECKING, Union

import xxhash

from jumphash.hashing.lcg import MASK64, lcg_next, lcg_next_tensor, u64

if TYPE_CHECKING:
    import torch

# Largest accepted bucket count (unsigned 32-bit range)
MAX_BUCKETS = (1 << 32) - 1

# 2^31 as a double, numerator of the jump step
JUMP_SCALE = float(1 << 31)

# Upper clamp for the tensor jump step, well above MAX_BUCKETS
JUMP_CLAMP = float(1 << 62)

# Keeps the 31 high bits of a sample after an arithmetic shift by 33
MASK31 = (1 << 31) - 1


def validate_num_buckets(num_buckets: int) -> None:
    """Check a bucket count.

    Args:
        num_buckets: Requested number of buckets

    Raises:
        TypeError: If num_buckets is not an int (bool is rejected)
        ValueError: If num_buckets is outside [1, MAX_BUCKETS]
    """
    if not isinstance(num_buckets, int) or isinstance(num_buckets, bool):
        raise TypeError(
            f"num_buckets must be int, got {type(num_buckets).__name__}"
        )
    if num_buckets < 1:
        raise ValueError(f"num_buckets must be >= 1, got {num_buckets}")
    if num_buckets > MAX_BUCKETS:
        raise ValueError(
            f"num_buckets must be <= {MAX_BUCKETS}, got {num_buckets}"
        )


def validate_key_seed(seed: int) -> None:
    """Check an xxHash seed for str/bytes keys.

    Raises:
        TypeError: If seed is not an int (bool is rejected)
        ValueError: If seed is outside [0, 2^64)
    """
    if not isinstance(seed, int) or isinstance(seed, bool):
        raise TypeError(f"seed must be int, got {type(seed).__name__}")
    if not (0 <= seed <= MASK64):
        raise ValueError(f"seed must be uint64, got {seed}")


def jump_hash(key: int, num_buckets: int) -> int:
    """Map a 64-bit key to a bucket.

    Args:
        key: Key (any int, masked to uint64)
        num_buckets: Number of buckets, >= 1

    Returns:
        Bucket index in [0, num_buckets)

    Raises:
        TypeError: If key or num_buckets is not an int
        ValueError: If num_buckets is out of range

    Example:
        >>> jump_hash(256, 1024)
        520
        >>> jump_hash(0xDEADBEEF, 1)
        0
    """
    if not isinstance(key, int) or isinstance(key, bool):
        raise TypeError(f"key must be int, got {type(key).__name__}")
    validate_num_buckets(num_buckets)

    state = u64(key)
    b, j = -1, 0
    while j < num_buckets:
        b = j
        state = lcg_next(state)
        # (b + 1) * (2^31 / (r + 1)) in IEEE double, truncated toward zero
        j = int(float(b + 1) * (JUMP_SCALE / float((state >> 33) + 1)))
    return b


def jump_hash_str(
    key: Union[str, bytes], num_buckets: int, seed: int = 0
) -> int:
    """Map a string or bytes key to a bucket.

    The key is digested with 64-bit xxHash and the digest is passed to
    jump_hash. Strings are UTF-8 encoded, so a str and its encoded bytes
    land in the same bucket.

    Args:
        key: Key as str or bytes
        num_buckets: Number of buckets, >= 1
        seed: xxHash seed in [0, 2^64) (default: 0)

    Returns:
        Bucket index in [0, num_buckets)
    """
    if isinstance(key, str):
        key_bytes = key.encode("utf-8")
    elif isinstance(key, (bytes, bytearray)):
        key_bytes = bytes(key)
    else:
        raise TypeError(f"key must be str or bytes, got {type(key).__name__}")
    validate_num_buckets(num_buckets)
    validate_key_seed(seed)

    return jump_hash(xxhash.xxh64_intdigest(key_bytes, seed=seed), num_buckets)


def jump_hash_tensor(keys: "torch.Tensor", num_buckets: int) -> "torch.Tensor":
    """Vectorized jump hash over a tensor of keys.

    Keys are int64 tensors whose bit patterns are read as uint64. Each
    element matches jump_hash() on its uint64 value. Lanes that have
    already settled are frozen while the rest keep jumping, so the loop
    runs as many times as the slowest key needs.

    Args:
        keys: Key tensor of any shape (torch.long)
        num_buckets: Number of buckets, >= 1

    Returns:
        Bucket tensor of same shape and device (torch.long),
        values in [0, num_buckets)
    """
    import torch

    if not isinstance(keys, torch.Tensor):
        raise TypeError(f"keys must be torch.LongTensor, got {type(keys)}")
    if keys.dtype != torch.long:
        raise TypeError(f"keys must be torch.long dtype, got {keys.dtype}")
    validate_num_buckets(num_buckets)

    state = keys.clone()
    b = torch.full_like(keys, -1)
    j = torch.zeros_like(keys)
    active = j < num_buckets

    while bool(active.any()):
        b = torch.where(active, j, b)
        state = torch.where(active, lcg_next_tensor(state), state)

        # Logical shift: arithmetic >> sign-extends, mask to the low 31 bits
        r = (state >> 33) & MASK31
        step = JUMP_SCALE / (r + 1).to(torch.float64)
        # Any value >= MAX_BUCKETS ends the lane; clamp keeps the cast inside int64
        j_float = ((b + 1).to(torch.float64) * step).clamp(max=JUMP_CLAMP)
        j_next = j_float.to(torch.long)

        j = torch.where(active, j_next, j)
        active = j < num_buckets

    return b
