"""Configured jump hash object."""

from typing import Any, Dict, Iterable, List, Union

import torch

from jumphash.config import JumpConfig
from jumphash.hashing.diagnostics import chi_square_uniformity, occupancy_summary
from jumphash.hashing.jump import jump_hash, jump_hash_str, jump_hash_tensor
from jumphash.utils.logger import get_logger

logger = get_logger(__name__)

Key = Union[int, str, bytes]


class JumpHash:
    """
    Jump consistent hash bound to a bucket count.

    Integer keys go straight to jump_hash; str/bytes keys are first
    digested with xxHash64 using the configured key seed. Instances hold
    only immutable configuration, so one object can be shared freely.
    """

    def __init__(self, cfg: JumpConfig) -> None:
        """
        Initialize jump hash.

        Args:
            cfg: Jump hash configuration
        """
        self.cfg = cfg
        logger.debug(
            "JumpHash created: num_buckets=%d key_seed=%d",
            cfg.num_buckets, cfg.key_seed,
        )

    @classmethod
    def from_buckets(cls, num_buckets: int, key_seed: int = 0) -> "JumpHash":
        """Build directly from a bucket count."""
        return cls(JumpConfig(num_buckets=num_buckets, key_seed=key_seed))

    @property
    def num_buckets(self) -> int:
        return self.cfg.num_buckets

    def bucket(self, key: Key) -> int:
        """
        Compute the bucket for one key.

        Args:
            key: int (masked to uint64), str or bytes

        Returns:
            Bucket index in [0, num_buckets)
        """
        if isinstance(key, (str, bytes, bytearray)):
            return jump_hash_str(key, self.cfg.num_buckets, seed=self.cfg.key_seed)
        return jump_hash(key, self.cfg.num_buckets)

    def buckets(self, keys: Iterable[Key]) -> List[int]:
        """Compute buckets for a sequence of keys."""
        return [self.bucket(key) for key in keys]

    def indices(self, keys: torch.Tensor) -> torch.Tensor:
        """
        Compute buckets for a tensor of integer keys.

        Args:
            keys: Key tensor of any shape (torch.long, read as uint64)

        Returns:
            Bucket tensor of same shape (torch.long)
        """
        return jump_hash_tensor(keys, self.cfg.num_buckets)

    def resized(self, num_buckets: int) -> "JumpHash":
        """Return a JumpHash over a different bucket count, same key seed."""
        return JumpHash(JumpConfig(num_buckets=num_buckets, key_seed=self.cfg.key_seed))

    def diagnostics(self, keys: torch.Tensor) -> Dict[str, Any]:
        """
        Compute occupancy and uniformity diagnostics for keys.

        Args:
            keys: Key tensor (torch.long)

        Returns:
            Dictionary with:
            - occupancy_summary: compact load statistics
            - chi_square: uniformity statistics
        """
        indices = self.indices(keys)
        result = {
            "occupancy_summary": occupancy_summary(indices, self.cfg.num_buckets),
            "chi_square": chi_square_uniformity(indices, self.cfg.num_buckets),
        }
        logger.debug(
            "Diagnostics over %d keys: chi2=%.2f z=%.2f",
            keys.numel(), result["chi_square"]["statistic"],
            result["chi_square"]["z_score"],
        )
        return result

    def __repr__(self) -> str:
        return f"JumpHash(num_buckets={self.cfg.num_buckets}, key_seed={self.cfg.key_seed})"
