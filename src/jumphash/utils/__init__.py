"""Utilities module for jumphash."""

from jumphash.utils.logger import get_logger
from jumphash.utils.seeds import random_keys, seed_everything

__all__ = [
    "get_logger",
    "seed_everything",
    "random_keys",
]
