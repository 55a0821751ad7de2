"""Pytest configuration and fixtures."""

import pytest

from jumphash import random_keys, seed_everything


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment with fixed seed."""
    seed_everything(42)
    yield


@pytest.fixture(scope="session")
def keys():
    """20k uniformly random 64-bit keys (int64 bit patterns)."""
    return random_keys(20_000, seed=42)
