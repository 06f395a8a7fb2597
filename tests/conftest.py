"""Pytest configuration and shared fixtures for nelmead tests."""

import os

import numpy as np
import pytest


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def recording_objective():
    """Sum-of-squares objective that records every point it is called with."""
    calls = []

    def fun(x: np.ndarray) -> float:
        calls.append(np.array(x, copy=True))
        return float(np.sum(np.asarray(x) ** 2))

    fun.calls = calls
    return fun
