"""Exception types raised by nelmead."""

from __future__ import annotations

import numpy as np


class ConfigurationError(ValueError):
    """Invalid optimizer setup, detected before any objective evaluation."""


class DimensionMismatchError(ConfigurationError):
    """A vector does not have the length the optimizer was configured for."""

    def __init__(self, expected: int, got: int, what: str = "vector") -> None:
        super().__init__(f"{what} has length {got}, expected {expected}")
        self.expected = expected
        self.got = got


class NonFiniteScoreError(ArithmeticError):
    """The objective returned NaN or an infinity.

    Attributes:
        position: Copy of the point at which the objective was evaluated.
        score: The offending value.
    """

    def __init__(self, position: np.ndarray, score: float) -> None:
        super().__init__(f"objective returned non-finite score {score!r} at {position.tolist()}")
        self.position = position
        self.score = score


__all__ = ["ConfigurationError", "DimensionMismatchError", "NonFiniteScoreError"]
