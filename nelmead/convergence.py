"""Stall-based convergence bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass

from .core import DEFAULT_CONV_LIMIT, DEFAULT_CONV_THRESHOLD


@dataclass
class ConvergenceTracker:
    """
    Counts consecutive checks in which the best score failed to improve.

    An iteration improves when ``best < previous_best - threshold``; it then
    becomes the new reference. Otherwise the stall counter grows, and the
    search is considered converged once it reaches ``limit``.
    """

    threshold: float = DEFAULT_CONV_THRESHOLD
    limit: int = DEFAULT_CONV_LIMIT
    count: int = 0
    previous_best: float = float("inf")

    def reset(self, previous_best: float) -> None:
        self.count = 0
        self.previous_best = previous_best

    def check(self, best: float) -> bool:
        """Record ``best`` and return True when the stall limit is reached."""
        if best < self.previous_best - self.threshold:
            self.count = 0
            self.previous_best = best
        else:
            self.count += 1
        return self.count >= self.limit


__all__ = ["ConvergenceTracker"]
