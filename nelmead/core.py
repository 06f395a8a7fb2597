"""Shared types and the coefficient configuration for the simplex search."""

from __future__ import annotations

import dataclasses
import math
import numbers
from dataclasses import dataclass
from typing import Callable

import numpy as np

from .errors import ConfigurationError

Array = np.ndarray
Objective = Callable[[Array], float]

DEFAULT_ALPHA = 1.0
DEFAULT_GAMMA = 2.0
DEFAULT_RHO = 0.5
DEFAULT_SIGMA = 0.5
DEFAULT_CONV_THRESHOLD = 1e-14
DEFAULT_CONV_LIMIT = 12


@dataclass(frozen=True)
class NelderMeadConfig:
    """
    Coefficients and stopping parameters of the Nelder-Mead search.

    Args:
        alpha: Reflection coefficient.
        gamma: Expansion coefficient.
        rho: Contraction coefficient.
        sigma: Shrink coefficient.
        conv_threshold: Minimal decrease of the best score for an iteration
            to count as an improvement.
        conv_limit: Number of consecutive iterations without improvement
            after which the run is reported as converged.
    """

    alpha: float = DEFAULT_ALPHA
    gamma: float = DEFAULT_GAMMA
    rho: float = DEFAULT_RHO
    sigma: float = DEFAULT_SIGMA
    conv_threshold: float = DEFAULT_CONV_THRESHOLD
    conv_limit: int = DEFAULT_CONV_LIMIT

    def __post_init__(self) -> None:
        """Validate NelderMeadConfig invariants."""
        for name in ("alpha", "gamma", "rho", "sigma"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Real) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be a real number, got {type(value)}")
            if not math.isfinite(value) or value <= 0.0:
                raise ConfigurationError(f"{name} must be finite and positive, got {value}")
        if not isinstance(self.conv_threshold, numbers.Real) or not math.isfinite(self.conv_threshold):
            raise ConfigurationError(
                f"conv_threshold must be a finite real number, got {self.conv_threshold!r}"
            )
        if self.conv_threshold < 0.0:
            raise ConfigurationError(f"conv_threshold must be non-negative, got {self.conv_threshold}")
        if not isinstance(self.conv_limit, numbers.Integral) or isinstance(self.conv_limit, bool):
            raise ConfigurationError(f"conv_limit must be an integer, got {type(self.conv_limit)}")
        if self.conv_limit < 1:
            raise ConfigurationError(f"conv_limit must be at least 1, got {self.conv_limit}")

    def replace(self, **overrides) -> NelderMeadConfig:
        """Return a copy with the given fields overridden (and re-validated)."""
        unknown = set(overrides) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise ConfigurationError(f"Unknown configuration fields: {sorted(unknown)}")
        return dataclasses.replace(self, **overrides)


def as_vector(values, what: str = "vector") -> Array:
    """Copy ``values`` into a fresh 1-D float array."""
    vec = np.array(values, dtype=float, copy=True)
    if vec.ndim != 1:
        raise ConfigurationError(f"{what} must be one-dimensional, got shape {vec.shape}")
    return vec


__all__ = [
    "Array",
    "DEFAULT_ALPHA",
    "DEFAULT_CONV_LIMIT",
    "DEFAULT_CONV_THRESHOLD",
    "DEFAULT_GAMMA",
    "DEFAULT_RHO",
    "DEFAULT_SIGMA",
    "NelderMeadConfig",
    "Objective",
    "as_vector",
]
