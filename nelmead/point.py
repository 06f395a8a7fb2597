"""Affine point generation used by every simplex transformation."""

from __future__ import annotations

import numpy as np

from .core import Array
from .errors import DimensionMismatchError


def make_point(factor: float, base: Array, other: Array) -> Array:
    """Return ``base + factor * (other - base)`` as a new array.

    Reflection, expansion, contraction and shrink are all this one formula
    with a different ``factor`` and choice of points: reflection uses a
    negative factor from the centroid through the worst vertex, shrink uses
    the best vertex as ``base``.

    Parameters
    ----------
    factor:
        Scale applied to the vector from ``base`` to ``other``.
    base, other:
        Points of equal length. Neither is modified.
    """
    base = np.asarray(base, dtype=float)
    other = np.asarray(other, dtype=float)
    if base.shape != other.shape:
        raise DimensionMismatchError(base.size, other.size, what="other point")
    return base + factor * (other - base)


__all__ = ["make_point"]
