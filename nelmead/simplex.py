"""Simplex of scored vertices.

A simplex in ``d`` dimensions holds exactly ``d + 1`` vertices for its whole
lifetime. After :meth:`Simplex.sort` vertex ``0`` is the best (lowest score)
and vertex ``d`` the worst.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Optional

import numpy as np

from .core import Array, Objective, as_vector
from .errors import ConfigurationError, DimensionMismatchError, NonFiniteScoreError


@dataclass
class Vertex:
    """A position together with its objective score (``None`` until evaluated)."""

    x: Array
    score: Optional[float] = None

    @property
    def evaluated(self) -> bool:
        return self.score is not None


def evaluate(objective: Objective, x: Array) -> float:
    """Call ``objective`` at ``x`` and return the score as a finite float."""
    score = float(objective(x))
    if not math.isfinite(score):
        raise NonFiniteScoreError(np.array(x, copy=True), score)
    return score


class Simplex:
    """Ordered collection of ``d + 1`` vertices."""

    def __init__(self, vertices: List[Vertex]) -> None:
        if len(vertices) < 2:
            raise ConfigurationError("a simplex needs at least two vertices")
        dim = len(vertices) - 1
        for vertex in vertices:
            if vertex.x.shape != (dim,):
                raise DimensionMismatchError(dim, vertex.x.size, what="vertex")
        self._vertices = list(vertices)

    @classmethod
    def from_start(cls, start, step: float) -> Simplex:
        """Build the axis-aligned simplex around ``start``.

        Vertex 0 is a copy of ``start``; vertex ``i`` is ``start`` moved by
        ``step`` along coordinate ``i - 1``. Negative steps build the simplex
        in the opposite direction. Scores are left unevaluated.
        """
        x0 = as_vector(start, what="start")
        if x0.size == 0:
            raise ConfigurationError("start must contain at least one coordinate")
        vertices = [Vertex(x0)]
        for i in range(x0.size):
            x = x0.copy()
            x[i] += step
            vertices.append(Vertex(x))
        return cls(vertices)

    @property
    def dim(self) -> int:
        return len(self._vertices) - 1

    def __len__(self) -> int:
        return len(self._vertices)

    def __getitem__(self, i: int) -> Vertex:
        return self._vertices[i]

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    @property
    def best(self) -> Vertex:
        return self._vertices[0]

    @property
    def worst(self) -> Vertex:
        return self._vertices[-1]

    @property
    def second_worst(self) -> Vertex:
        return self._vertices[-2]

    def scores(self) -> Array:
        return np.array([np.nan if v.score is None else v.score for v in self._vertices])

    def positions(self) -> Array:
        return np.stack([v.x for v in self._vertices])

    def evaluate(self, objective: Objective) -> None:
        """Score every vertex with ``objective``, in index order."""
        for vertex in self._vertices:
            vertex.score = evaluate(objective, vertex.x)

    def centroid(self) -> Array:
        """Mean position of all vertices except the last (the worst once sorted)."""
        return np.mean(np.stack([v.x for v in self._vertices[:-1]]), axis=0)

    def sort(self) -> None:
        """Order vertices by ascending score."""
        if not all(v.evaluated for v in self._vertices):
            raise ValueError("cannot sort a simplex with unevaluated vertices")
        self._vertices.sort(key=lambda v: v.score)

    def set(self, i: int, x: Array, score: float) -> None:
        """Replace vertex ``i`` with a new position and its score.

        Raises
        ------
        IndexError
            If ``i`` is not in ``[0, d]``; negative indices are not accepted.
        """
        if not 0 <= i < len(self._vertices):
            raise IndexError(f"vertex index {i} out of range for simplex of {len(self._vertices)} vertices")
        x = np.asarray(x, dtype=float)
        if x.shape != (self.dim,):
            raise DimensionMismatchError(self.dim, x.size, what="vertex")
        self._vertices[i] = Vertex(x, float(score))

    def __repr__(self) -> str:
        return f"Simplex(dim={self.dim}, scores={self.scores().tolist()})"


__all__ = ["Simplex", "Vertex", "evaluate"]
