"""Nelder-Mead simplex minimizer.

Example
-------
>>> from nelmead import NelderMeadOptimizer
>>> def rosen(x):
...     return (1 - x[0])**2 + 100 * (x[1] - x[0]**2)**2
>>> nmo = NelderMeadOptimizer(rosen, 2)
>>> x, fun, converged = nmo.optimize(1000, [-1.0, 1.0], 0.5)
>>> converged
True
"""

from __future__ import annotations

import math
import numbers
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

import numpy as np

from .convergence import ConvergenceTracker
from .core import Array, NelderMeadConfig, Objective, as_vector
from .errors import ConfigurationError, DimensionMismatchError
from .logging import get_logger
from .point import make_point
from .simplex import Simplex, evaluate

logger = get_logger(__name__)


class Move(Enum):
    """Transformation applied to the simplex in one iteration."""

    REFLECT = "reflect"
    EXPAND = "expand"
    CONTRACT = "contract"
    SHRINK = "shrink"


def choose_move(rscore: float, best: float, second_worst: float) -> Move:
    """Decide what to try after evaluating the reflected point.

    ============================== ========
    condition                      move
    ============================== ========
    best <= rscore < second_worst  REFLECT
    rscore < best                  EXPAND
    otherwise                      CONTRACT
    ============================== ========

    A failed contraction turns into :attr:`Move.SHRINK`; that needs the
    contracted score and is decided by the caller.
    """
    if best <= rscore < second_worst:
        return Move.REFLECT
    if rscore < best:
        return Move.EXPAND
    return Move.CONTRACT


@dataclass
class NelderMeadResult:
    """Outcome of a Nelder-Mead run."""

    x: Array
    fun: float
    converged: bool
    nit: int
    nfev: int
    message: str
    moves: Counter = field(default_factory=Counter)
    history: List[Array] = field(default_factory=list)

    def as_tuple(self) -> Tuple[Array, float, bool]:
        return self.x, self.fun, self.converged


Callback = Callable[[Array, float, Move], None]


class NelderMeadOptimizer:
    """
    Minimizes ``objective`` over ``dim`` real variables.

    The coefficients come from ``config`` (defaults when omitted) with any
    keyword ``overrides`` applied on top, e.g.
    ``NelderMeadOptimizer(f, 3, conv_limit=20)``.

    An instance keeps its stall bookkeeping between iterations of a run and
    resets it when a new run starts, so sequential reuse is safe. It is not
    safe to call :meth:`optimize` concurrently on one instance.
    """

    def __init__(
        self,
        objective: Objective,
        dim: int,
        config: Optional[NelderMeadConfig] = None,
        **overrides,
    ) -> None:
        if not callable(objective):
            raise ConfigurationError("objective must be callable")
        if not isinstance(dim, numbers.Integral) or isinstance(dim, bool) or dim < 1:
            raise ConfigurationError(f"dim must be a positive integer, got {dim!r}")
        self.objective = objective
        self.dim = int(dim)
        self.config = (config or NelderMeadConfig()).replace(**overrides)
        self.tracker = ConvergenceTracker(self.config.conv_threshold, self.config.conv_limit)
        self.last_result: Optional[NelderMeadResult] = None
        self._nfev = 0

    def configure(self, **overrides) -> NelderMeadConfig:
        """Override individual coefficients before the next run."""
        self.config = self.config.replace(**overrides)
        return self.config

    def _f(self, x: Array) -> float:
        self._nfev += 1
        return evaluate(self.objective, x)

    def _validate(self, max_iter: int, start, step: float) -> Array:
        if not isinstance(max_iter, numbers.Integral) or isinstance(max_iter, bool):
            raise ConfigurationError(f"max_iter must be an integer, got {type(max_iter)}")
        if max_iter < 0:
            raise ConfigurationError(f"max_iter must be non-negative, got {max_iter}")
        if not isinstance(step, numbers.Real) or isinstance(step, bool):
            raise ConfigurationError(f"step must be a real number, got {type(step)}")
        if not math.isfinite(step) or step == 0:
            raise ConfigurationError(f"step must be finite and non-zero, got {step}")
        x0 = as_vector(start, what="start")
        if x0.size != self.dim:
            raise DimensionMismatchError(self.dim, x0.size, what="start")
        if not np.all(np.isfinite(x0)):
            raise ConfigurationError("start must contain only finite values")
        return x0

    def _shrink(self, spx: Simplex) -> None:
        """Pull every vertex but the best towards it by the factor ``sigma``.

        Each vertex is scored at its new position.
        """
        sigma = self.config.sigma
        for i in range(1, len(spx)):
            x = make_point(sigma, spx.best.x, spx[i].x)
            spx.set(i, x, self._f(x))

    def _step(self, spx: Simplex) -> Move:
        cfg = self.config
        d = self.dim
        xctr = spx.centroid()
        worst = spx.worst

        xr = make_point(-cfg.alpha, xctr, worst.x)
        rscore = self._f(xr)

        move = choose_move(rscore, spx.best.score, spx.second_worst.score)
        if move is Move.REFLECT:
            spx.set(d, xr, rscore)
        elif move is Move.EXPAND:
            xe = make_point(cfg.gamma, xctr, xr)
            escore = self._f(xe)
            if escore < rscore:
                spx.set(d, xe, escore)
            else:
                spx.set(d, xr, rscore)
                move = Move.REFLECT
        else:
            xc = make_point(cfg.rho, xctr, worst.x)
            cscore = self._f(xc)
            if cscore < worst.score:
                spx.set(d, xc, cscore)
            else:
                self._shrink(spx)
                move = Move.SHRINK
        return move

    def run(
        self,
        max_iter: int,
        start,
        step: float,
        callback: Optional[Callback] = None,
        history: bool = False,
    ) -> NelderMeadResult:
        """Run the search and return a :class:`NelderMeadResult`."""
        x0 = self._validate(max_iter, start, step)
        cfg = self.config
        self.tracker = ConvergenceTracker(cfg.conv_threshold, cfg.conv_limit)
        self._nfev = 0

        spx = Simplex.from_start(x0, step)
        spx.evaluate(self._f)
        # Seeded before the first sort, from the start point's score.
        self.tracker.reset(spx[0].score)

        moves: Counter = Counter()
        hist: List[Array] = []
        nit = 0
        converged = False
        while nit < max_iter:
            spx.sort()
            if history:
                hist.append(spx.best.x.copy())
            if self.tracker.check(spx.best.score):
                converged = True
                break
            move = self._step(spx)
            moves[move] += 1
            nit += 1
            logger.debug("iter %d: %s, best=%.6e", nit, move.value, spx.best.score)
            if callback is not None:
                current = spx[int(np.argmin(spx.scores()))]
                callback(current.x.copy(), current.score, move)

        if converged:
            message = f"No improvement above {cfg.conv_threshold:g} for {cfg.conv_limit} iterations."
            logger.info("converged after %d iterations, best=%.6e", nit, spx[0].score)
        else:
            message = "Maximum iterations reached."
            logger.info("iteration budget of %d exhausted, best=%.6e", max_iter, spx[0].score)

        result = NelderMeadResult(
            x=spx[0].x.copy(),
            fun=float(spx[0].score),
            converged=converged,
            nit=nit,
            nfev=self._nfev,
            message=message,
            moves=moves,
            history=hist,
        )
        self.last_result = result
        return result

    def optimize(self, max_iter: int, start, step: float) -> Tuple[Array, float, bool]:
        """Minimize from ``start`` with an initial simplex of edge ``step``.

        Returns
        -------
        tuple
            ``(best_position, best_score, converged)``. With ``max_iter == 0``
            this is ``start`` and its score, unconverged.

        Raises
        ------
        ConfigurationError
            On invalid arguments, before the objective is called.
        NonFiniteScoreError
            If the objective returns NaN or an infinity.
        """
        return self.run(max_iter, start, step).as_tuple()


def nelder_mead(
    fun: Objective,
    x0,
    step: float,
    maxiter: int = 1000,
    config: Optional[NelderMeadConfig] = None,
    callback: Optional[Callback] = None,
    history: bool = False,
) -> NelderMeadResult:
    """Functional front end to :class:`NelderMeadOptimizer`.

    The dimension is taken from ``x0``.
    """
    x0 = as_vector(x0, what="x0")
    optimizer = NelderMeadOptimizer(fun, x0.size, config=config)
    return optimizer.run(maxiter, x0, step, callback=callback, history=history)


__all__ = [
    "Callback",
    "Move",
    "NelderMeadOptimizer",
    "NelderMeadResult",
    "choose_move",
    "nelder_mead",
]
