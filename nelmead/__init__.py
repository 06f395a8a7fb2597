"""nelmead - a small Nelder-Mead simplex minimizer built on NumPy.

Example
-------
>>> import numpy as np
>>> from nelmead import nelder_mead
>>> res = nelder_mead(lambda x: float(np.sum((x - 2.0) ** 2)), [0.0, 0.0], 0.5)
>>> res.converged
True
"""

__version__ = "0.1.0"

from .convergence import ConvergenceTracker
from .core import NelderMeadConfig
from .errors import ConfigurationError, DimensionMismatchError, NonFiniteScoreError
from .logging import configure_logging, get_logger, set_log_level
from .optimizer import Move, NelderMeadOptimizer, NelderMeadResult, choose_move, nelder_mead
from .point import make_point
from .simplex import Simplex, Vertex

__all__ = [
    "ConfigurationError",
    "ConvergenceTracker",
    "DimensionMismatchError",
    "Move",
    "NelderMeadConfig",
    "NelderMeadOptimizer",
    "NelderMeadResult",
    "NonFiniteScoreError",
    "Simplex",
    "Vertex",
    "choose_move",
    "configure_logging",
    "get_logger",
    "make_point",
    "nelder_mead",
    "set_log_level",
]
