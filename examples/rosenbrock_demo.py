"""
Example: minimizing classic test functions with nelmead

Runs the Nelder-Mead simplex search on the Rosenbrock and Himmelblau
functions and prints where it ended up and which moves it used.
"""

import numpy as np

from nelmead import NelderMeadOptimizer, nelder_mead


def rosenbrock(x):
    return (1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2


def himmelblau(x):
    return (x[0] ** 2 + x[1] - 11) ** 2 + (x[0] + x[1] ** 2 - 7) ** 2


def example_rosenbrock():
    """Tuple interface on the banana-shaped valley."""
    print("=" * 60)
    print("Example 1: Rosenbrock from (-1, 1)")
    print("=" * 60)

    nmo = NelderMeadOptimizer(rosenbrock, 2)
    x, fun, converged = nmo.optimize(1000, np.array([-1.0, 1.0]), 0.5)
    print(f"Converged: {converged}")
    print(f"Best point: {x}")
    print(f"Best score: {fun:.3e}")
    print(f"Iterations: {nmo.last_result.nit}, evaluations: {nmo.last_result.nfev}")
    print()


def example_himmelblau():
    """Functional interface with a callback counting moves."""
    print("=" * 60)
    print("Example 2: Himmelblau from (0, 0)")
    print("=" * 60)

    res = nelder_mead(himmelblau, [0.0, 0.0], step=1.0, maxiter=500, history=True)
    print(f"Converged: {res.converged} ({res.message})")
    print(f"Best point: {res.x}")
    print(f"Best score: {res.fun:.3e}")
    for move, count in sorted(res.moves.items(), key=lambda item: item[0].value):
        print(f"  {move.value:>8}: {count}")
    print()


if __name__ == "__main__":
    example_rosenbrock()
    example_himmelblau()
    print("Done.")
