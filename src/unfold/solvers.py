"""
Numeric algorithms written as unfold consumers.

Each solver builds a bounded unfold and lets the caller-side adapters
decide when to stop.
"""

import logging
from operator import itemgetter
from typing import Callable, List, Optional

from .adapters import first_where, project, take_while_last
from .core import unfold_count
from .errors import InvalidArgument
from .protocols import Predicate, T, Transform

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 100
DEFAULT_TOLERANCE = 1e-8

_NOT_FOUND = object()


def newton_sqrt_step(n: float) -> Callable[[float], float]:
    """Return Newton's update for the positive root of ``x**2 - n``."""

    def step(x: float) -> float:
        return ((x * x) + n) / (2.0 * x)

    return step


def unfold_sqrt(
    n: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Optional[float]:
    """
    Approximate the square root of ``n`` with Newton's method.

    Iterates from ``n`` for at most ``max_iterations`` steps and returns the
    last iterate whose square is still more than ``tolerance`` away from
    ``n``. Newton's method converges quadratically, so that iterate is
    within about 1e-4 of the root.

    Args:
        n: Value to take the root of
        max_iterations: Cap on the number of iterates generated
        tolerance: Absolute tolerance on ``x*x - n``

    Returns:
        Approximate root, or None if ``n`` is negative
    """
    if n < 0.0:
        return None
    # 0 and 1 are their own roots and would divide by zero / never iterate
    if n == 0.0 or n == 1.0:
        return n

    iterates = unfold_count(newton_sqrt_step(n), n, max_iterations)
    root = take_while_last(iterates, lambda x: abs((x * x) - n) > tolerance, default=n)
    logger.debug(f"sqrt({n}) ~= {root} after {max_iterations - iterates.remaining} iterates")
    return root


def fixed_point(
    func: Transform,
    init: T,
    converged: Predicate,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    default: Optional[T] = None,
) -> Optional[T]:
    """
    Return the first iterate of ``func`` from ``init`` that satisfies ``converged``.

    Args:
        func: Unary transform to iterate
        init: Starting value
        converged: Predicate deciding when an iterate is good enough
        max_iterations: Cap on the number of iterates examined
        default: Returned when no iterate converged within the cap

    Returns:
        First converged iterate, or ``default``
    """
    if max_iterations <= 0:
        raise InvalidArgument(f"max_iterations must be positive, got {max_iterations}")
    result = first_where(unfold_count(func, init, max_iterations), converged, _NOT_FOUND)
    if result is _NOT_FOUND:
        logger.warning(f"No fixed point found within {max_iterations} iterations")
        return default
    return result


def fibonacci(count: int) -> List[int]:
    """Return the first ``count`` Fibonacci numbers, starting at 0."""
    pairs = unfold_count(lambda ab: (ab[1], ab[0] + ab[1]), (0, 1), count)
    return list(project(pairs, itemgetter(0)))
