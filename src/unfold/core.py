"""
Endless unfold iterator and its bounded conveniences.

``Unfold(f, i)`` produces ``i, f(i), f(f(i)), ...`` one value per pull.
The sequence never ends on its own: use ``unfold_count``, ``unfold_vector``
or ``itertools.islice`` to stop it.

    >>> fib = unfold_vector(lambda ab: (ab[1], ab[0] + ab[1]), (0, 1), 5)
    >>> [a for a, _ in fib]
    [0, 1, 1, 2, 3]
"""

import logging
import operator
from itertools import islice
from typing import Generic, List

from .errors import InvalidArgument
from .protocols import T, Transform

logger = logging.getLogger(__name__)


def _as_count(name: str, value) -> int:
    """Return value as a non-negative int, or raise InvalidArgument."""
    try:
        count = operator.index(value)
    except TypeError:
        raise InvalidArgument(f"{name} must be an integer, got {value!r}") from None
    if count < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {count}")
    return count


class Unfold(Generic[T]):
    """
    Endless iterator over ``init, f(init), f(f(init)), ...``.

    Single Responsibility: hold the current value and advance it.
    """

    def __init__(self, function: Transform, init: T):
        """
        Initialize the iterator.

        Args:
            function: Unary transform applied to produce each next value
            init: First value produced
        """
        self.transform = function
        self.current = init

    def __iter__(self) -> "Unfold[T]":
        return self

    def __next__(self) -> T:
        return self.produce_next()

    def produce_next(self) -> T:
        """
        Return the current value and advance to the next one.

        The transform runs before this method returns, so the value handed
        back is no longer referenced by the iterator. Exceptions raised by
        the transform propagate; the instance should then be discarded.
        """
        value = self.current
        self.current = self.transform(value)
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self.transform!r}, current={self.current!r})"


class BoundedUnfold(Generic[T]):
    """
    Lazy view over an ``Unfold`` that stops after ``count`` values.

    Once exhausted, every further pull raises ``StopIteration``.
    """

    def __init__(self, source: Unfold, count: int):
        """
        Initialize the bounded view.

        Args:
            source: Endless iterator to draw values from
            count: Maximum number of values to yield
        """
        self._source = source
        self.remaining = _as_count("count", count)

    @property
    def exhausted(self) -> bool:
        """True once the quota of values has been yielded."""
        return self.remaining == 0

    def __iter__(self) -> "BoundedUnfold[T]":
        return self

    def __next__(self) -> T:
        if self.remaining <= 0:
            raise StopIteration
        value = self._source.produce_next()
        self.remaining -= 1
        return value


def unfold(func: Transform, init: T) -> Unfold[T]:
    """Create a new endless ``Unfold`` iterator."""
    return Unfold(func, init)


def unfold_vector(func: Transform, init: T, length: int) -> List[T]:
    """
    Collect the first ``length`` values of an unfold into a list.

    Args:
        func: Unary transform
        init: First value
        length: Number of values to collect

    Returns:
        List of ``length`` values in production order

    Raises:
        InvalidArgument: If length is not a non-negative integer
    """
    values = list(islice(unfold(func, init), _as_count("length", length)))
    logger.debug(f"Materialized {len(values)} unfold values")
    return values


def unfold_nth(func: Transform, init: T, index: int) -> T:
    """
    Return the ``index``-th value of an unfold, counting from 1.

    ``unfold_nth(f, i, 1)`` is ``i``, ``unfold_nth(f, i, 2)`` is ``f(i)``.

    Raises:
        InvalidArgument: If index is not a positive integer
    """
    index = _as_count("index", index)
    if index == 0:
        raise InvalidArgument("index must be positive, got 0")
    iterator = unfold(func, init)
    for _ in range(index - 1):
        iterator.produce_next()
    return iterator.produce_next()


def unfold_count(func: Transform, init: T, count: int) -> BoundedUnfold[T]:
    """
    Create a lazy iterator that stops after ``count`` values.

        >>> list(unfold_count(lambda x: x + 2, 1, 3))
        [1, 3, 5]
    """
    return BoundedUnfold(unfold(func, init), count)
