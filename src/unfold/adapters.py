"""Consumer-side adapters for finite unfold sequences."""

from itertools import takewhile
from typing import Callable, Iterable, Iterator, Optional, TypeVar

from .protocols import Predicate, T

R = TypeVar("R")


def take_last(values: Iterable[T], default: Optional[T] = None) -> Optional[T]:
    """
    Return the last element of a finite iterable.

    Args:
        values: Finite iterable; an endless ``Unfold`` never returns here
        default: Returned when the iterable is empty

    Returns:
        Last element, or ``default`` if there was none
    """
    last = default
    for value in values:
        last = value
    return last


def take_while_last(
    values: Iterable[T], predicate: Predicate, default: Optional[T] = None
) -> Optional[T]:
    """Return the last element before ``predicate`` first fails."""
    return take_last(takewhile(predicate, values), default)


def first_where(
    values: Iterable[T], predicate: Predicate, default: Optional[T] = None
) -> Optional[T]:
    """Return the first element satisfying ``predicate``, or ``default``."""
    for value in values:
        if predicate(value):
            return value
    return default


def project(values: Iterable[T], key: Callable[[T], R]) -> Iterator[R]:
    """
    Lazily map each element through ``key``.

    Useful for unfolds over tuples where only one component is wanted,
    such as the first element of Fibonacci pairs.
    """
    for value in values:
        yield key(value)
