"""Protocol and type definitions shared across modules."""

from typing import Callable, Protocol, TypeVar

T = TypeVar("T")

Transform = Callable[[T], T]
Predicate = Callable[[T], bool]


class LoggerProtocol(Protocol):
    """The subset of ``logging.Logger`` that export code calls."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...
