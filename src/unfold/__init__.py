"""unfold - lazy ``i, f(i), f(f(i)), ...`` sequences."""

__version__ = "0.1.0"

from .adapters import first_where, project, take_last, take_while_last
from .core import BoundedUnfold, Unfold, unfold, unfold_count, unfold_nth, unfold_vector
from .errors import InvalidArgument, UnfoldError
from .solvers import fibonacci, fixed_point, unfold_sqrt

__all__ = [
    # Core
    "Unfold",
    "BoundedUnfold",
    "unfold",
    "unfold_vector",
    "unfold_nth",
    "unfold_count",
    # Errors
    "UnfoldError",
    "InvalidArgument",
    # Adapters
    "take_last",
    "take_while_last",
    "first_where",
    "project",
    # Solvers
    "unfold_sqrt",
    "fixed_point",
    "fibonacci",
]
