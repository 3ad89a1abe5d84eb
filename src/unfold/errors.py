"""Exception types raised by the unfold package."""


class UnfoldError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgument(UnfoldError, ValueError):
    """Raised when a caller passes an argument no sequence can satisfy.

    Examples are asking for the 0th element of a sequence with
    ``unfold_nth`` or requesting a negative number of values.
    """
