"""Error types raised by the enumerators.

InvalidArgument -- bad ``n`` / ``r`` given to a constructor or count helper.
Exhausted       -- routine end-of-sequence signal from ``advance()``.
"""


class InvalidArgument(ValueError):
    """Raised at construction time for a negative or oversized selection."""


class Exhausted(Exception):
    """Raised by ``advance()`` when no further tuple exists.

    Not a defect: iterators and the projector translate it into the end of
    the sequence.
    """
