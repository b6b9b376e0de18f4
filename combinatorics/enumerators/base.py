"""Digit-state counter shared by all enumerators.

The counter owns a fixed-length buffer of indices (the current tuple) and
steps it forward one lexicographic position at a time. Subclasses provide
only ``_step``; this class handles the terminal state and the iterator
protocol.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from combinatorics.exceptions import Exhausted, InvalidArgument


def check_size(name: str, value: int) -> int:
    """Validate a non-negative integer argument.

    Raises:
        InvalidArgument: If ``value`` is not an int or is negative.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgument(f"{name} must be >= 0, got {value}")
    return value


class DigitState:
    """Fixed-length odometer over non-negative integers.

    Attributes:
        size: Length of every produced tuple. Never changes.
    """

    def __init__(self, first: List[int]):
        self.size = len(first)
        self._digits = list(first)
        self._exhausted = False
        self._started = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def current(self) -> Tuple[int, ...]:
        """Return a read-only snapshot of the current tuple."""
        return tuple(self._digits)

    def advance(self) -> None:
        """Move the buffer to the next tuple in order.

        Raises:
            Exhausted: If no further tuple exists. Every later call raises
                again and the buffer keeps its last valid value.
        """
        if self._exhausted:
            raise Exhausted()
        if not self._step():
            self._exhausted = True
            raise Exhausted()

    def _step(self) -> bool:
        """Mutate ``self._digits`` in place; return False when none is left."""
        raise NotImplementedError

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        return self

    def __next__(self) -> Tuple[int, ...]:
        if not self._started:
            self._started = True
            if self._exhausted:
                raise StopIteration
            return self.current()
        try:
            self.advance()
        except Exhausted:
            raise StopIteration from None
        return self.current()

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else "live"
        return f"{type(self).__name__}(current={self.current()}, {state})"
