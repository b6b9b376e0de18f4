"""Combinations of ``r`` indices out of ``n`` in lexicographic order."""

from __future__ import annotations

import logging

from combinatorics.enumerators.base import DigitState, check_size
from combinatorics.exceptions import InvalidArgument

logger = logging.getLogger("combinatorics.enumerators.combination")


class CombinationEnumerator(DigitState):
    """Strictly increasing ``r``-tuples drawn from ``{0, ..., n-1}``.

    Starts at ``(0, 1, ..., r-1)`` and yields exactly ``C(n, r)`` tuples.
    """

    def __init__(self, n: int, r: int):
        check_size("n", n)
        check_size("r", r)
        if r > n:
            raise InvalidArgument(f"r must be <= n, got r={r} n={n}")
        super().__init__(list(range(r)))
        self.n = n
        logger.debug("combination enumerator n=%d r=%d", n, r)

    def _step(self) -> bool:
        c = self._digits
        n, r = self.n, self.size
        # rightmost position that can still grow while leaving room on its right
        i = r - 1
        while i >= 0 and c[i] >= n - (r - i):
            i -= 1
        if i < 0:
            return False
        c[i] += 1
        for j in range(i + 1, r):
            c[j] = c[i] + (j - i)
        return True


def new_combination_enumerator(n: int, r: int) -> CombinationEnumerator:
    """Create a combination enumerator over ``(n, r)``.

    Raises:
        InvalidArgument: If ``n`` or ``r`` is negative or ``r > n``.
    """
    return CombinationEnumerator(n, r)
