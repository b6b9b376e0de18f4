"""Full permutations of ``{0, ..., r-1}`` in lexicographic order."""

from __future__ import annotations

import logging

from combinatorics.enumerators.base import DigitState, check_size

logger = logging.getLogger("combinatorics.enumerators.permutation")


class PermutationEnumerator(DigitState):
    """Every ordering of ``range(r)``, ``r!`` tuples in total.

    Uses the classic next-permutation step: find the last ascent, swap it with
    the rightmost larger element, reverse the tail.
    """

    def __init__(self, r: int):
        check_size("r", r)
        super().__init__(list(range(r)))
        logger.debug("permutation enumerator r=%d", r)

    def _step(self) -> bool:
        p = self._digits
        i = self.size - 2
        while i >= 0 and p[i] >= p[i + 1]:
            i -= 1
        if i < 0:
            return False
        j = self.size - 1
        while p[j] <= p[i]:
            j -= 1
        p[i], p[j] = p[j], p[i]
        p[i + 1 :] = reversed(p[i + 1 :])
        return True


def new_permutation_enumerator(r: int) -> PermutationEnumerator:
    """Create a permutation enumerator over ``r`` items.

    Raises:
        InvalidArgument: If ``r`` is negative.
    """
    return PermutationEnumerator(r)
