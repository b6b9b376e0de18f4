"""Index enumerators.

Structure:
- base.py: DigitState counter and argument checks
- combination.py: strictly increasing r-tuples out of n
- permutation.py: orderings of range(r)
- sublist.py: ordered r-selections out of n (combination x permutation)
"""

from combinatorics.enumerators.base import DigitState
from combinatorics.enumerators.combination import (
    CombinationEnumerator,
    new_combination_enumerator,
)
from combinatorics.enumerators.permutation import (
    PermutationEnumerator,
    new_permutation_enumerator,
)
from combinatorics.enumerators.sublist import SublistEnumerator, new_sublist_enumerator

__all__ = [
    "DigitState",
    "CombinationEnumerator",
    "PermutationEnumerator",
    "SublistEnumerator",
    "new_combination_enumerator",
    "new_permutation_enumerator",
    "new_sublist_enumerator",
]
