"""Index enumeration for combinations, permutations and ordered selections.

Exports the enumerator constructors, the value projector and count helpers.
"""

from combinatorics.counting import (  # noqa: F401
    combination_count,
    permutation_count,
    sublist_count,
)
from combinatorics.enumerators import (  # noqa: F401
    new_combination_enumerator,
    new_permutation_enumerator,
    new_sublist_enumerator,
)
from combinatorics.exceptions import Exhausted, InvalidArgument  # noqa: F401
from combinatorics.projector import combinations, permutations, project, sublists  # noqa: F401

__all__ = [
    "Exhausted",
    "InvalidArgument",
    "new_combination_enumerator",
    "new_permutation_enumerator",
    "new_sublist_enumerator",
    "project",
    "combinations",
    "permutations",
    "sublists",
    "combination_count",
    "permutation_count",
    "sublist_count",
]
