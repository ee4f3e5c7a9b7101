"""collectkit: runtime type predicates, collection abstractions and algorithms.

Usage:
    from collectkit import FrozenSet, clone, contains, find_right, flatten, pick

    find_right(lambda x: x > 2, [1, 3, 2, 4])   # 4
    pick({"a": 1, "b": 2, "c": 3}, ["a", "c"])   # {"a": 1, "c": 3}
    flatten({"a": {"b": [1, 2]}})               # {"a.b[0]": 1, "a.b[1]": 2}

    copy = clone({"nested": {"x": 1}}, deep=True)
    contains(FrozenSet([1, 2, 3]), 2)           # True
"""

import logging

__version__ = "0.1.0"

# Core primitives
from collectkit.core import (
    Collection,
    Comparable,
    Container,
    FrozenMutationError,
    FrozenSet,
    Reversible,
    Sequence,
    clone,
    clone_array,
    comp,
    contains,
    eq,
    filter_,
    find,
    find_right,
    flatten,
    flatten_array,
    flatten_obj,
    for_each,
    identity,
    index,
    map_,
    matches,
    namedtuple,
    omit,
    pick,
    sorted_uniq,
    type_of,
    uniq,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Containers
    "Container",
    "Comparable",
    "Reversible",
    "Collection",
    "Sequence",
    "FrozenSet",
    "FrozenMutationError",
    # Oracle
    "type_of",
    "eq",
    "comp",
    "identity",
    # Algorithms
    "matches",
    "filter_",
    "find",
    "find_right",
    "for_each",
    "map_",
    "pick",
    "omit",
    "namedtuple",
    "contains",
    "index",
    "clone",
    "clone_array",
    "flatten",
    "flatten_array",
    "flatten_obj",
    "uniq",
    "sorted_uniq",
]
