"""Core functionalities: stateless protocols, containers and algorithms.

Architecture Note:
    core/ contains pure, stateless building blocks. Algorithms inspect the
    shape of their operand through the oracle, prefer an operand's own
    `contains`/`indexOf`/`index`/`clone` method when it has one, and
    otherwise fall back to generic logic. Only `flatten_array` mutates its
    argument.
"""

from collectkit.core.algorithms import (
    clone,
    clone_array,
    contains,
    filter_,
    find,
    find_right,
    flatten,
    flatten_array,
    flatten_obj,
    for_each,
    index,
    map_,
    matches,
    namedtuple,
    omit,
    pick,
    sorted_uniq,
    uniq,
)
from collectkit.core.container import (
    Collection,
    Comparable,
    Container,
    FrozenMutationError,
    FrozenSet,
    Reversible,
    Sequence,
)
from collectkit.core.oracle import (
    call,
    comp,
    eq,
    identity,
    is_array,
    is_bool,
    is_empty,
    is_func,
    is_null,
    is_number,
    is_object,
    is_string,
    keys,
    length,
    ne,
    prop,
    type_of,
)
from collectkit.core.types import Comp, Depth, Iteratee, Predicate, Selector

__all__ = [
    # Types
    "Comp",
    "Depth",
    "Iteratee",
    "Predicate",
    "Selector",
    # Oracle
    "type_of",
    "is_array",
    "is_bool",
    "is_empty",
    "is_func",
    "is_null",
    "is_number",
    "is_object",
    "is_string",
    "keys",
    "length",
    "prop",
    "call",
    "eq",
    "ne",
    "comp",
    "identity",
    # Containers
    "Container",
    "Comparable",
    "Reversible",
    "Collection",
    "Sequence",
    "FrozenSet",
    "FrozenMutationError",
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
