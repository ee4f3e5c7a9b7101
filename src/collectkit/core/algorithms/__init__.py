"""Polymorphic collection algorithms over arrays, mappings and custom containers."""

from collectkit.core.algorithms.cloning import clone, clone_array
from collectkit.core.algorithms.dedup import sorted_uniq, uniq
from collectkit.core.algorithms.flattening import flatten, flatten_array, flatten_obj
from collectkit.core.algorithms.projection import namedtuple, omit, pick
from collectkit.core.algorithms.search import contains, index
from collectkit.core.algorithms.selection import filter_, find, find_right, matches
from collectkit.core.algorithms.traversal import for_each, map_

__all__ = [
    # Selection
    "matches",
    "filter_",
    "find",
    "find_right",
    # Traversal
    "for_each",
    "map_",
    # Projection
    "pick",
    "omit",
    "namedtuple",
    # Search
    "contains",
    "index",
    # Cloning
    "clone",
    "clone_array",
    # Flattening
    "flatten",
    "flatten_array",
    "flatten_obj",
    # Deduplication
    "uniq",
    "sorted_uniq",
]
