"""Type/Equality Oracle: shape classification, property access, equality and ordering."""

from collectkit.core.oracle.operators import comp, eq, identity, ne
from collectkit.core.oracle.predicates import (
    call,
    has_method,
    invoke,
    is_array,
    is_bool,
    is_empty,
    is_func,
    is_null,
    is_number,
    is_object,
    is_pydantic,
    is_string,
    iteratee,
    keys,
    length,
    prop,
    type_of,
)

__all__ = [
    # Predicates
    "type_of",
    "is_array",
    "is_bool",
    "is_empty",
    "is_func",
    "is_null",
    "is_number",
    "is_object",
    "is_pydantic",
    "is_string",
    # Access
    "keys",
    "length",
    "prop",
    "call",
    "has_method",
    "invoke",
    "iteratee",
    # Operators
    "eq",
    "ne",
    "comp",
    "identity",
]
