"""Container functionality: capability protocols, abstract bases, FrozenSet."""

from collectkit.core.container.models import (
    Collection,
    Comparable,
    Container,
    FrozenMutationError,
    FrozenSet,
    Reversible,
    Sequence,
)

__all__ = [
    # Protocols
    "Container",
    "Comparable",
    "Reversible",
    # Abstract bases
    "Collection",
    "Sequence",
    # Concrete
    "FrozenSet",
    "FrozenMutationError",
]
