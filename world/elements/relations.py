"""
Relations between elements.

A relation is the strength multiplier of an interaction in one
direction, plus the rule for the opposite direction:

    STRONG         2.0x   inverse WEAK
    WEAK           0.5x   inverse STRONG
    NEUTRAL        1.0x   inverse itself (alias GENERAL)
    MUTUAL_STRONG  2.0x   inverse itself
    MUTUAL_WEAK    0.5x   inverse itself

Asymmetric relations find their inverse among the built-in variants by
swapping (multiplier, inverse_multiplier). When nothing matches exactly
the inverse is NEUTRAL. This drops precision for custom relations such
as a 3.0x / 0.25x pair; hosts that need those must use symmetric
relations or set both directions explicitly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from world.elements.log import log


class ElementRelation:
    """
    Interface for relations stored in a RelationTable.

    Implementations provide a `multiplier` attribute and inverse().
    """
    multiplier: float

    def inverse(self) -> "ElementRelation":
        """Relation for the opposite direction."""
        raise NotImplementedError

    @property
    def is_symmetric(self) -> bool:
        return self.inverse() == self


class BasicRelation(ElementRelation, Enum):
    """Built-in relation variants: (multiplier, inverse_multiplier)."""
    STRONG = (2.0, 0.5)
    WEAK = (0.5, 2.0)
    NEUTRAL = (1.0, 1.0)
    GENERAL = (1.0, 1.0)  # alias of NEUTRAL
    MUTUAL_STRONG = (2.0, 2.0)
    MUTUAL_WEAK = (0.5, 0.5)

    def __init__(self, multiplier: float, inverse_multiplier: float):
        self.multiplier = multiplier
        self.inverse_multiplier = inverse_multiplier

    def inverse(self) -> "BasicRelation":
        return _BUILTIN_INVERSES[self]

    def __str__(self):
        return f"{self.name}(multiplier={self.multiplier})"


# (multiplier, inverse_multiplier) -> variant, for inverse lookup
_BY_MULTIPLIERS: Dict[Tuple[float, float], BasicRelation] = {
    (relation.multiplier, relation.inverse_multiplier): relation
    for relation in BasicRelation
}


def resolve_inverse(multiplier: float, inverse_multiplier: float) -> BasicRelation:
    """
    Find the built-in relation whose multipliers are the exact swap.

    Args:
        multiplier: Multiplier of the relation being inverted
        inverse_multiplier: Multiplier it expects in the opposite direction

    Returns:
        Matching BasicRelation, or NEUTRAL if there is no exact match
    """
    return _BY_MULTIPLIERS.get((inverse_multiplier, multiplier), BasicRelation.NEUTRAL)


_BUILTIN_INVERSES: Dict[BasicRelation, BasicRelation] = {
    relation: (
        relation
        if relation.multiplier == relation.inverse_multiplier
        else resolve_inverse(relation.multiplier, relation.inverse_multiplier)
    )
    for relation in BasicRelation
}


@dataclass(frozen=True)
class CustomRelation(ElementRelation):
    """
    A host-defined relation.

    Symmetric custom relations invert to themselves. Asymmetric ones
    invert to the matching built-in variant, or NEUTRAL.
    """
    name: str
    multiplier: float
    inverse_multiplier: float

    def inverse(self) -> ElementRelation:
        if self.multiplier == self.inverse_multiplier:
            return self
        resolved = resolve_inverse(self.multiplier, self.inverse_multiplier)
        if resolved is BasicRelation.NEUTRAL:
            log(
                "debug",
                f"No built-in inverse for {self.name} "
                f"({self.multiplier}/{self.inverse_multiplier}); using NEUTRAL",
            )
        return resolved

    def __str__(self):
        return f"{self.name}(multiplier={self.multiplier})"


def relation_by_name(name: Optional[str]) -> Optional[BasicRelation]:
    """
    Look up a built-in relation by name, case-insensitively.

    Returns:
        BasicRelation, or None for unknown names
    """
    if not isinstance(name, str):
        return None
    return BasicRelation.__members__.get(name.strip().upper())
