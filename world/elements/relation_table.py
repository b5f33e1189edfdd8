"""
Pairwise relation storage.

Every entry (from, to) -> R is written together with (to, from) -> R.inverse().
A pair with no entry is "unspecified", which is not the same as an
explicit NEUTRAL entry.
"""

from typing import Dict, Optional

from world.elements.core import Element, ElementPair
from world.elements.log import log
from world.elements.relations import ElementRelation
from world.elements.validation import InvalidArgumentError


class RelationTable:
    """Relations keyed by ordered element pairs."""

    def __init__(self):
        self._relations: Dict[ElementPair, ElementRelation] = {}

    def set(
        self,
        from_: Element,
        to: Element,
        relation: ElementRelation
    ) -> None:
        """
        Define a relation and its inverse.

        The inverse is computed before anything is written, so the table
        never holds only one direction of a pair. For a self-pair both
        writes land on the same key and the inverse is what remains.

        Args:
            from_: Source (attacking) element
            to: Target (defending) element
            relation: Relation from source to target

        Raises:
            InvalidArgumentError: If any argument is None
        """
        if from_ is None:
            raise InvalidArgumentError("Source element cannot be null")
        if to is None:
            raise InvalidArgumentError("Target element cannot be null")
        if relation is None:
            raise InvalidArgumentError("Relation cannot be null")

        inverse = relation.inverse()

        if from_ == to and inverse != relation:
            log(
                "warn",
                f"Asymmetric relation {relation} set from {from_} to itself; "
                f"{inverse} is stored",
            )

        self._relations[ElementPair(from_, to)] = relation
        self._relations[ElementPair(to, from_)] = inverse
        log("debug", f"Relation {from_} -> {to}: {relation}; {to} -> {from_}: {inverse}")

    def get(
        self,
        from_: Optional[Element],
        to: Optional[Element]
    ) -> Optional[ElementRelation]:
        """Stored relation for the ordered pair, or None if unset or an argument is None."""
        if from_ is None or to is None:
            return None
        return self._relations.get(ElementPair(from_, to))

    def get_or_default(
        self,
        from_: Optional[Element],
        to: Optional[Element],
        fallback: ElementRelation
    ) -> ElementRelation:
        relation = self.get(from_, to)
        return fallback if relation is None else relation

    def relations_from(self, element: Element) -> Dict[Element, ElementRelation]:
        """
        Outgoing relations of one element.

        Returns:
            Dict mapping target element -> relation
        """
        return {
            pair.target: relation
            for pair, relation in self._relations.items()
            if pair.source == element
        }

    def __contains__(self, pair) -> bool:
        return ElementPair(*pair) in self._relations

    def __len__(self) -> int:
        return len(self._relations)
