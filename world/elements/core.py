"""
Core data structures for the element system.

Elements are identified by their upper-cased id. Everything else an
element carries is presentation and never takes part in equality.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional

from world.elements.validation import validate_element_id


def normalize_element_id(element_id: str) -> str:
    """
    Normalize an element id to its canonical (upper-case) form.

    Raises:
        InvalidArgumentError: If the id is None or blank
    """
    validate_element_id(element_id)
    return element_id.upper()


@dataclass(frozen=True, eq=False)
class Element:
    """
    A damage type (or any other category) taking part in relations.

    Two elements are equal when their normalized ids match, regardless
    of display name or concrete subclass, so a host may subclass
    Element for its own element types.
    """
    element_id: str
    display_name: Optional[str] = None

    def __post_init__(self):
        normalized = normalize_element_id(self.element_id)
        object.__setattr__(self, "element_id", normalized)
        if self.display_name is None:
            object.__setattr__(self, "display_name", normalized.title())

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Element):
            return NotImplemented
        return self.element_id == other.element_id

    def __hash__(self):
        return hash(self.element_id)

    def __str__(self):
        return self.element_id


class ElementPair(NamedTuple):
    """Ordered (from, to) key for relation lookups. Direction matters."""
    source: Element
    target: Element
