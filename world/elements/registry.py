"""
Element registry.

Maps normalized ids to registered elements. The first registration of
an id wins, and the first element ever registered becomes the default
element for the registry's lifetime.
"""

from typing import Dict, List, Optional

from world.elements.core import Element
from world.elements.log import log
from world.elements.validation import InvalidArgumentError


class ElementRegistry:
    """Registered elements, keyed by normalized id."""

    def __init__(self):
        self._elements: Dict[str, Element] = {}
        self._default: Optional[Element] = None

    def register(self, element: Element) -> bool:
        """
        Register an element.

        Args:
            element: Element to register

        Returns:
            True if registered, False if the id is already taken

        Raises:
            InvalidArgumentError: If element is None
        """
        if element is None:
            raise InvalidArgumentError("Element cannot be null")

        key = element.element_id
        if key in self._elements:
            log("debug", f"Element {key} already registered; keeping the first")
            return False

        self._elements[key] = element
        if self._default is None:
            self._default = element
        return True

    def get(self, element_id) -> Optional[Element]:
        """Look up an element by id (case-insensitive) or by an equal Element. Missing or blank ids give None."""
        if isinstance(element_id, Element):
            element_id = element_id.element_id
        if not element_id or not isinstance(element_id, str):
            return None
        return self._elements.get(element_id.upper())

    def default_element(self) -> Optional[Element]:
        """The first element registered, or None."""
        return self._default

    def elements(self) -> List[Element]:
        """Registered elements in registration order."""
        return list(self._elements.values())

    def __contains__(self, element_id) -> bool:
        return self.get(element_id) is not None

    def __len__(self) -> int:
        return len(self._elements)
