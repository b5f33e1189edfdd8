"""
Element context: the single entry point hosts use.

A context owns one ElementRegistry and one RelationTable and guards
both with one lock, so a reader never sees only one direction of a
relation written by set_relation(). Hosts build a context at startup
(see build_context) and pass it to whatever needs it; several contexts
may coexist, e.g. one per test.

Example:

    context = ElementContext()
    fire, water = Element("fire"), Element("water")
    context.register_element(fire)
    context.register_element(water)
    context.set_relation(water, fire, BasicRelation.STRONG)
    context.multiplier(fire, water)   # 0.5
"""

import threading
from typing import Dict, List, Optional, Tuple

from world.elements.attributes import AttributeStore, MappingAttributeStore
from world.elements.config import ElementConfig, get_config
from world.elements.core import Element
from world.elements.log import log
from world.elements.registry import ElementRegistry
from world.elements.relation_table import RelationTable
from world.elements.relations import BasicRelation, ElementRelation, relation_by_name
from world.elements.validation import InvalidArgumentError, NotInitializedError, validate_config


class ElementContext:
    """Registry, relation table and attribute binding for one world."""

    def __init__(
        self,
        default_relation: ElementRelation = BasicRelation.NEUTRAL,
        attributes: Optional[AttributeStore] = None,
        attribute_key: str = "element_id",
    ):
        self.registry = ElementRegistry()
        self.relations = RelationTable()
        self.default_relation = default_relation
        self.attributes = attributes if attributes is not None else MappingAttributeStore()
        self.attribute_key = attribute_key
        self._storage_key: Optional[str] = None
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # Elements
    # -------------------------------------------------------------------------

    def register_element(self, element: Element, holder=None) -> bool:
        """
        Register an element, optionally tagging a holder with it.

        Args:
            element: Element to register
            holder: Container (player, item) to attach the element id to
                    when registration succeeds and attributes are initialized

        Returns:
            True if registered, False if the id was already taken
        """
        with self._lock:
            registered = self.registry.register(element)
        if registered and holder is not None and self._storage_key is not None:
            self.attach_element(holder, element)
        return registered

    def get_element(self, element_id: Optional[str]) -> Optional[Element]:
        with self._lock:
            return self.registry.get(element_id)

    def default_element(self) -> Optional[Element]:
        with self._lock:
            return self.registry.default_element()

    def elements(self) -> List[Element]:
        with self._lock:
            return self.registry.elements()

    # -------------------------------------------------------------------------
    # Relations
    # -------------------------------------------------------------------------

    def set_relation(self, from_: Element, to: Element, relation: ElementRelation) -> None:
        """Define from_ -> to as relation, and to -> from_ as its inverse."""
        with self._lock:
            self.relations.set(from_, to, relation)

    def find_relation(
        self,
        from_: Optional[Element],
        to: Optional[Element]
    ) -> Optional[ElementRelation]:
        """Stored relation, or None if the pair is unspecified."""
        with self._lock:
            return self.relations.get(from_, to)

    def relation_pair(
        self,
        from_: Optional[Element],
        to: Optional[Element]
    ) -> Tuple[Optional[ElementRelation], Optional[ElementRelation]]:
        """Both directions of a pair, read under one lock: (from_ -> to, to -> from_)."""
        with self._lock:
            return self.relations.get(from_, to), self.relations.get(to, from_)

    def get_relation(
        self,
        from_: Optional[Element],
        to: Optional[Element]
    ) -> ElementRelation:
        """Stored relation, or the context's default relation."""
        return self.get_relation_or_default(from_, to, self.default_relation)

    def get_relation_or_default(
        self,
        from_: Optional[Element],
        to: Optional[Element],
        fallback: ElementRelation
    ) -> ElementRelation:
        with self._lock:
            return self.relations.get_or_default(from_, to, fallback)

    def relations_from(self, element: Element) -> Dict[Element, ElementRelation]:
        with self._lock:
            return self.relations.relations_from(element)

    def multiplier(self, from_: Optional[Element], to: Optional[Element]) -> float:
        """Effective strength multiplier of from_ acting on to."""
        return self.get_relation(from_, to).multiplier

    # -------------------------------------------------------------------------
    # Attribute storage
    # -------------------------------------------------------------------------

    def init_attributes(self, namespace: str) -> str:
        """
        Initialize the attribute key used on containers.

        Must be called once during host startup, before attach_element()
        or element_of().

        Args:
            namespace: Host/plugin namespace, e.g. "elementapi"

        Returns:
            The storage key, "<namespace>:<attribute_key>"
        """
        if not namespace or not namespace.strip():
            raise InvalidArgumentError("Namespace cannot be null or empty")
        with self._lock:
            self._storage_key = f"{namespace.strip().lower()}:{self.attribute_key}"
        log("info", f"Element attribute key initialized: {self._storage_key}")
        return self._storage_key

    @property
    def storage_key(self) -> Optional[str]:
        return self._storage_key

    def _require_storage_key(self) -> str:
        if self._storage_key is None:
            raise NotInitializedError(
                "Attribute storage has not been initialized. Call init_attributes() first."
            )
        return self._storage_key

    def attach_element(self, container, element: Optional[Element]) -> bool:
        """
        Store an element id on a container.

        Returns:
            True if attached, False if container or element is None

        Raises:
            NotInitializedError: If init_attributes() has not been called
        """
        key = self._require_storage_key()
        if container is None or element is None:
            return False
        self.attributes.attach(container, key, element.element_id)
        return True

    def element_of(self, container) -> Optional[Element]:
        """
        Read the element attached to a container.

        Returns:
            Registered Element, or None if nothing (or an unregistered id) is stored

        Raises:
            NotInitializedError: If init_attributes() has not been called
        """
        key = self._require_storage_key()
        if container is None:
            return None
        return self.get_element(self.attributes.read(container, key))


def build_context(
    config: Optional[ElementConfig] = None,
    namespace: Optional[str] = None,
    attributes: Optional[AttributeStore] = None,
) -> ElementContext:
    """
    Build a context from a world config.

    Registers configured elements in order (the first becomes the
    default element), applies configured relations, and initializes
    attribute storage when a namespace is given.

    Args:
        config: World config. If None, uses the active config.
        namespace: Host namespace for attribute storage
        attributes: Attribute store. If None, uses MappingAttributeStore.

    Raises:
        ConfigValidationError: If the config references unknown elements or relations
    """
    if config is None:
        config = get_config()
    validate_config(config)

    context = ElementContext(
        default_relation=relation_by_name(config.default_relation),
        attributes=attributes,
        attribute_key=config.attribute_key,
    )

    for element_id in config.elements:
        context.register_element(Element(element_id))

    for definition in config.relations:
        context.set_relation(
            context.get_element(definition.source),
            context.get_element(definition.target),
            relation_by_name(definition.relation),
        )

    if namespace is not None:
        context.init_attributes(namespace)

    log("info", f"Element context built with {len(context.registry)} elements")
    return context
