"""
Attribute storage for element ids on game objects.

The element system never persists its own state. Hosts keep an
element id on items, characters or rooms through one of these stores,
and read it back through the context's registry.
"""

from typing import MutableMapping, Optional


class AttributeStore:
    """Capability interface: attach and read string attributes on a container."""

    def attach(self, container, key: str, value: str) -> None:
        raise NotImplementedError

    def read(self, container, key: str) -> Optional[str]:
        raise NotImplementedError


class MappingAttributeStore(AttributeStore):
    """Containers are plain mutable mappings (dicts, JSON blobs, db fields)."""

    def attach(self, container: MutableMapping, key: str, value: str) -> None:
        container[key] = value

    def read(self, container: MutableMapping, key: str) -> Optional[str]:
        value = container.get(key)
        return value if isinstance(value, str) else None


class HandlerAttributeStore(AttributeStore):
    """
    Containers expose an Evennia-style attribute handler.

    Expects `container.attributes.add(key, value)` and
    `container.attributes.get(key, default=None)`.
    """

    def attach(self, container, key: str, value: str) -> None:
        container.attributes.add(key, value)

    def read(self, container, key: str) -> Optional[str]:
        handler = getattr(container, "attributes", None)
        if handler is None:
            return None
        value = handler.get(key, default=None)
        return value if isinstance(value, str) else None
