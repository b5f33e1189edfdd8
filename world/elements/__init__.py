"""
Element System - Damage types and their relations for Evennia

Elements are named categories (FIRE, WATER, ...). A relation between an
ordered pair of elements is a strength multiplier; setting one direction
stores the inverse in the other.
"""

from world.elements.core import (
    Element,
    ElementPair,
    normalize_element_id,
)
from world.elements.relations import (
    ElementRelation,
    BasicRelation,
    CustomRelation,
    resolve_inverse,
    relation_by_name,
)
from world.elements.registry import ElementRegistry
from world.elements.relation_table import RelationTable
from world.elements.context import ElementContext, build_context
from world.elements.validation import (
    ElementError,
    InvalidArgumentError,
    NotInitializedError,
    ConfigValidationError,
)
from world.elements.log import log

__all__ = [
    # Core data structures
    "Element",
    "ElementPair",
    "normalize_element_id",
    # Relations
    "ElementRelation",
    "BasicRelation",
    "CustomRelation",
    "resolve_inverse",
    "relation_by_name",
    # Storage
    "ElementRegistry",
    "RelationTable",
    "ElementContext",
    "build_context",
    # Errors
    "ElementError",
    "InvalidArgumentError",
    "NotInitializedError",
    "ConfigValidationError",
    # Logging
    "log",
]
