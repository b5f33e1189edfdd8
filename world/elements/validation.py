"""
Validation and error types for the element system.

Ensures:
1. Element ids are non-empty
2. Built-in relations pair up with a consistent inverse
3. World configs only reference declared elements and known relations
"""

from typing import List, Optional


# =============================================================================
# ERRORS
# =============================================================================

class ElementError(Exception):
    """Base class for element system errors."""
    pass


class InvalidArgumentError(ElementError, ValueError):
    """Raised when a required argument is missing or malformed."""
    pass


class NotInitializedError(ElementError, RuntimeError):
    """Raised when attribute storage is used before its key is initialized."""
    pass


class ConfigValidationError(ElementError):
    """Raised when a world config fails validation."""
    pass


# =============================================================================
# VALIDATION FUNCTIONS
# =============================================================================

def validate_element_id(element_id: Optional[str]) -> None:
    """
    Validate an element id before normalization.

    Raises:
        InvalidArgumentError: If the id is None, not a string, or blank
    """
    if element_id is None or not isinstance(element_id, str) or not element_id.strip():
        raise InvalidArgumentError("Element ID cannot be null or empty.")


def validate_builtin_relations() -> int:
    """
    Check that every built-in relation has a consistent inverse.

    Symmetric variants must invert to themselves, and applying the
    inverse twice must return the original variant.

    Returns:
        Number of variants checked

    Raises:
        ElementError: If any variant is inconsistent
    """
    from world.elements.relations import BasicRelation

    errors = []
    for relation in BasicRelation:
        inverse = relation.inverse()
        if relation.multiplier == relation.inverse_multiplier and inverse is not relation:
            errors.append(f"{relation.name} is symmetric but inverts to {inverse.name}")
        if inverse.inverse() is not relation:
            errors.append(
                f"{relation.name} -> {inverse.name} -> {inverse.inverse().name} "
                f"does not return to {relation.name}"
            )

    if errors:
        raise ElementError(
            f"Built-in relation validation failed with {len(errors)} errors:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return len(BasicRelation)


def validate_config(config) -> None:
    """
    Validate a world config, collecting every problem before raising.

    Args:
        config: ElementConfig to validate

    Raises:
        ConfigValidationError: If any element id or relation definition is invalid
    """
    from world.elements.core import normalize_element_id
    from world.elements.relations import relation_by_name

    errors: List[str] = []
    declared = set()

    for element_id in config.elements:
        try:
            declared.add(normalize_element_id(element_id))
        except InvalidArgumentError:
            errors.append(f"Invalid element id: {element_id!r}")

    if relation_by_name(config.default_relation) is None:
        errors.append(f"Unknown default relation: {config.default_relation!r}")

    for definition in config.relations:
        for side in (definition.source, definition.target):
            if not isinstance(side, str) or side.upper() not in declared:
                errors.append(
                    f"Relation {definition.source}->{definition.target} "
                    f"references undeclared element {side!r}"
                )
        if relation_by_name(definition.relation) is None:
            errors.append(
                f"Relation {definition.source}->{definition.target} "
                f"uses unknown relation {definition.relation!r}"
            )

    if errors:
        raise ConfigValidationError(
            f"Config validation failed with {len(errors)} errors:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )
