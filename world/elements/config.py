"""
Configuration for the element system.

The element roster and relation chart of a world live here (or in a
YAML file), not in code.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml


@dataclass
class RelationDefinition:
    """One configured relation: source -> target with a named built-in variant."""
    source: str
    target: str
    relation: str


@dataclass
class ElementConfig:
    """Complete element system configuration."""
    elements: List[str]
    relations: List[RelationDefinition] = field(default_factory=list)
    default_relation: str = "NEUTRAL"  # returned for pairs with no entry
    attribute_key: str = "element_id"  # combined with the host namespace


# Default configuration - matches config/element_defaults.yaml
_DEFAULT_CONFIG = ElementConfig(
    elements=["FIRE", "WATER", "EARTH", "WIND"],
    relations=[
        RelationDefinition(source="WATER", target="FIRE", relation="STRONG"),
        RelationDefinition(source="FIRE", target="WIND", relation="STRONG"),
        RelationDefinition(source="WIND", target="EARTH", relation="STRONG"),
        RelationDefinition(source="EARTH", target="WATER", relation="STRONG"),
        RelationDefinition(source="FIRE", target="FIRE", relation="MUTUAL_WEAK"),
    ],
    default_relation="NEUTRAL",
    attribute_key="element_id",
)

# Active configuration (can be replaced at runtime)
_active_config: ElementConfig = _DEFAULT_CONFIG


def get_config() -> ElementConfig:
    """Get the active element configuration."""
    return _active_config


def set_config(config: ElementConfig) -> None:
    """Set the active element configuration."""
    global _active_config
    _active_config = config


def reset_config() -> None:
    """Reset to default configuration."""
    global _active_config
    _active_config = _DEFAULT_CONFIG


# =============================================================================
# YAML LOADING
# =============================================================================

def _require(data: Dict[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing required field: {where}{key}")
    return data[key]


def _require_string(value: Any, field_name: str) -> str:
    # YAML 1.1 reads ~ as None and NO/ON/OFF as booleans
    if not isinstance(value, str):
        raise ValueError(f"Field '{field_name}' must be a string, got {value!r}")
    return value


def _parse_relation(entry: Any, index: int) -> RelationDefinition:
    where = f"relations[{index}]."
    if not isinstance(entry, dict):
        raise ValueError(f"Relation entry {index} must be a dictionary")
    return RelationDefinition(
        source=_require_string(_require(entry, "from", where), f"{where}from"),
        target=_require_string(_require(entry, "to", where), f"{where}to"),
        relation=_require_string(_require(entry, "relation", where), f"{where}relation"),
    )


def load_config_from_yaml(path: Union[str, Path]) -> ElementConfig:
    """
    Load an element configuration from a YAML file.

    Expected shape:

        elements: [FIRE, WATER]
        default_relation: NEUTRAL      # optional
        attribute_key: element_id      # optional
        relations:                     # optional
          - {from: WATER, to: FIRE, relation: STRONG}

    Args:
        path: Path to the YAML file

    Returns:
        ElementConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is malformed or a required field is missing
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML from {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("YAML root must be a dictionary")

    elements = _require(data, "elements", "")
    if not isinstance(elements, list):
        raise ValueError("Field 'elements' must be a list")

    relations = data.get("relations") or []
    if not isinstance(relations, list):
        raise ValueError("Field 'relations' must be a list")

    if not all(isinstance(element_id, str) for element_id in elements):
        raise ValueError("Field 'elements' entries must be strings")

    return ElementConfig(
        elements=list(elements),
        relations=[_parse_relation(entry, i) for i, entry in enumerate(relations)],
        default_relation=_require_string(data.get("default_relation", "NEUTRAL"), "default_relation"),
        attribute_key=_require_string(data.get("attribute_key", "element_id"), "attribute_key"),
    )
