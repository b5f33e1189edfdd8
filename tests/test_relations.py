"""
Tests for relation variants and inverse resolution.

See world/elements/relations.py for implementation.
"""

import logging

import pytest

from world.elements.relations import (
    BasicRelation,
    CustomRelation,
    relation_by_name,
    resolve_inverse,
)


# =============================================================================
# BUILT-IN VARIANTS
# =============================================================================

def test_builtin_multipliers():
    """Each variant carries its documented multiplier."""
    assert BasicRelation.STRONG.multiplier == 2.0
    assert BasicRelation.WEAK.multiplier == 0.5
    assert BasicRelation.NEUTRAL.multiplier == 1.0
    assert BasicRelation.MUTUAL_STRONG.multiplier == 2.0
    assert BasicRelation.MUTUAL_WEAK.multiplier == 0.5


def test_general_is_neutral():
    """GENERAL is an alias of NEUTRAL."""
    assert BasicRelation.GENERAL is BasicRelation.NEUTRAL


def test_strong_and_weak_invert_each_other():
    """STRONG <-> WEAK."""
    assert BasicRelation.STRONG.inverse() is BasicRelation.WEAK
    assert BasicRelation.WEAK.inverse() is BasicRelation.STRONG


@pytest.mark.parametrize("relation", [
    BasicRelation.NEUTRAL,
    BasicRelation.MUTUAL_STRONG,
    BasicRelation.MUTUAL_WEAK,
])
def test_symmetric_variants_invert_to_themselves(relation):
    """Symmetric variants are their own inverse."""
    assert relation.inverse() is relation
    assert relation.is_symmetric


@pytest.mark.parametrize("relation", list(BasicRelation))
def test_double_inverse_returns_original(relation):
    """inverse(inverse(R)) == R for every built-in."""
    assert relation.inverse().inverse() is relation


def test_asymmetric_variants_not_symmetric():
    """STRONG and WEAK are asymmetric."""
    assert not BasicRelation.STRONG.is_symmetric
    assert not BasicRelation.WEAK.is_symmetric


def test_str_shows_multiplier():
    """String form names the variant and its multiplier."""
    assert str(BasicRelation.STRONG) == "STRONG(multiplier=2.0)"


# =============================================================================
# INVERSE RESOLUTION
# =============================================================================

def test_resolve_inverse_exact_swap():
    """The swapped multiplier pair is found among the built-ins."""
    assert resolve_inverse(2.0, 0.5) is BasicRelation.WEAK
    assert resolve_inverse(0.5, 2.0) is BasicRelation.STRONG


def test_resolve_inverse_falls_back_to_neutral():
    """No exact swap means NEUTRAL."""
    assert resolve_inverse(3.0, 0.25) is BasicRelation.NEUTRAL
    assert resolve_inverse(2.0, 0.4) is BasicRelation.NEUTRAL


# =============================================================================
# CUSTOM RELATIONS
# =============================================================================

def test_custom_symmetric_inverts_to_itself():
    """A custom relation with equal multipliers is symmetric."""
    stalemate = CustomRelation("STALEMATE", 0.75, 0.75)
    assert stalemate.inverse() == stalemate
    assert stalemate.is_symmetric


def test_custom_asymmetric_with_builtin_counterpart():
    """A custom 2.0/0.5 relation inverts to WEAK."""
    scorch = CustomRelation("SCORCH", 2.0, 0.5)
    assert scorch.inverse() is BasicRelation.WEAK
    assert not scorch.is_symmetric


def test_custom_asymmetric_without_counterpart_loses_precision(caplog):
    """A custom relation with no built-in counterpart inverts to NEUTRAL."""
    inferno = CustomRelation("INFERNO", 3.0, 0.25)

    with caplog.at_level(logging.DEBUG, logger="world.elements"):
        inverse = inferno.inverse()

    assert inverse is BasicRelation.NEUTRAL
    assert inverse.inverse() != inferno
    assert "No built-in inverse for INFERNO" in caplog.text


def test_custom_relations_compare_by_value():
    """Custom relations are value objects."""
    assert CustomRelation("SCORCH", 2.0, 0.5) == CustomRelation("SCORCH", 2.0, 0.5)
    assert CustomRelation("SCORCH", 2.0, 0.5) != CustomRelation("SINGE", 2.0, 0.5)


# =============================================================================
# NAME LOOKUP
# =============================================================================

def test_relation_by_name_case_insensitive():
    """Names resolve regardless of case."""
    assert relation_by_name("strong") is BasicRelation.STRONG
    assert relation_by_name(" Mutual_Weak ") is BasicRelation.MUTUAL_WEAK
    assert relation_by_name("general") is BasicRelation.NEUTRAL


def test_relation_by_name_unknown():
    """Unknown or missing names give None."""
    assert relation_by_name("OVERWHELMING") is None
    assert relation_by_name(None) is None
