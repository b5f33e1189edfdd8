"""
Tests for admin debugging commands.

See world/elements/admin_commands.py for implementation.
"""

from world.elements.admin_commands import (
    cmd_element_inspect,
    cmd_element_list,
    cmd_relation_matrix,
)
from world.elements.context import ElementContext
from world.elements.core import Element
from world.elements.relations import BasicRelation


def test_element_list_marks_default(context):
    """The first registered element is marked as default."""
    output = cmd_element_list(context)

    assert "Registered Elements: 2" in output
    assert "FIRE: Fire (default)" in output
    assert "WATER: Water" in output
    assert "WATER: Water (default)" not in output


def test_element_list_empty():
    """An empty context says so."""
    output = cmd_element_list(ElementContext())

    assert "Registered Elements: 0" in output
    assert "(no elements registered)" in output


def test_element_inspect_shows_relations(context):
    """Outgoing relations are listed with multipliers."""
    fire, water = context.get_element("FIRE"), context.get_element("WATER")
    context.set_relation(water, fire, BasicRelation.STRONG)

    output = cmd_element_inspect(context, "fire")

    assert "Element Inspection: Fire" in output
    assert "Element ID: FIRE" in output
    assert "Default: yes" in output
    assert "-> WATER: WEAK(multiplier=0.5) x0.50" in output


def test_element_inspect_no_relations(context):
    """Elements with no relations say so."""
    output = cmd_element_inspect(context, "WATER")

    assert "Default: no" in output
    assert "(no relations defined)" in output


def test_element_inspect_unknown(context):
    """Unknown ids produce a message, not an error."""
    assert cmd_element_inspect(context, "plasma") == "Element 'plasma' is not registered."


def test_relation_matrix(context):
    """The grid shows effective multipliers, unset pairs at the default."""
    fire, water = context.get_element("FIRE"), context.get_element("WATER")
    context.set_relation(water, fire, BasicRelation.STRONG)

    lines = cmd_relation_matrix(context).splitlines()

    assert lines[0].split() == ["FIRE", "WATER"]
    assert lines[1].split() == ["FIRE", "1.00", "0.50"]
    assert lines[2].split() == ["WATER", "2.00", "1.00"]


def test_relation_matrix_empty():
    """No elements, no grid."""
    assert cmd_relation_matrix(ElementContext()) == "(no elements registered)"


def test_relation_matrix_long_ids():
    """Columns widen to fit long ids."""
    context = ElementContext()
    context.register_element(Element("LIGHTNING"))
    context.register_element(Element("ICE"))

    lines = cmd_relation_matrix(context).splitlines()

    assert len({len(line) for line in lines}) == 1
