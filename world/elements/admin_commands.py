"""
Admin commands for element debugging.

These are not full Evennia commands, but the logic that would
be called by Evennia command handlers.
"""

from typing import List

from world.elements.context import ElementContext


def cmd_element_list(context: ElementContext) -> str:
    """
    Admin command: element/list

    Show registered elements in registration order, marking the default.

    Returns:
        Formatted string for admin display
    """
    elements = context.elements()
    default = context.default_element()

    output = []
    output.append(f"Registered Elements: {len(elements)}")

    if elements:
        for element in elements:
            marker = " (default)" if element == default else ""
            output.append(f"  {element.element_id}: {element.display_name}{marker}")
    else:
        output.append("  (no elements registered)")

    return "\n".join(output)


def cmd_element_inspect(context: ElementContext, element_id: str) -> str:
    """
    Admin command: element/inspect <element>

    Show every relation defined from one element.

    Args:
        context: Element context
        element_id: Id of the element to inspect (case-insensitive)

    Returns:
        Formatted string for admin display
    """
    element = context.get_element(element_id)
    if element is None:
        return f"Element '{element_id}' is not registered."

    outgoing = context.relations_from(element)

    output = []
    output.append(f"Element Inspection: {element.display_name}")
    output.append(f"  Element ID: {element.element_id}")
    output.append(f"  Default: {'yes' if element == context.default_element() else 'no'}")
    output.append("")
    output.append("Relations:")

    if outgoing:
        for target, relation in sorted(outgoing.items(), key=lambda x: x[0].element_id):
            output.append(f"  -> {target.element_id}: {relation} x{relation.multiplier:.2f}")
    else:
        output.append("  (no relations defined)")

    return "\n".join(output)


def cmd_relation_matrix(context: ElementContext) -> str:
    """
    Admin command: element/matrix

    Attacker (rows) x defender (columns) grid of effective multipliers.
    Pairs with no relation show the context's default relation.

    Returns:
        Formatted string for admin display
    """
    elements = context.elements()
    if not elements:
        return "(no elements registered)"

    width = max(6, max(len(e.element_id) for e in elements) + 1)
    header = " " * width + "".join(e.element_id.rjust(width) for e in elements)

    rows: List[str] = [header]
    for attacker in elements:
        cells = "".join(
            f"{context.multiplier(attacker, defender):.2f}".rjust(width)
            for defender in elements
        )
        rows.append(attacker.element_id.ljust(width) + cells)

    return "\n".join(rows)
