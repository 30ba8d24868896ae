"""Cascade priority for atomic declarations.

The priority of an entry is the sum of three parts: the property category,
the pseudo selector weight and the at-rule weight. Non-layered output is
emitted in ascending priority order, so later (higher) priorities win.
"""

import re
from typing import Optional

from .tables import (
    CATEGORY_PRIORITIES,
    CUSTOM_PROPERTY_PRIORITY,
    LONGHAND_LOGICAL,
    property_categories,
    pseudo_priorities,
)

_PSEUDO_CLASS_RE = re.compile(r":[a-z-]+(?:\([^)]*\))?", re.IGNORECASE)
_PSEUDO_BASE_RE = re.compile(r"^(:[a-z-]+)", re.IGNORECASE)
_INTERACTIVE_RE = re.compile(r":(hover|focus|active|checked|focus-within|focus-visible)")
_ELEMENT_RE = re.compile(r"^::[\w-]+")


def property_priority(css_property: str) -> int:
    if css_property.startswith("--"):
        return CUSTOM_PROPERTY_PRIORITY
    category = property_categories().get(css_property, LONGHAND_LOGICAL)
    return CATEGORY_PRIORITIES[category]


def _pseudo_class_priority(pseudo: str) -> int:
    table = pseudo_priorities()
    match = _PSEUDO_BASE_RE.match(pseudo)
    base = match.group(1).lower() if match else pseudo
    return table.pseudo_classes.get(base, table.unknown_pseudo_class)


def _combined_classes_priority(selector: str) -> int:
    return sum(_pseudo_class_priority(p) for p in _PSEUDO_CLASS_RE.findall(selector))


def pseudo_priority(selector: Optional[str]) -> int:
    """Weight of a pseudo selector; pseudo-elements add a fixed offset."""
    if not selector:
        return 0

    if selector.startswith("::"):
        rest = _ELEMENT_RE.sub("", selector, count=1)
        return pseudo_priorities().pseudo_element + _combined_classes_priority(rest)

    if selector.startswith(":"):
        return _combined_classes_priority(selector)

    match = _INTERACTIVE_RE.search(selector)
    if match:
        return _pseudo_class_priority(":" + match.group(1))
    return 0


def at_rule_priority(at_rule: Optional[str]) -> int:
    if not at_rule:
        return 0
    for prefix, weight in pseudo_priorities().at_rules.items():
        if at_rule.startswith(prefix):
            return weight
    return 0


def calculate(
    css_property: str, selector: Optional[str] = None, at_rule: Optional[str] = None
) -> int:
    """Total priority of a declaration in its selector context."""
    return property_priority(css_property) + pseudo_priority(selector) + at_rule_priority(at_rule)
