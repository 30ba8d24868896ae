"""Logical to physical property and value mapping for LTR and RTL output."""

from typing import Optional, Tuple

from .tables import (
    background_position_values,
    logical_properties,
    logical_values,
    value_flip_properties,
)

Declaration = Tuple[str, str]


def _flip_background_position(value: str, rtl: bool) -> Tuple[str, bool]:
    table = background_position_values()
    changed = False
    words = []
    for word in value.split(" "):
        sides = table.get(word)
        if sides is not None:
            word = sides[1] if rtl else sides[0]
            changed = True
        words.append(word)
    return " ".join(words), changed


def generate_ltr(css_property: str, value: str) -> Declaration:
    """Physical declaration used for left-to-right documents."""
    sides = logical_properties().get(css_property)
    if sides is not None:
        return sides[0], value

    if css_property in value_flip_properties():
        mapped = logical_values().get(value)
        if mapped is not None:
            return css_property, mapped[0]
        return css_property, value

    if css_property == "background-position":
        return css_property, _flip_background_position(value, rtl=False)[0]

    return css_property, value


def generate_rtl(css_property: str, value: str) -> Optional[Declaration]:
    """Physical declaration for right-to-left documents, if it differs."""
    sides = logical_properties().get(css_property)
    if sides is not None:
        return sides[1], value

    if css_property in value_flip_properties():
        mapped = logical_values().get(value)
        if mapped is not None:
            return css_property, mapped[1]
        return None

    if css_property == "background-position":
        flipped, changed = _flip_background_position(value, rtl=True)
        if changed:
            return css_property, flipped

    return None
