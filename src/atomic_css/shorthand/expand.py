"""Expand known shorthands into their longhand declarations."""

from typing import Any, Callable, Dict, List, Mapping, Optional

from ..config import ShorthandStrategyName
from ..tables import LonghandExpansion, longhand_expansions
from .base import (
    Expansion,
    ShorthandStrategy,
    distribute,
    passthrough,
    split_css_value,
    split_important,
)

_LIST_STYLE_POSITIONS = frozenset({"inside", "outside"})


def _with_important(values: List[Any], important: bool) -> List[Any]:
    if not important:
        return values
    return [f"{value} !important" if value is not None else None for value in values]


def _expand_box(entry: LonghandExpansion, value: str) -> Optional[List[Any]]:
    base, important = split_important(value)
    values = distribute(split_css_value(base), len(entry.longhands))
    if values is None:
        return None
    return _with_important(values, important)


def _expand_radius(entry: LonghandExpansion, value: str) -> Optional[List[Any]]:
    base, important = split_important(value)
    if "/" not in base:
        return _expand_box(entry, value)

    horizontal, vertical = (part.strip() for part in base.split("/", 1))
    h_values = distribute(split_css_value(horizontal), 4)
    v_values = distribute(split_css_value(vertical), 4)
    if h_values is None or v_values is None:
        return None

    values = [h if h == v else f"{h} {v}" for h, v in zip(h_values, v_values)]
    return _with_important(values, important)


def _expand_list_style(entry: LonghandExpansion, value: str) -> Optional[List[Any]]:
    base, important = split_important(value)
    type_value = position = image = None
    for part in split_css_value(base):
        if part.startswith("url(") or (part == "none" and image is None):
            image = part
        elif part in _LIST_STYLE_POSITIONS:
            position = part
        else:
            type_value = part
    return _with_important([type_value, position, image], important)


_EXPANDERS: Dict[str, Callable[[LonghandExpansion, str], Optional[List[Any]]]] = {
    "box": _expand_box,
    "pair": _expand_box,
    "radius": _expand_radius,
    "list_style": _expand_list_style,
}


class ExpandToLonghands(ShorthandStrategy):
    """Replace registered shorthands with their longhands.

    ``margin: "10px 20px"`` becomes ``margin-top: 10px``,
    ``margin-right: 20px``, ``margin-bottom: 10px`` and
    ``margin-left: 20px``. Unregistered properties pass through unchanged.
    """

    name = ShorthandStrategyName.EXPAND_TO_LONGHANDS

    def __init__(self, expansions: Optional[Mapping[str, LonghandExpansion]] = None):
        self.expansions = expansions if expansions is not None else longhand_expansions()

    def expand_declaration(self, css_property: str, value: Any) -> Expansion:
        entry = self.expansions.get(css_property)
        if entry is None:
            return passthrough(css_property, value)

        if value is None or not isinstance(value, str):
            if entry.kind == "list_style" and value is not None:
                return passthrough(css_property, value)
            return [(longhand, value) for longhand in entry.longhands]

        values = _EXPANDERS[entry.kind](entry, value)
        if values is None:
            self.logger.warning(
                "Could not expand shorthand value, keeping shorthand",
                extra={"property": css_property, "value": value},
            )
            return passthrough(css_property, value)

        return [
            (longhand, longhand_value)
            for longhand, longhand_value in zip(entry.longhands, values)
            if longhand_value is not None
        ]
