"""Keep shorthands intact and reset the longhands they override."""

from typing import Any, List, Mapping, Optional, Tuple

from ..config import ShorthandStrategyName
from ..tables import ShorthandExpansion, keep_shorthand_expansions, split_pair_expansions
from .base import Expansion, ShorthandStrategy, passthrough, split_css_value, split_important


def _split_pair(css_property: str, value: Any) -> Optional[Tuple[Any, Any]]:
    if not isinstance(value, str):
        return value, value

    base, important = split_important(value)
    parts = split_css_value(base)

    pair: Optional[Tuple[str, str]] = None
    if len(parts) == 1:
        pair = (parts[0], parts[0])
    elif len(parts) == 2:
        pair = (parts[0], parts[1])
    elif css_property == "contain-intrinsic-size":
        if len(parts) == 3 and parts[0] == "auto":
            pair = (f"auto {parts[1]}", parts[2])
        elif len(parts) == 3 and parts[1] == "auto":
            pair = (parts[0], f"auto {parts[2]}")
        elif len(parts) == 4 and parts[0] == "auto" and parts[2] == "auto":
            pair = (f"auto {parts[1]}", f"auto {parts[3]}")

    if pair is None:
        return None
    if important:
        return pair[0] + " !important", pair[1] + " !important"
    return pair


class KeepShorthands(ShorthandStrategy):
    """Default strategy.

    ``margin: "10px"`` stays a ``margin`` declaration and the longhands it
    covers (``margin-top``, ``margin-inline-start``, ...) are reset to
    ``None`` so a later longhand in the same rule wins predictably.
    """

    name = ShorthandStrategyName.KEEP_SHORTHANDS

    def __init__(
        self,
        expansions: Optional[Mapping[str, ShorthandExpansion]] = None,
        split_pairs: Optional[Mapping[str, Tuple[str, str]]] = None,
    ):
        self.expansions = expansions if expansions is not None else keep_shorthand_expansions()
        self.split_pairs = split_pairs if split_pairs is not None else split_pair_expansions()

    def expand_declaration(self, css_property: str, value: Any) -> Expansion:
        expansion = self.expansions.get(css_property)
        if expansion is not None:
            result: List[Tuple[str, Any]] = [(expansion.value_property, value)]
            result.extend((reset, None) for reset in expansion.resets)
            return result

        longhands = self.split_pairs.get(css_property)
        if longhands is not None and value is not None:
            pair = _split_pair(css_property, value)
            if pair is not None:
                return [(longhands[0], pair[0]), (longhands[1], pair[1])]

        return passthrough(css_property, value)
