"""Refuse shorthands from a deny-set, pass everything else through."""

from typing import Any, Mapping, Optional

from ..config import ShorthandStrategyName
from ..tables import disallowed_shorthands
from ..utils.errors import ShorthandError
from .base import Expansion, ShorthandStrategy, passthrough


def default_message(css_property: str) -> str:
    return f"'{css_property}' is not supported. Use longhand properties instead."


class RejectShorthands(ShorthandStrategy):
    """Raise ``ShorthandError`` for disallowed shorthands."""

    name = ShorthandStrategyName.REJECT_SHORTHANDS

    def __init__(
        self,
        disallowed: Optional[Mapping[str, Optional[str]]] = None,
        extra: Optional[Mapping[str, Optional[str]]] = None,
    ):
        deny = dict(disallowed if disallowed is not None else disallowed_shorthands())
        deny.update(extra or {})
        self.disallowed = deny

    def is_disallowed(self, css_property: str) -> bool:
        return css_property in self.disallowed

    def expand_declaration(self, css_property: str, value: Any) -> Expansion:
        if css_property in self.disallowed:
            message = self.disallowed[css_property] or default_message(css_property)
            raise ShorthandError(message, property_name=css_property)
        return passthrough(css_property, value)
