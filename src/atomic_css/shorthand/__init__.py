"""Shorthand property strategies."""

from typing import Mapping, Optional, Union

from ..config import ShorthandStrategyName
from ..utils.errors import ConfigurationError
from .base import ShorthandStrategy, split_css_value, split_important
from .expand import ExpandToLonghands
from .keep import KeepShorthands
from .reject import RejectShorthands


def get_strategy(
    name: Union[ShorthandStrategyName, str] = ShorthandStrategyName.KEEP_SHORTHANDS,
    disallowed: Optional[Mapping[str, Optional[str]]] = None,
) -> ShorthandStrategy:
    """Instantiate the strategy selected by name.

    Args:
        name: Strategy name or enum member
        disallowed: Extra deny-set entries for ``reject_shorthands``
    """
    try:
        strategy_name = ShorthandStrategyName(name)
    except ValueError:
        valid = ", ".join(member.value for member in ShorthandStrategyName)
        raise ConfigurationError(
            f"Unknown shorthand strategy '{name}'. Valid strategies: {valid}"
        )

    if strategy_name is ShorthandStrategyName.EXPAND_TO_LONGHANDS:
        return ExpandToLonghands()
    if strategy_name is ShorthandStrategyName.REJECT_SHORTHANDS:
        return RejectShorthands(extra=disallowed)
    return KeepShorthands()


__all__ = [
    "ShorthandStrategy",
    "ExpandToLonghands",
    "KeepShorthands",
    "RejectShorthands",
    "get_strategy",
    "split_css_value",
    "split_important",
]
