"""Shared contract and helpers for shorthand strategies."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from ..config import ShorthandStrategyName
from ..resolver.conditional import DEFAULT_KEY, flatten
from ..utils.logging_config import LoggerMixin

Expansion = List[Tuple[str, Any]]

IMPORTANT = "!important"


def split_css_value(value: str) -> List[str]:
    """Split a value on top-level whitespace, keeping parenthesized groups whole."""
    parts = []
    current: List[str] = []
    depth = 0
    for char in value.strip():
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)

        if char.isspace() and depth == 0:
            if current:
                parts.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        parts.append("".join(current))
    return parts


def split_important(value: str) -> Tuple[str, bool]:
    """Strip a trailing ``!important`` flag."""
    stripped = value.strip()
    if stripped.lower().endswith(IMPORTANT):
        return stripped[: -len(IMPORTANT)].strip(), True
    return stripped, False


class ShorthandStrategy(LoggerMixin, ABC):
    """How shorthand properties are turned into declarations."""

    name: ShorthandStrategyName

    @abstractmethod
    def expand_declaration(self, css_property: str, value: Any) -> Expansion:
        """Expand one property/value pair into ``(property, value)`` pairs."""

    def expand_shorthand_conditions(
        self, css_property: str, conditions: Dict[str, Any]
    ) -> List[Tuple[str, Dict[str, Any]]]:
        """Expand every branch of a conditional value and regroup by longhand.

        Each produced property receives a flat condition map holding its
        value for every branch, in expansion order. Unset values and
        properties left without any branch are dropped.
        """
        grouped: Dict[str, Dict[str, Any]] = {}
        for selector, branch_value in flatten(conditions):
            condition = selector if selector is not None else DEFAULT_KEY
            for prop, value in self.expand_declaration(css_property, branch_value):
                branches = grouped.setdefault(prop, {})
                if value is None:
                    continue
                branches.pop(condition, None)
                branches[condition] = value

        return [(prop, branches) for prop, branches in grouped.items() if branches]


def passthrough(css_property: str, value: Any) -> Expansion:
    return [(css_property, value)]


def distribute(parts: List[Any], count: int) -> Optional[List[Any]]:
    """CSS box-model distribution of 1..count values over ``count`` sides."""
    if count == 4:
        if len(parts) == 1:
            return parts * 4
        if len(parts) == 2:
            return [parts[0], parts[1], parts[0], parts[1]]
        if len(parts) == 3:
            return [parts[0], parts[1], parts[2], parts[1]]
        if len(parts) == 4:
            return list(parts)
        return None
    if count == 2:
        if len(parts) == 1:
            return parts * 2
        if len(parts) == 2:
            return list(parts)
        return None
    return None
