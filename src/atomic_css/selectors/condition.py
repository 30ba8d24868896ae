"""Parsing of combined condition selectors such as ``@media (...):hover``."""

import re
from typing import List, Optional, Tuple

_AT_RULE_SPLIT_RE = re.compile(r"(?=@)")


def parse_combined(selector: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Split a condition string into ``(pseudo_part, at_rule_part)``.

    At-rule first strings are scanned backward for the last ``)`` that is
    directly followed by a pseudo selector, because at-rule bodies contain
    parentheses of their own. Without such a ``)`` the whole string is the
    at-rule. Pseudo first strings never contain ``@``, so
    they are split at the first ``@``.

    Unbalanced parentheses are not detected and may split at an
    unexpected position.
    """
    if not selector:
        return None, None

    if selector.startswith("@"):
        return _split_at_rule_first(selector)
    return _split_pseudo_first(selector)


def _split_at_rule_first(selector: str) -> Tuple[Optional[str], Optional[str]]:
    pos = selector.rfind(")")
    while pos != -1:
        after = selector[pos + 1 :]
        if after.startswith(":"):
            return after, selector[: pos + 1]
        pos = selector.rfind(")", 0, pos)
    return None, selector


def _split_pseudo_first(selector: str) -> Tuple[Optional[str], Optional[str]]:
    index = selector.find("@")
    if index == -1:
        return selector, None
    return selector[:index] or None, selector[index:]


def split_at_rules(at_rule: Optional[str]) -> List[str]:
    """Split a concatenated at-rule chain such as ``@media (a)@supports (b)``."""
    if not at_rule:
        return []
    return [part for part in _AT_RULE_SPLIT_RE.split(at_rule) if part]
