"""Pseudo selector parsing, ordering and vendor prefixing."""

from .condition import parse_combined, split_at_rules
from .prefixer import SelectorPrefixer
from .pseudo import sort, sort_combined, split

__all__ = [
    "parse_combined",
    "split_at_rules",
    "SelectorPrefixer",
    "sort",
    "sort_combined",
    "split",
]
