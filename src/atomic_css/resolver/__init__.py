"""Declaration resolution: includes, conditional flattening and media query ordering."""

from .conditional import (
    DEFAULT_KEY,
    check_legacy_condition_keys,
    combine_selectors,
    flatten,
    is_conditional,
)
from .include import INCLUDE_KEY, IncludeResolver, normalize_refs, qualified_key
from .media_query import last_media_query_wins

__all__ = [
    "DEFAULT_KEY",
    "check_legacy_condition_keys",
    "combine_selectors",
    "flatten",
    "is_conditional",
    "INCLUDE_KEY",
    "IncludeResolver",
    "normalize_refs",
    "qualified_key",
    "last_media_query_wins",
]
