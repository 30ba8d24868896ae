"""Vendor-prefixed variants for pseudo selectors browsers spell differently."""

import re
from typing import Mapping, Optional, Tuple

from ..tables import selector_prefixes


class SelectorPrefixer:
    """Expands the first prefixed pseudo selector into a comma-separated list."""

    def __init__(self, table: Optional[Mapping[str, Tuple[str, ...]]] = None):
        self.table = table if table is not None else selector_prefixes()
        keys = sorted(self.table, key=len, reverse=True)
        self._pattern = (
            re.compile("|".join(re.escape(key) for key in keys)) if keys else None
        )

    def needs_prefix(self, selector: str) -> bool:
        return bool(self._pattern and self._pattern.search(selector))

    def prefix(self, selector: str) -> str:
        """Expand the first matching pseudo selector.

        ``.x::placeholder`` becomes
        ``.x::-webkit-input-placeholder, .x::-moz-placeholder, ...,
        .x::placeholder``. Selectors without a match are returned unchanged.
        """
        if self._pattern is None:
            return selector

        match = self._pattern.search(selector)
        if match is None:
            return selector

        head = selector[: match.start()]
        tail = selector[match.end() :]
        return ", ".join(head + variant + tail for variant in self.table[match.group(0)])
