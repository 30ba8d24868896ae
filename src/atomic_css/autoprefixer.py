"""Vendor-prefixed declarations for properties browsers still prefix."""

from typing import Mapping, Optional, Tuple

from .tables import autoprefixer_table


class Autoprefixer:
    """Callable ``prefix_css(property, value) -> declarations`` implementation."""

    def __init__(self, table: Optional[Mapping[str, Tuple[str, ...]]] = None):
        self.table = table if table is not None else autoprefixer_table()

    def handles(self, css_property: str) -> bool:
        return css_property in self.table

    def __call__(self, css_property: str, value: str) -> str:
        """Return ``prop:value`` declarations joined by ``;``, prefixed first."""
        declarations = [f"{prefix}{css_property}:{value}" for prefix in self.table.get(css_property, ())]
        declarations.append(f"{css_property}:{value}")
        return ";".join(declarations)


def prefix_css(css_property: str, value: str) -> str:
    return Autoprefixer()(css_property, value)
