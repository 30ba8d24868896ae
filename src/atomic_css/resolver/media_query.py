"""Rewrite sibling width media queries so the last matching query wins."""

import re
from typing import Any, Dict, List, Tuple, Union

_MIN_WIDTH_RE = re.compile(r"@media\s*\(min-width:\s*(\d+(?:\.\d+)?)(px|em|rem)\)")
_MAX_WIDTH_RE = re.compile(r"@media\s*\(max-width:\s*(\d+(?:\.\d+)?)(px|em|rem)\)")

Width = Union[int, float]


def _parse_number(text: str) -> Width:
    return float(text) if "." in text else int(text)


def format_width(value: Width) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _min_width_rewrites(queries: List[Tuple[str, Width, str]]) -> Dict[str, str]:
    ordered = sorted(queries, key=lambda q: q[1])
    rewrites = {}
    for (key, value, unit), (_, next_value, _) in zip(ordered, ordered[1:]):
        upper = next_value - 0.01
        rewrites[key] = (
            f"@media (min-width: {format_width(value)}{unit}) "
            f"and (max-width: {format_width(upper)}{unit})"
        )
    return rewrites


def _max_width_rewrites(queries: List[Tuple[str, Width, str]]) -> Dict[str, str]:
    ordered = sorted(queries, key=lambda q: -q[1])
    rewrites = {}
    for (key, value, unit), (_, next_value, _) in zip(ordered, ordered[1:]):
        lower = next_value + 0.01
        rewrites[key] = (
            f"@media (min-width: {format_width(lower)}{unit}) "
            f"and (max-width: {format_width(value)}{unit})"
        )
    return rewrites


def last_media_query_wins(conditions: Any) -> Any:
    """Bound earlier width queries by later ones in a conditional map.

    ``{"@media (min-width: 1000px)": a, "@media (min-width: 2000px)": b}``
    becomes ``{"@media (min-width: 1000px) and (max-width: 1999.99px)": a,
    "@media (min-width: 2000px)": b}``. Max-width queries get lower bounds
    the same way. Nested maps are rewritten too and key order is kept.
    """
    if not isinstance(conditions, dict):
        return conditions

    values = {key: last_media_query_wins(value) for key, value in conditions.items()}

    min_queries: List[Tuple[str, Width, str]] = []
    max_queries: List[Tuple[str, Width, str]] = []
    for key in values:
        if not isinstance(key, str) or not key.startswith("@media "):
            continue
        match = _MIN_WIDTH_RE.search(key)
        if match:
            min_queries.append((key, _parse_number(match.group(1)), match.group(2)))
            continue
        match = _MAX_WIDTH_RE.search(key)
        if match:
            max_queries.append((key, _parse_number(match.group(1)), match.group(2)))

    rewrites: Dict[str, str] = {}
    if len(min_queries) >= 2:
        rewrites.update(_min_width_rewrites(min_queries))
    if len(max_queries) >= 2:
        rewrites.update(_max_width_rewrites(max_queries))

    if not rewrites:
        return values
    return {rewrites.get(key, key): value for key, value in values.items()}
