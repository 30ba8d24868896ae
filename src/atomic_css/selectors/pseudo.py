"""Splitting and canonical ordering of pseudo selectors.

Pseudo-elements (``::before``) are fixed separators. Runs of pseudo-classes
between them are sorted, ``default`` first and the rest lexicographically.
Selectors with functional pseudo-classes such as ``:where(...)`` are never
reordered.
"""

import re
from typing import List, Optional

_PLACEHOLDER = "\x00\x00"
_ELEMENT_SPLIT_RE = re.compile(r"^(::[\w-]+)(.*)$", re.DOTALL)


def is_element(pseudo: str) -> bool:
    return pseudo.startswith("::")


def split(combined: str) -> List[str]:
    """Split ``":hover:active"`` into ``[":hover", ":active"]``, keeping ``::`` intact."""
    parts = []
    for part in combined.replace("::", _PLACEHOLDER).split(":"):
        if not part:
            continue
        part = part.replace(_PLACEHOLDER, "::")
        parts.append(part if part.startswith("::") else ":" + part)
    return parts


def _sort_key(pseudo: str):
    return (pseudo != "default", pseudo)


def sort(pseudos: List[str]) -> List[str]:
    """Sort pseudo-class runs while pseudo-elements keep their positions."""
    if len(pseudos) < 2:
        return list(pseudos)

    result: List[str] = []
    run: List[str] = []
    for pseudo in pseudos:
        if is_element(pseudo):
            result.extend(sorted(run, key=_sort_key))
            run = []
            result.append(pseudo)
        else:
            run.append(pseudo)
    result.extend(sorted(run, key=_sort_key))
    return result


def _sort_classes_after_element(rest: str) -> str:
    pseudos = split(rest)
    elements = [p for p in pseudos if is_element(p)]
    classes = sorted((p for p in pseudos if not is_element(p)), key=_sort_key)
    return "".join(classes + elements)


def sort_combined(combined: Optional[str]) -> Optional[str]:
    """Canonical order for a concatenated pseudo selector string."""
    if not combined:
        return combined

    if "(" in combined:
        return combined

    if combined.startswith("::"):
        match = _ELEMENT_SPLIT_RE.match(combined)
        if match and match.group(2):
            return match.group(1) + _sort_classes_after_element(match.group(2))
        return combined

    return "".join(sort(split(combined)))
