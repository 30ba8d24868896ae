"""Conditional value maps: detection and flattening into (selector, value) pairs."""

from typing import Any, Dict, List, Optional, Tuple

from ..utils.errors import ValidationError

DEFAULT_KEY = "default"

Branch = Tuple[Optional[str], Any]


def is_condition_key(key: Any) -> bool:
    return isinstance(key, str) and (key.startswith(":") or key.startswith("@"))


def is_conditional(value: Any) -> bool:
    """A dict with a ``default`` branch, or a non-empty dict of condition keys."""
    if not isinstance(value, dict):
        return False
    if DEFAULT_KEY in value:
        return True
    return bool(value) and all(is_condition_key(key) for key in value)


def combine_selectors(parent: Optional[str], key: str) -> Optional[str]:
    """Concatenate a condition onto its parent; ``default`` adds nothing."""
    if key == DEFAULT_KEY:
        return parent
    return (parent or "") + key


def flatten(value: Any, parent: Optional[str] = None) -> List[Branch]:
    """Flatten nested conditions into ordered ``(selector, value)`` branches.

    >>> flatten({"default": "red", ":hover": {"default": "blue", "@media (x)": "green"}})
    [(None, 'red'), (':hover', 'blue'), (':hover@media (x)', 'green')]
    """
    if not is_conditional(value):
        return [(parent, value)]

    branches: List[Branch] = []
    for key, branch_value in value.items():
        branches.extend(flatten(branch_value, combine_selectors(parent, key)))
    return branches


def check_legacy_condition_keys(declarations: Dict[str, Any], rule: Optional[str] = None) -> None:
    """Reject top-level condition blocks such as ``{":hover": {...}}``."""
    for key, value in declarations.items():
        if not isinstance(key, str) or key.startswith("::"):
            continue
        if is_condition_key(key) and isinstance(value, dict):
            raise ValidationError(
                f"Condition '{key}' cannot be used as a top-level key. "
                f"Nest conditions inside properties instead, e.g. "
                f"{{'color': {{'default': 'red', '{key}': 'blue'}}}}",
                selector=key,
                rule=rule,
            )
