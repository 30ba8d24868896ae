"""Knowledge tables shipped as YAML files in ``atomic_css/data``.

Every table is parsed once per process and exposed as an immutable view
(``frozenset`` or ``MappingProxyType``). The compiler never hardcodes these
values; update the YAML files to change them.
"""

from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

import yaml

from .utils.errors import ConfigurationError
from .utils.logging_config import get_logger

logger = get_logger("tables")

DATA_PACKAGE = "atomic_css"
DATA_DIR = "data"

# Property category priorities
CUSTOM_PROPERTY_PRIORITY = 1
SHORTHANDS_OF_SHORTHANDS = "shorthands_of_shorthands"
SHORTHANDS_OF_LONGHANDS = "shorthands_of_longhands"
LONGHAND_LOGICAL = "longhand_logical"
LONGHAND_PHYSICAL = "longhand_physical"

CATEGORY_PRIORITIES: Mapping[str, int] = MappingProxyType(
    {
        SHORTHANDS_OF_SHORTHANDS: 1000,
        SHORTHANDS_OF_LONGHANDS: 2000,
        LONGHAND_LOGICAL: 3000,
        LONGHAND_PHYSICAL: 4000,
    }
)


@dataclass(frozen=True)
class PseudoPriorities:
    """Priority weights for pseudo selectors and at-rules."""

    pseudo_classes: Mapping[str, int]
    at_rules: Mapping[str, int]
    unknown_pseudo_class: int
    pseudo_element: int


@dataclass(frozen=True)
class ShorthandExpansion:
    """Keep-shorthands entry: the property receiving the value plus its resets."""

    value_property: str
    resets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LonghandExpansion:
    """Expand-to-longhands entry: distribution kind and target longhands."""

    kind: str
    longhands: Tuple[str, ...]


def load_data_file(name: str) -> Dict[str, Any]:
    """Parse one YAML table from the package data directory."""
    resource = resources.files(DATA_PACKAGE) / DATA_DIR / name
    try:
        with resource.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"Failed to load data table {name}: {e}", details={"table": name}
        )

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Data table {name} must be a mapping", details={"table": name}
        )

    logger.debug("Loaded data table", extra={"table": name, "entries": len(data)})
    return data


def _pairs(raw: Dict[str, Any]) -> Mapping[str, Tuple[str, str]]:
    return MappingProxyType({key: (pair[0], pair[1]) for key, pair in raw.items()})


@lru_cache(maxsize=None)
def property_categories() -> Mapping[str, str]:
    """Map each categorized property to its priority category name."""
    data = load_data_file("property_priorities.yaml")
    categories: Dict[str, str] = {}
    for category in (SHORTHANDS_OF_SHORTHANDS, SHORTHANDS_OF_LONGHANDS, LONGHAND_PHYSICAL):
        for prop in data.get(category) or []:
            categories[prop] = category
    return MappingProxyType(categories)


@lru_cache(maxsize=None)
def pseudo_priorities() -> PseudoPriorities:
    data = load_data_file("pseudo_priorities.yaml")
    return PseudoPriorities(
        pseudo_classes=MappingProxyType(dict(data.get("pseudo_classes") or {})),
        at_rules=MappingProxyType(dict(data.get("at_rules") or {})),
        unknown_pseudo_class=int(data.get("unknown_pseudo_class", 40)),
        pseudo_element=int(data.get("pseudo_element", 5000)),
    )


@lru_cache(maxsize=None)
def unitless_properties() -> FrozenSet[str]:
    return frozenset(load_data_file("units.yaml").get("unitless") or [])


@lru_cache(maxsize=None)
def time_properties() -> FrozenSet[str]:
    return frozenset(load_data_file("units.yaml").get("time") or [])


@lru_cache(maxsize=None)
def _logical_data() -> Dict[str, Any]:
    return load_data_file("logical.yaml")


@lru_cache(maxsize=None)
def logical_properties() -> Mapping[str, Tuple[str, str]]:
    """Direction-relative property -> (ltr property, rtl property)."""
    return _pairs(_logical_data().get("properties") or {})


@lru_cache(maxsize=None)
def logical_values() -> Mapping[str, Tuple[str, str]]:
    """Direction-relative keyword -> (ltr keyword, rtl keyword)."""
    return _pairs(_logical_data().get("values") or {})


@lru_cache(maxsize=None)
def value_flip_properties() -> FrozenSet[str]:
    """Properties whose keyword values are flipped for RTL."""
    return frozenset(_logical_data().get("value_properties") or [])


@lru_cache(maxsize=None)
def background_position_values() -> Mapping[str, Tuple[str, str]]:
    return _pairs(_logical_data().get("background_position") or {})


@lru_cache(maxsize=None)
def _shorthand_data() -> Dict[str, Any]:
    return load_data_file("shorthands.yaml")


@lru_cache(maxsize=None)
def keep_shorthand_expansions() -> Mapping[str, ShorthandExpansion]:
    expansions = {}
    for prop, entry in (_shorthand_data().get("keep_shorthands") or {}).items():
        expansions[prop] = ShorthandExpansion(
            value_property=entry["value"],
            resets=tuple(entry.get("resets") or ()),
        )
    return MappingProxyType(expansions)


@lru_cache(maxsize=None)
def split_pair_expansions() -> Mapping[str, Tuple[str, str]]:
    """Shorthands whose value is split between two longhands by keep-shorthands."""
    return _pairs(_shorthand_data().get("split_pairs") or {})


@lru_cache(maxsize=None)
def longhand_expansions() -> Mapping[str, LonghandExpansion]:
    expansions = {}
    for prop, entry in (_shorthand_data().get("expand_to_longhands") or {}).items():
        expansions[prop] = LonghandExpansion(
            kind=entry["kind"], longhands=tuple(entry["longhands"])
        )
    return MappingProxyType(expansions)


@lru_cache(maxsize=None)
def disallowed_shorthands() -> Mapping[str, Optional[str]]:
    """Shorthands refused by reject-shorthands, with optional custom messages."""
    return MappingProxyType(dict(load_data_file("disallowed_shorthands.yaml")))


@lru_cache(maxsize=None)
def selector_prefixes() -> Mapping[str, Tuple[str, ...]]:
    data = load_data_file("selector_prefixes.yaml")
    return MappingProxyType({key: tuple(variants) for key, variants in data.items()})


@lru_cache(maxsize=None)
def known_properties() -> FrozenSet[str]:
    data = load_data_file("css_properties.yaml")
    known = set()
    for group in ("standard", "logical_aliases", "vendor"):
        known.update(data.get(group) or [])
    return frozenset(known)


@lru_cache(maxsize=None)
def autoprefixer_table() -> Mapping[str, Tuple[str, ...]]:
    data = load_data_file("autoprefixer.yaml")
    return MappingProxyType({prop: tuple(prefixes) for prop, prefixes in data.items()})
