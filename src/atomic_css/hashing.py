"""Stable class-name hashing.

Class names are MurmurHash2 (32-bit, seed 1) digests of the canonical
property/value/condition string, encoded in lowercase base36, the same scheme StyleX uses.
"""

from typing import List, Optional

from .selectors.pseudo import sort as sort_pseudos
from .selectors.pseudo import split as split_pseudos
from .utils.cache import cached, hash_cache

SEED = 1
_M = 0x5BD1E995
_MASK = 0xFFFFFFFF
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def murmurhash2_32(text: str, seed: int = 0) -> int:
    """MurmurHash2 32-bit over the UTF-8 bytes of ``text``."""
    data = text.encode("utf-8")
    length = len(data)
    h = (seed ^ length) & _MASK

    index = 0
    while length - index >= 4:
        k = (
            data[index]
            | (data[index + 1] << 8)
            | (data[index + 2] << 16)
            | (data[index + 3] << 24)
        )
        k = (k * _M) & _MASK
        k ^= k >> 24
        k = (k * _M) & _MASK

        h = ((h * _M) & _MASK) ^ k
        index += 4

    remaining = length - index
    if remaining == 3:
        h ^= data[index + 2] << 16
    if remaining >= 2:
        h ^= data[index + 1] << 8
    if remaining >= 1:
        h ^= data[index]
        h = (h * _M) & _MASK

    h ^= h >> 13
    h = (h * _M) & _MASK
    h ^= h >> 15
    return h


def to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


@cached(hash_cache, key_func=lambda text: text)
def create_hash(text: str) -> str:
    """Hash a string to its base36 digest."""
    return to_base36(murmurhash2_32(text, SEED))


def class_name(
    css_property: str,
    value: str,
    pseudos: List[str],
    at_rules: List[str],
    prefix: str = "x",
    debug: bool = False,
) -> str:
    """Build a class name from a property, a CSS value and its conditions."""
    modifier = "".join(sort_pseudos(pseudos)) + "".join(sorted(at_rules))
    digest = create_hash("<>" + css_property + value + (modifier or "null"))

    if debug:
        return f"{css_property}-{prefix}{digest}"
    return prefix + digest


def atomic_class_name(
    css_property: str,
    value: str,
    pseudo_element: Optional[str] = None,
    selector_suffix: Optional[str] = None,
    at_rule: Optional[str] = None,
    prefix: str = "x",
    debug: bool = False,
) -> str:
    """Class name for one atomic declaration in its selector context."""
    pseudos: List[str] = []
    for part in (pseudo_element, selector_suffix):
        if part:
            pseudos.extend(split_pseudos(part))

    at_rules = [at_rule] if at_rule else []
    return class_name(css_property, value, pseudos, at_rules, prefix=prefix, debug=debug)
