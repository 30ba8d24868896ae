"""Compiled style records and the shared manifest that stores them."""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

from .utils.errors import AtomicCSSError, ManifestConflictError
from .utils.logging_config import LoggerMixin

SECTIONS = ("vars", "keyframes", "position_try", "view_transitions", "classes", "themes")


@dataclass(frozen=True)
class AtomicClassEntry:
    """One property/value pair in one selector context.

    Unset entries carry no class name and produce no CSS. They only record
    that a property was explicitly cleared.
    """

    property: str
    class_name: Optional[str]
    value: Optional[str]
    priority: int
    selector_suffix: Optional[str] = None
    pseudo_element: Optional[str] = None
    at_rule: Optional[str] = None
    fallback_values: Optional[Tuple[str, ...]] = None
    unset: bool = False

    @classmethod
    def unset_entry(cls, css_property: str, priority: int = 0) -> "AtomicClassEntry":
        return cls(property=css_property, class_name=None, value=None, priority=priority, unset=True)


@dataclass(frozen=True)
class ClassTuple:
    """Render-ready projection of an atomic entry."""

    class_name: str
    property: str
    priority: int
    ltr_css: str
    rtl_css: Optional[str] = None


@dataclass(frozen=True)
class StyleClass:
    """A compiled rule as stored in the ``classes`` section."""

    key: str
    declarations: Dict[str, Any]
    atomic: Dict[str, Tuple[AtomicClassEntry, ...]]
    class_string: str
    dynamic: bool = False
    variables: Tuple[str, ...] = ()

    def entries(self) -> List[AtomicClassEntry]:
        """All atomic entries in property-key order."""
        return [entry for group in self.atomic.values() for entry in group]


class Manifest(LoggerMixin):
    """Content-addressed store of compiled entities, keyed by ``owner.name``.

    Writes are upserts: storing an identical value again is a no-op,
    storing a different value under an existing key raises
    ``ManifestConflictError``. Writes are serialized with a lock so
    independent compilation units can be compiled concurrently.

    Only ``classes`` is written by the compiler. The other sections are
    reserved for collaborators that register variables, keyframes,
    position-try fallbacks, view transitions and themes under the same
    upsert rules.
    """

    def __init__(self) -> None:
        self._sections: Dict[str, Dict[str, Any]] = {name: {} for name in SECTIONS}
        self._lock = threading.RLock()

    def _section(self, section: str) -> Dict[str, Any]:
        try:
            return self._sections[section]
        except KeyError:
            raise AtomicCSSError(
                f"Unknown manifest section '{section}'",
                details={"available": list(SECTIONS)},
            )

    def put(self, section: str, key: str, value: Any) -> None:
        with self._lock:
            entries = self._section(section)
            existing = entries.get(key)
            if existing is None:
                entries[key] = value
                self.logger.debug("Manifest entry stored", extra={"section": section, "key": key})
            elif existing != value:
                raise ManifestConflictError(section, key)

    def get(self, section: str, key: str) -> Optional[Any]:
        with self._lock:
            return self._section(section).get(key)

    def items(self, section: str) -> List[Tuple[str, Any]]:
        """Snapshot of a section in insertion order."""
        with self._lock:
            return list(self._section(section).items())

    def put_class(self, style_class: StyleClass) -> None:
        self.put("classes", style_class.key, style_class)

    def get_class(self, key: str) -> Optional[StyleClass]:
        return self.get("classes", key)

    def classes(self) -> List[StyleClass]:
        return [value for _, value in self.items("classes")]

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._sections["classes"]

    def __len__(self) -> int:
        with self._lock:
            return sum(len(entries) for entries in self._sections.values())

    def clear(self) -> None:
        with self._lock:
            for entries in self._sections.values():
                entries.clear()


@dataclass
class UsageRecord:
    """Set of rule keys that are referenced by the application."""

    _keys: Set[str] = field(default_factory=set)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def mark_used(self, key: str) -> None:
        with self._lock:
            self._keys.add(key)

    def mark_all_used(self, keys: Iterable[str]) -> None:
        with self._lock:
            self._keys.update(keys)

    def is_used(self, key: str) -> bool:
        with self._lock:
            return key in self._keys

    def keys(self) -> Set[str]:
        with self._lock:
            return set(self._keys)

    def __contains__(self, key: str) -> bool:
        return self.is_used(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.keys()))
