"""Construction of atomic class entries from declarations."""

from typing import Any, Callable, Dict, List, Optional, Tuple

from ..config import CSSConfig
from ..hashing import atomic_class_name
from ..manifest import AtomicClassEntry
from ..priority import calculate as calculate_priority
from ..resolver.conditional import check_legacy_condition_keys, flatten, is_conditional
from ..resolver.media_query import last_media_query_wins
from ..selectors.condition import parse_combined
from ..shorthand.base import ShorthandStrategy
from ..utils.errors import ValidationError
from ..utils.logging_config import LoggerMixin
from ..values import to_css, to_css_property
from .fallback import (
    FirstThatWorks,
    first_that_works_transform,
    validate_fallback_items,
    variable_fallbacks,
)

AtomicMap = Dict[str, Tuple[AtomicClassEntry, ...]]


class AtomicClassBuilder:
    """Turns one property/value pair in a selector context into an entry."""

    def __init__(
        self,
        class_name_prefix: str = "x",
        debug_class_names: bool = False,
        font_size_px_to_rem: bool = False,
        font_size_root_px: float = 16.0,
    ):
        self.class_name_prefix = class_name_prefix
        self.debug_class_names = debug_class_names
        self.font_size_px_to_rem = font_size_px_to_rem
        self.font_size_root_px = font_size_root_px

    @classmethod
    def from_config(cls, config: CSSConfig) -> "AtomicClassBuilder":
        return cls(
            class_name_prefix=config.class_name_prefix,
            debug_class_names=config.debug_class_names,
            font_size_px_to_rem=config.font_size_px_to_rem,
            font_size_root_px=config.font_size_root_px,
        )

    def format_value(self, css_property: str, value: Any) -> str:
        return to_css(
            value,
            css_property,
            font_size_px_to_rem=self.font_size_px_to_rem,
            font_size_root_px=self.font_size_root_px,
        )

    def build(
        self,
        css_property: str,
        value: Any,
        pseudo_element: Optional[str] = None,
        selector_suffix: Optional[str] = None,
        at_rule: Optional[str] = None,
    ) -> AtomicClassEntry:
        """Build the entry for one declaration.

        ``None`` produces an unset entry. Lists are fallback values emitted
        in order, ``FirstThatWorks`` values are emitted least preferred
        first. Both hash the comma-joined normalized values.
        """
        selector = (pseudo_element or "") + (selector_suffix or "") or None
        priority = calculate_priority(css_property, selector, at_rule)

        if value is None:
            return AtomicClassEntry.unset_entry(css_property, priority)

        emitted: Optional[List[str]] = None
        if isinstance(value, FirstThatWorks):
            items = list(value.values)
            validate_fallback_items(css_property, items)
            normalized = [self.format_value(css_property, item) for item in items]
            emitted = first_that_works_transform(normalized)
            hash_value = ", ".join(normalized)
        elif isinstance(value, list):
            validate_fallback_items(css_property, value)
            normalized = [self.format_value(css_property, item) for item in value]
            emitted = variable_fallbacks(normalized)
            hash_value = ", ".join(normalized)
        else:
            hash_value = self.format_value(css_property, value)

        class_name = atomic_class_name(
            css_property,
            hash_value,
            pseudo_element=pseudo_element,
            selector_suffix=selector_suffix,
            at_rule=at_rule,
            prefix=self.class_name_prefix,
            debug=self.debug_class_names,
        )

        css_value = hash_value
        fallback_values = None
        if emitted:
            css_value = emitted[0]
            if len(emitted) > 1:
                fallback_values = tuple(emitted)

        return AtomicClassEntry(
            property=css_property,
            class_name=class_name,
            value=css_value,
            priority=priority,
            selector_suffix=selector_suffix,
            pseudo_element=pseudo_element,
            at_rule=at_rule,
            fallback_values=fallback_values,
        )

    def build_dynamic(self, css_property: str) -> AtomicClassEntry:
        """Entry whose value is supplied at runtime through a custom property."""
        return self.build(css_property, f"var({self.dynamic_variable(css_property)})")

    def dynamic_variable(self, css_property: str) -> str:
        return f"--{self.class_name_prefix}-{css_property}"


def _store(atomic: AtomicMap, key: str, entries: Tuple[AtomicClassEntry, ...]) -> None:
    # Re-inserting moves the key to the end: the last declaration wins.
    atomic.pop(key, None)
    atomic[key] = entries


class DeclarationProcessor(LoggerMixin):
    """Compiles a resolved declaration map into atomic entries per property key."""

    def __init__(
        self,
        builder: AtomicClassBuilder,
        strategy: ShorthandStrategy,
        last_media_query_wins: bool = True,
        validator: Optional[Callable[[str], Any]] = None,
    ):
        self.builder = builder
        self.strategy = strategy
        self.last_media_query_wins = last_media_query_wins
        self.validator = validator

    def process(self, declarations: Dict[str, Any], rule: Optional[str] = None) -> AtomicMap:
        check_legacy_condition_keys(declarations, rule)

        atomic: AtomicMap = {}
        for key, value in declarations.items():
            if isinstance(key, str) and key.startswith("::"):
                self._process_pseudo_element(key, value, atomic, rule)
            else:
                self._process_property(to_css_property(key), value, atomic)
        return atomic

    def _validate(self, css_property: str) -> None:
        if self.validator is not None:
            self.validator(css_property)

    def _conditions(self, value: Dict[str, Any]) -> Dict[str, Any]:
        if self.last_media_query_wins:
            return last_media_query_wins(value)
        return value

    def _process_property(self, css_property: str, value: Any, atomic: AtomicMap) -> None:
        self._validate(css_property)

        if is_conditional(value):
            for prop, conditions in self.strategy.expand_shorthand_conditions(
                css_property, self._conditions(value)
            ):
                entries = []
                for selector, branch_value in flatten(conditions):
                    if branch_value is None:
                        continue
                    pseudo, at_rule = parse_combined(selector)
                    entries.append(
                        self.builder.build(prop, branch_value, selector_suffix=pseudo, at_rule=at_rule)
                    )
                if entries:
                    _store(atomic, prop, tuple(entries))
            return

        if isinstance(value, dict):
            raise ValidationError(
                f"Invalid value for '{css_property}': nested maps must be keyed by "
                "conditions (':hover', '@media ...') or 'default'",
                property_name=css_property,
            )

        for prop, prop_value in self.strategy.expand_declaration(css_property, value):
            _store(atomic, prop, (self.builder.build(prop, prop_value),))

    def _process_pseudo_element(
        self, pseudo_element: str, declarations: Any, atomic: AtomicMap, rule: Optional[str]
    ) -> None:
        if not isinstance(declarations, dict):
            raise ValidationError(
                f"Pseudo-element '{pseudo_element}' must map to a dict of declarations",
                selector=pseudo_element,
                rule=rule,
            )

        for key, value in declarations.items():
            css_property = to_css_property(key)
            self._validate(css_property)

            if is_conditional(value):
                for prop, conditions in self.strategy.expand_shorthand_conditions(
                    css_property, self._conditions(value)
                ):
                    for selector, branch_value in flatten(conditions, parent=pseudo_element):
                        if branch_value is None:
                            continue
                        self._store_pseudo_entry(atomic, prop, branch_value, selector)
            else:
                for prop, prop_value in self.strategy.expand_declaration(css_property, value):
                    self._store_pseudo_entry(atomic, prop, prop_value, pseudo_element)

    def _store_pseudo_entry(
        self, atomic: AtomicMap, css_property: str, value: Any, selector: str
    ) -> None:
        pseudo, at_rule = parse_combined(selector)
        entry = self.builder.build(css_property, value, pseudo_element=pseudo, at_rule=at_rule)
        _store(atomic, f"{css_property}{selector}", (entry,))


def class_string(atomic: AtomicMap) -> str:
    """Space-joined class names of all set entries, in property-key order."""
    names: List[str] = []
    for entries in atomic.values():
        for entry in entries:
            if not entry.unset and entry.class_name and entry.class_name not in names:
                names.append(entry.class_name)
    return " ".join(names)
