"""Rendering of atomic entries to CSS text."""

import time
from itertools import groupby
from typing import Callable, Optional, Sequence, Tuple, Union

from .manifest import AtomicClassEntry, ClassTuple
from .rtl import generate_ltr, generate_rtl
from .selectors.condition import split_at_rules
from .selectors.prefixer import SelectorPrefixer
from .selectors.pseudo import sort_combined
from .utils.logging_config import LoggerMixin, log_render_result

PrefixCSS = Callable[[str, str], str]

SPECIFICITY_BUMP = ":not(#\\#)"
RTL_SELECTOR_PREFIX = 'html[dir="rtl"] '
RTL_SEPARATOR = "\n\n/* RTL Overrides */\n"


def wrap_at_rules(rule: str, at_rule: Optional[str]) -> str:
    """Nest a rule inside its at-rules, the first at-rule outermost."""
    for part in reversed(split_at_rules(at_rule)):
        rule = f"{part}{{{rule}}}"
    return rule


class RuleGenerator:
    """Builds the LTR and RTL rule text for one atomic entry."""

    def __init__(
        self,
        use_layers: bool = False,
        prefix_css: Optional[PrefixCSS] = None,
        prefixer: Optional[SelectorPrefixer] = None,
    ):
        self.use_layers = use_layers
        self.prefix_css = prefix_css
        self.prefixer = prefixer or SelectorPrefixer()

    def selector(self, entry: AtomicClassEntry) -> str:
        if entry.pseudo_element:
            suffix = sort_combined(entry.pseudo_element) or ""
        else:
            suffix = sort_combined(entry.selector_suffix) or ""

        base = f".{entry.class_name}"
        if entry.at_rule or entry.selector_suffix:
            if self.use_layers:
                base = f"{base}.{entry.class_name}"
            else:
                base = base + SPECIFICITY_BUMP

        return self.prefixer.prefix(base + suffix)

    def _declaration(self, css_property: str, value: str) -> str:
        if self.prefix_css is not None:
            return self.prefix_css(css_property, value)
        return f"{css_property}:{value}"

    def body(self, declarations: Sequence[Tuple[str, str]]) -> str:
        return ";".join(self._declaration(prop, value) for prop, value in declarations)

    def generate(self, entry: AtomicClassEntry) -> ClassTuple:
        values = entry.fallback_values or (entry.value,)
        selector = self.selector(entry)

        ltr = [generate_ltr(entry.property, value) for value in values]
        ltr_css = wrap_at_rules(f"{selector}{{{self.body(ltr)}}}", entry.at_rule)

        rtl_css = None
        if generate_rtl(entry.property, entry.value) is not None:
            rtl = [
                generate_rtl(entry.property, value) or generate_ltr(entry.property, value)
                for value in values
            ]
            rtl_selector = ", ".join(
                RTL_SELECTOR_PREFIX + part for part in selector.split(", ")
            )
            rtl_css = wrap_at_rules(f"{rtl_selector}{{{self.body(rtl)}}}", entry.at_rule)

        return ClassTuple(
            class_name=entry.class_name,
            property=entry.property,
            priority=entry.priority,
            ltr_css=ltr_css,
            rtl_css=rtl_css,
        )


class Renderer(LoggerMixin):
    """Pure function from sorted entries to the final stylesheet text."""

    def __init__(
        self,
        use_layers: bool = False,
        prefix_css: Optional[PrefixCSS] = None,
        prefixer: Optional[SelectorPrefixer] = None,
    ):
        self.use_layers = use_layers
        self.rule_generator = RuleGenerator(use_layers, prefix_css, prefixer)

    def render(self, entries: Sequence[Union[AtomicClassEntry, ClassTuple]]) -> str:
        """Render entries in the given order.

        All LTR rules come first. RTL overrides follow after a single
        separator comment so they always win over their LTR counterparts.
        With layers enabled, entries are grouped by ``priority // 1000``
        into ``@layer priorityN`` blocks.
        """
        start_time = time.time()

        tuples = [
            entry if isinstance(entry, ClassTuple) else self.rule_generator.generate(entry)
            for entry in entries
        ]
        if not tuples:
            return ""

        layers = None
        if self.use_layers:
            css, layers = self._render_layers(tuples)
        else:
            css = self._render_rules(tuples) + "\n"

        log_render_result(
            rule_count=len(tuples),
            rtl_count=sum(1 for t in tuples if t.rtl_css),
            css_length=len(css),
            duration=time.time() - start_time,
            layers=layers,
        )
        return css

    def _render_rules(self, tuples: Sequence[ClassTuple]) -> str:
        ltr_css = "\n".join(t.ltr_css for t in tuples)
        rtl_css = "\n".join(t.rtl_css for t in tuples if t.rtl_css)
        if not rtl_css:
            return ltr_css
        return ltr_css + RTL_SEPARATOR + rtl_css

    def _render_layers(self, tuples: Sequence[ClassTuple]) -> Tuple[str, int]:
        ordered = sorted(tuples, key=lambda t: t.priority // 1000)
        groups = [list(group) for _, group in groupby(ordered, key=lambda t: t.priority // 1000)]

        names = [f"priority{index}" for index in range(1, len(groups) + 1)]
        header = f"@layer {', '.join(names)};\n"
        blocks = "\n".join(
            f"@layer {name}{{\n{self._render_rules(group)}\n}}"
            for name, group in zip(names, groups)
        )
        return header + blocks + "\n", len(groups)
