"""Compile orchestrator tying resolution, building, collection and rendering together."""

import time
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .autoprefixer import Autoprefixer
from .builder import AtomicClassBuilder, DeclarationProcessor, class_string
from .collector import Collector
from .config import AtomicCSSConfig
from .manifest import AtomicClassEntry, Manifest, StyleClass, UsageRecord
from .renderer import PrefixCSS, Renderer
from .resolver import IncludeResolver, qualified_key
from .shorthand import get_strategy
from .utils.errors import AtomicCSSError
from .utils.logging_config import get_logger, log_class_compiled, log_compile_failure
from .validators import PropertyValidator

RuleRef = Union[str, tuple]


def _prefixer_handles(prefix_css: PrefixCSS) -> Callable[[str], bool]:
    if isinstance(prefix_css, Autoprefixer):
        return prefix_css.handles

    def handles(css_property: str) -> bool:
        return prefix_css(css_property, "initial") != f"{css_property}:initial"

    return handles


class StyleCompiler:
    """Compiles named style rules into atomic classes and renders the stylesheet.

    Each compiler owns a manifest. Rules are written once under
    ``"<owner>.<name>"``; redefining a rule identically is a no-op and
    redefining it differently raises ``ManifestConflictError``. A rule
    that fails to compile leaves the manifest untouched.
    """

    def __init__(
        self,
        config: Optional[AtomicCSSConfig] = None,
        manifest: Optional[Manifest] = None,
        prefix_css: Optional[PrefixCSS] = None,
    ):
        self.config = config or AtomicCSSConfig()
        self.logger = get_logger("compiler")
        self.manifest = manifest if manifest is not None else Manifest()

        if prefix_css is None and self.config.css.autoprefixer:
            prefix_css = Autoprefixer()
        self.prefix_css = prefix_css

        validator = None
        if self.config.validation.validate_properties:
            validator = PropertyValidator.from_config(
                self.config.validation,
                prefix_handles=_prefixer_handles(prefix_css) if prefix_css else None,
            )
        self.validator = validator

        self.builder = AtomicClassBuilder.from_config(self.config.css)
        self.strategy = get_strategy(
            self.config.shorthand.strategy, self.config.shorthand.disallowed
        )
        self.processor = DeclarationProcessor(
            self.builder,
            self.strategy,
            last_media_query_wins=self.config.css.last_media_query_wins,
            validator=validator,
        )
        self.includes = IncludeResolver(self.manifest)
        self.collector = Collector()
        self.renderer = Renderer(use_layers=self.config.css.use_css_layers, prefix_css=prefix_css)

        self.logger.debug(
            "Style compiler initialized",
            extra={
                "strategy": self.strategy.name.value,
                "use_layers": self.config.css.use_css_layers,
            },
        )

    def define_class(self, owner: str, name: str, declarations: Dict[str, Any]) -> StyleClass:
        """Compile one rule and store it in the manifest.

        Args:
            owner: Compilation unit the rule belongs to
            name: Rule name, unique within the owner
            declarations: Property map, possibly with conditions,
                pseudo-elements and ``__include__`` references

        Returns:
            The stored StyleClass
        """
        key = qualified_key(owner, name)
        start_time = time.time()

        try:
            resolved = self.includes.resolve(declarations, owner, rule=name)
            atomic = self.processor.process(resolved, rule=key)
            style_class = StyleClass(
                key=key,
                declarations=resolved,
                atomic=atomic,
                class_string=class_string(atomic),
            )
            self.manifest.put_class(style_class)
        except AtomicCSSError as e:
            log_compile_failure(key, e.message)
            raise

        atomic_count = sum(1 for entry in style_class.entries() if not entry.unset)
        log_class_compiled(key, atomic_count, time.time() - start_time)
        return style_class

    def define_classes(self, owner: str, rules: Dict[str, Dict[str, Any]]) -> Dict[str, StyleClass]:
        """Compile the rules of one owner in order, so later rules can include earlier ones."""
        return {name: self.define_class(owner, name, declarations) for name, declarations in rules.items()}

    def define_dynamic(self, owner: str, name: str, properties: Iterable[str]) -> StyleClass:
        """Compile a rule whose values are set at runtime through custom properties.

        Each property gets the value ``var(--<prefix>-<property>)``.
        """
        key = qualified_key(owner, name)
        atomic: Dict[str, tuple] = {}
        declarations: Dict[str, Any] = {}
        variables: List[str] = []

        for prop in properties:
            entry = self.builder.build_dynamic(prop)
            atomic[prop] = (entry,)
            declarations[prop] = entry.value
            variables.append(self.builder.dynamic_variable(prop))

        style_class = StyleClass(
            key=key,
            declarations=declarations,
            atomic=atomic,
            class_string=class_string(atomic),
            dynamic=True,
            variables=tuple(variables),
        )
        self.manifest.put_class(style_class)
        log_class_compiled(key, len(atomic), 0.0)
        return style_class

    def _key(self, ref: RuleRef) -> str:
        if isinstance(ref, tuple):
            return qualified_key(ref[0], ref[1])
        return ref

    def lookup(self, ref: RuleRef) -> StyleClass:
        """Fetch a compiled rule by ``"owner.name"`` or ``(owner, name)``."""
        key = self._key(ref)
        style_class = self.manifest.get_class(key)
        if style_class is None:
            raise AtomicCSSError(f"Rule '{key}' has not been defined", details={"key": key})
        return style_class

    def class_names(self, *refs: Optional[RuleRef], usage: Optional[UsageRecord] = None) -> str:
        """Merge rules left to right and return the resulting class string.

        Later rules replace earlier ones property by property. ``None``
        refs are skipped so conditional application reads naturally.
        """
        merged: Dict[str, tuple] = {}
        for ref in refs:
            if ref is None:
                continue
            style_class = self.lookup(ref)
            if usage is not None:
                usage.mark_used(style_class.key)
            for prop_key, entries in style_class.atomic.items():
                merged.pop(prop_key, None)
                merged[prop_key] = entries
        return class_string(merged)

    def collect(self, usage: Optional[UsageRecord] = None) -> List[AtomicClassEntry]:
        return self.collector.collect(self.manifest, usage)

    def render_css(self, usage: Optional[UsageRecord] = None) -> str:
        """Render every compiled (or every used) rule to CSS text."""
        return self.renderer.render(self.collect(usage))
