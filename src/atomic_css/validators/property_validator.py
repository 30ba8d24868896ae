"""Property name validation with "did you mean" suggestions."""

import re
from dataclasses import dataclass, field
from difflib import get_close_matches
from typing import Callable, FrozenSet, List, Optional

from ..config import ValidationConfig
from ..tables import known_properties
from ..utils.errors import ConfigurationError, UnknownPropertyError
from ..utils.logging_config import LoggerMixin

LEVELS = ("warn", "error", "ignore")

_VENDOR_PREFIX_RE = re.compile(r"^-(webkit|moz|ms|o)-(.+)$")


@dataclass
class PropertyIssue:
    """Represents a problem found with a property name."""

    property_name: str
    kind: str
    message: str
    suggestions: List[str] = field(default_factory=list)


class PropertyValidator(LoggerMixin):
    """Checks property names against the known CSS properties.

    Unknown names produce a warning with up to three suggestions, or raise
    ``UnknownPropertyError`` when the level is ``error``. Vendor-prefixed
    names whose standard form is already prefixed automatically produce a
    warning. Custom properties are always accepted.
    """

    def __init__(
        self,
        unknown_property_level: str = "warn",
        vendor_prefix_level: str = "warn",
        known: Optional[FrozenSet[str]] = None,
        prefix_handles: Optional[Callable[[str], bool]] = None,
    ):
        for level in (unknown_property_level, vendor_prefix_level):
            if level not in LEVELS:
                raise ConfigurationError(
                    f"Invalid validation level '{level}'. Valid levels: {', '.join(LEVELS)}"
                )
        if vendor_prefix_level == "error":
            raise ConfigurationError("vendor_prefix_level must be 'warn' or 'ignore'")

        self.unknown_property_level = unknown_property_level
        self.vendor_prefix_level = vendor_prefix_level
        self.known = known if known is not None else known_properties()
        self.prefix_handles = prefix_handles
        self._known_sorted = sorted(self.known)

    @classmethod
    def from_config(
        cls, config: ValidationConfig, prefix_handles: Optional[Callable[[str], bool]] = None
    ) -> "PropertyValidator":
        return cls(
            unknown_property_level=config.unknown_property_level,
            vendor_prefix_level=config.vendor_prefix_level,
            prefix_handles=prefix_handles,
        )

    def is_known(self, property_name: str) -> bool:
        return property_name.startswith("--") or property_name in self.known

    def suggest(self, property_name: str) -> List[str]:
        """Up to three known properties similar to ``property_name``."""
        return get_close_matches(property_name.lower(), self._known_sorted, n=3, cutoff=0.8)

    def check_vendor_prefix(self, property_name: str) -> Optional[PropertyIssue]:
        match = _VENDOR_PREFIX_RE.match(property_name)
        if not match or self.prefix_handles is None:
            return None

        standard = match.group(2)
        if not self.prefix_handles(standard):
            return None

        return PropertyIssue(
            property_name=property_name,
            kind="vendor_prefix",
            message=(
                f"Unnecessary vendor prefix '{property_name}'. Use '{standard}' instead - "
                "prefix_css will add vendor prefixes automatically."
            ),
            suggestions=[standard],
        )

    def check_unknown(self, property_name: str) -> Optional[PropertyIssue]:
        if self.is_known(property_name):
            return None

        suggestions = self.suggest(property_name)
        message = f"Unknown CSS property '{property_name}'"
        if suggestions:
            message += f". Did you mean: {', '.join(suggestions)}?"

        return PropertyIssue(
            property_name=property_name,
            kind="unknown_property",
            message=message,
            suggestions=suggestions,
        )

    def check(self, property_name: str) -> List[PropertyIssue]:
        """Collect all issues for a property without acting on them."""
        vendor_issue = self.check_vendor_prefix(property_name)
        if vendor_issue:
            return [vendor_issue]
        unknown_issue = self.check_unknown(property_name)
        return [unknown_issue] if unknown_issue else []

    def validate(self, property_name: str) -> None:
        """Report issues for a property according to the configured levels.

        Raises:
            UnknownPropertyError: If the property is unknown and the level is
                ``error``
        """
        for issue in self.check(property_name):
            level = (
                self.vendor_prefix_level
                if issue.kind == "vendor_prefix"
                else self.unknown_property_level
            )
            if level == "ignore":
                continue
            if level == "error":
                raise UnknownPropertyError(
                    issue.message,
                    property_name=property_name,
                    suggestions=issue.suggestions,
                )
            self.logger.warning(
                issue.message,
                extra={"property": property_name, "issue": issue.kind},
            )

    __call__ = validate
