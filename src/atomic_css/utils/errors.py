"""Custom error classes for the atomic CSS compiler."""

from typing import Optional, Dict, Any, List


class AtomicCSSError(Exception):
    """Base exception class for the atomic CSS compiler."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(AtomicCSSError):
    """Exception raised when a style declaration is malformed."""

    def __init__(
        self,
        message: str,
        property_name: Optional[str] = None,
        selector: Optional[str] = None,
        rule: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.property_name = property_name
        self.selector = selector
        self.rule = rule


class ConfigurationError(AtomicCSSError):
    """Exception raised when configuration is invalid."""

    pass


class InvalidValueError(ValidationError):
    """Exception raised when a property value cannot be converted to CSS."""

    pass


class UnknownPropertyError(ValidationError):
    """Exception raised for unknown CSS properties when configured as an error."""

    def __init__(
        self,
        message: str,
        property_name: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, property_name=property_name, details=details)
        self.suggestions = suggestions or []


class ShorthandError(ValidationError):
    """Exception raised when a disallowed shorthand property is used."""

    pass


class IncludeError(AtomicCSSError):
    """Exception raised when an include reference cannot be resolved."""

    def __init__(
        self,
        message: str,
        rule_name: str,
        owner: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.rule_name = rule_name
        self.owner = owner


class ManifestConflictError(AtomicCSSError):
    """Exception raised when a manifest key is rewritten with a different value."""

    def __init__(self, section: str, key: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"Conflicting {section} entry for '{key}': already defined with a different value",
            details,
        )
        self.section = section
        self.key = key


def format_validation_errors(errors: List[ValidationError]) -> str:
    """Format a list of validation errors into a readable string."""
    if not errors:
        return "No errors"

    formatted_errors = []
    for error in errors:
        parts = []

        if error.rule:
            parts.append(f"Rule: {error.rule}")

        if error.selector:
            parts.append(f"Selector: {error.selector}")

        if error.property_name:
            parts.append(f"Property: {error.property_name}")

        location = ", ".join(parts)
        if location:
            formatted_errors.append(f"{location}: {error.message}")
        else:
            formatted_errors.append(error.message)

    return "\n".join(formatted_errors)
