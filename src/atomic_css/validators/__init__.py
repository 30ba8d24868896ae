"""Validators for style declarations."""

from .property_validator import PropertyIssue, PropertyValidator

__all__ = ["PropertyIssue", "PropertyValidator"]
