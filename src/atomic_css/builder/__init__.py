"""Atomic class construction."""

from .builder import AtomicClassBuilder, DeclarationProcessor, class_string
from .fallback import (
    FirstThatWorks,
    compose_vars,
    first_that_works,
    first_that_works_transform,
    variable_fallbacks,
)

__all__ = [
    "AtomicClassBuilder",
    "DeclarationProcessor",
    "class_string",
    "FirstThatWorks",
    "compose_vars",
    "first_that_works",
    "first_that_works_transform",
    "variable_fallbacks",
]
