"""Fallback value lists and ``var()`` nesting."""

from dataclasses import dataclass
from typing import Any, List, Tuple

from ..utils.errors import InvalidValueError


@dataclass(frozen=True)
class FirstThatWorks:
    """Values in order of preference; the first one the browser supports wins."""

    values: Tuple[Any, ...]


def first_that_works(*values: Any) -> FirstThatWorks:
    return FirstThatWorks(tuple(values))


def is_var(value: str) -> bool:
    return value.startswith("var(") and value.endswith(")")


def _var_name(value: str) -> str:
    return value[len("var(") : -1] if is_var(value) else value


def validate_fallback_items(css_property: str, values: List[Any]) -> None:
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise InvalidValueError(
                f"A fallback list can only contain strings or numbers, got: {value!r}",
                property_name=css_property,
            )


def compose_vars(names: List[str]) -> str:
    """Nest custom properties so each wraps the ones before it.

    ``["red", "--a", "--b"]`` becomes ``var(--b,var(--a,red))``. A plain
    value is only used as the innermost fallback.
    """
    composed = ""
    for name in names:
        if not composed:
            composed = f"var({name})" if name.startswith("--") else name
        elif name.startswith("--"):
            composed = f"var({name},{composed})"
    return composed


def variable_fallbacks(values: List[str]) -> List[str]:
    """Emitted declarations for a plain fallback list, in author order.

    Lists without ``var()`` are emitted unchanged. Otherwise the run of
    variables is nested and every value before it becomes the innermost
    fallback of its own declaration.
    """
    var_indexes = [index for index, value in enumerate(values) if is_var(value)]
    if not var_indexes:
        return list(values)

    first, last = var_indexes[0], var_indexes[-1]
    before = values[:first]
    names = [_var_name(value) for value in reversed(values[first : last + 1])]
    after = values[last + 1 :]

    if not before:
        nested = [compose_vars(names)]
    else:
        nested = [compose_vars([value] + names) for value in before]
    return nested + list(after)


def _compose_var_run(values: List[str]) -> str:
    end = len(values)
    for index, value in enumerate(values):
        if not is_var(value):
            end = index + 1
            break
    return compose_vars([_var_name(value) for value in reversed(values[:end])])


def first_that_works_transform(values: List[str]) -> List[str]:
    """Emitted declarations for ``FirstThatWorks``, least preferred first."""
    var_index = next((index for index, value in enumerate(values) if is_var(value)), None)
    if var_index is None:
        return list(reversed(values))
    if var_index == 0:
        return [_compose_var_run(values)]
    preferred = list(reversed(values[:var_index]))
    return [_compose_var_run(values[var_index:])] + preferred
