"""Conversion of declaration values and property keys to CSS text."""

import re
from typing import Any, Union

from .tables import time_properties, unitless_properties
from .utils.errors import InvalidValueError

Number = Union[int, float]

_VAR_KEY_RE = re.compile(r"^var\((--[^,()]+)\)$")

# Whitespace normalization
_COMMA_RE = re.compile(r"\s*,\s*")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")
_OPEN_PAREN_RE = re.compile(r"\(\s+")
_CLOSE_PAREN_RE = re.compile(r"\s+\)")
_IMPORTANT_RE = re.compile(r"\s+!important")

_MS_RE = re.compile(r"(\d+(?:\.\d+)?)ms\b")
_LEADING_ZERO_RE = re.compile(r"(?<![\w.])0\.(\d+)")

_LENGTH_UNITS = (
    "px|em|rem|vh|vw|vmin|vmax|ch|ex|cm|mm|in|pt|pc|dvh|dvw|lvh|lvw|svh|svw"
)
_ZERO_ANGLE_RE = re.compile(r"(?<![\w.])0(deg|grad|turn|rad)\b")
_ZERO_TIME_RE = re.compile(r"(?<![\w.])0(ms|s)\b")
_ZERO_LENGTH_RE = re.compile(rf"(?<![\w.])0({_LENGTH_UNITS})\b")
# Inside functions only zeros that end an argument are safe to strip
_ZERO_LENGTH_ARG_RE = re.compile(rf"(?<![\w.])0({_LENGTH_UNITS})(?=\s*[;,}}\)]|$)")

_CONTENT_FUNCTIONS = (
    "attr(",
    "counter(",
    "counters(",
    "url(",
    "linear-gradient(",
    "image-set(",
    "var(--",
)
_CONTENT_KEYWORDS = frozenset(
    {
        "normal",
        "none",
        "open-quote",
        "close-quote",
        "no-open-quote",
        "no-close-quote",
        "inherit",
        "initial",
        "revert",
        "revert-layer",
        "unset",
    }
)
_HYPHENATE_KEYWORDS = frozenset(
    {"auto", "inherit", "initial", "revert", "revert-layer", "unset"}
)
_IDENT_LIST_PROPERTIES = frozenset({"transition-property", "will-change"})


def to_css_property(key: Any) -> str:
    """Convert a declaration key to a dashed CSS property name.

    ``background_color`` becomes ``background-color`` and ``var(--x)``
    becomes ``--x``. Custom properties keep their underscores.
    """
    name = str(key)
    match = _VAR_KEY_RE.match(name)
    if match:
        return match.group(1)
    if name.startswith("--"):
        return name
    return name.replace("_", "-")


def format_number(value: Number) -> str:
    """Format a number with at most four decimals and no trailing zeros."""
    if isinstance(value, int):
        return str(value)

    text = f"{round(value, 4):.4f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def number_suffix(css_property: str) -> str:
    if css_property.startswith("--") or css_property in unitless_properties():
        return ""
    if css_property in time_properties():
        return "ms"
    return "px"


def _ms_to_seconds(match: "re.Match[str]") -> str:
    millis = float(match.group(1))
    if millis < 10:
        return match.group(0)
    return format_number(millis / 1000) + "s"


def normalize(value: str) -> str:
    """Apply the canonical whitespace, number and unit rewrites."""
    result = value.strip()
    result = _COMMA_RE.sub(",", result)
    result = _MULTI_SPACE_RE.sub(" ", result)
    result = _OPEN_PAREN_RE.sub("(", result)
    result = _CLOSE_PAREN_RE.sub(")", result)
    result = _IMPORTANT_RE.sub("!important", result)

    result = _MS_RE.sub(_ms_to_seconds, result)
    result = _LEADING_ZERO_RE.sub(r".\1", result)

    result = _ZERO_ANGLE_RE.sub("0deg", result)
    result = _ZERO_TIME_RE.sub("0s", result)
    if "(" in result:
        result = _ZERO_LENGTH_ARG_RE.sub("0", result)
    else:
        result = _ZERO_LENGTH_RE.sub("0", result)

    return result.replace("''", '""')


def _needs_quotes(value: str, keywords: frozenset, check_functions: bool) -> bool:
    if check_functions and any(fn in value for fn in _CONTENT_FUNCTIONS):
        return False
    if value in keywords:
        return False
    if value.count('"') >= 2 or value.count("'") >= 2:
        return False
    return True


def _normalize_ident_list(value: str) -> str:
    parts = []
    for part in value.split(","):
        part = part.strip()
        if not part.startswith("--"):
            part = part.replace("_", "-")
        parts.append(part)
    return ",".join(parts)


def _check_scalar(value: Any, css_property: str) -> None:
    if value is None:
        raise InvalidValueError(
            f"Invalid property value: `None` is not a valid CSS value for property `{css_property}`",
            property_name=css_property,
        )
    if isinstance(value, bool):
        raise InvalidValueError(
            f"Invalid property value: `{value}` is not a valid CSS value for property `{css_property}`",
            property_name=css_property,
        )
    if isinstance(value, tuple):
        raise InvalidValueError(
            "Invalid property value: tuple values are not supported for property "
            f"`{css_property}`; use a list for fallback values",
            property_name=css_property,
        )
    if not isinstance(value, (str, int, float)):
        raise InvalidValueError(
            f"Invalid property value: unsupported type `{type(value).__name__}` "
            f"for property `{css_property}`",
            property_name=css_property,
        )


def to_css(
    value: Any,
    css_property: str,
    font_size_px_to_rem: bool = False,
    font_size_root_px: float = 16.0,
) -> str:
    """Convert a scalar declaration value to normalized CSS text.

    Args:
        value: String or number from a declaration
        css_property: Dashed CSS property the value belongs to
        font_size_px_to_rem: Emit numeric ``font-size`` values in rem
        font_size_root_px: Root font size used for the rem conversion

    Raises:
        InvalidValueError: If the value is None, a bool, a tuple or another
            unsupported type
    """
    _check_scalar(value, css_property)

    if isinstance(value, (int, float)):
        if css_property == "font-size" and font_size_px_to_rem:
            text = format_number(value / font_size_root_px) + "rem"
        else:
            text = format_number(value) + number_suffix(css_property)
        return normalize(text)

    text = normalize(value)

    if css_property == "content":
        if _needs_quotes(text, _CONTENT_KEYWORDS, check_functions=True):
            text = f'"{text}"'
    elif css_property == "hyphenate-character":
        if _needs_quotes(text, _HYPHENATE_KEYWORDS, check_functions=False):
            text = f'"{text}"'
    elif css_property in _IDENT_LIST_PROPERTIES:
        text = _normalize_ident_list(text)

    return text
