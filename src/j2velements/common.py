"""j2velements.common — shared utilities for element normalization.

Contains: number parsing with form-string semantics and path variable
resolution.
"""

import math
import re


# ── Number parsing ─────────────────────────────────────────────────
# Form fields arrive as strings ("16px", "7.5", " 3 ") or as already-typed
# values. Strings are read by their leading numeric prefix, the way the
# downstream API's own tooling reads them.

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _number_from_text(text: str) -> int | float:
    """Return an int for integral literals, a float otherwise."""
    value = float(text)
    if value.is_integer() and not any(c in text for c in ".eE"):
        return int(value)
    return value


def parse_float(value) -> int | float | None:
    """Parse a float from a string prefix or a numeric value.

    Returns None when the value is not a number: unparseable strings,
    NaN, None, lists and dicts. Booleans count as 0/1.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return None
        return value
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if match:
            return _number_from_text(match.group(1))
    return None


def parse_int(value) -> int | float | None:
    """Like parse_float, but strings are read as integers ("4.5" -> 4).

    Numeric (non-string) values are passed through unchanged. Digit
    strings too long for int() are not numbers.
    """
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if not match:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            return None
    return parse_float(value)


def clamp(value, low=None, high=None):
    """Clamp a number to [low, high]; either bound may be None."""
    if low is not None and value < low:
        return low
    if high is not None and value > high:
        return high
    return value


# ── Path utilities ─────────────────────────────────────────────────

def resolve_path_vars(text: str, paths: dict[str, str]) -> str:
    """Replace ${name} variables in a string using the paths dict."""
    def _replace(match):
        key = match.group(1)
        if key not in paths:
            raise ValueError(f"Unknown path variable: ${{{key}}}")
        return str(paths[key])
    return re.sub(r"\$\{(\w+)\}", _replace, text)


def resolve_path_vars_deep(obj, paths: dict):
    """Recursively resolve ${var} in all string values within obj."""
    if isinstance(obj, str):
        return resolve_path_vars(obj, paths)
    elif isinstance(obj, dict):
        return {k: resolve_path_vars_deep(v, paths) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [resolve_path_vars_deep(item, paths) for item in obj]
    return obj
