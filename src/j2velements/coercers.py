"""Scalar coercers — canonical numbers and booleans from form values.

Every coercer accepts either a form string ("7.5", "16px") or an
already-typed value and returns a definite value under a named policy.
None of them raise: invalid input degrades to the policy's default.

Sentinels:
  -1  duration / width / height: auto-detect.
  -2  duration: match the containing scene.
  -1  loop: loop forever.
"""

import re
from typing import Any, NamedTuple

from .common import clamp, parse_float, parse_int


# ── Ranges accepted by the downstream API ──────────────────────────

VOLUME_RANGE = (0, 10)
OPACITY_RANGE = (0, 1)
AMPLITUDE_RANGE = (0, 10)
WAIT_RANGE = (0, 5)
ZOOM_RANGE = (-10, 10)
Z_INDEX_RANGE = (-99, 99)

DURATION_SENTINELS = {-1, -2}


# ── Timing ─────────────────────────────────────────────────────────

def process_duration(value) -> int | float:
    """Duration in seconds; -1/-2 pass through, other negatives become 0."""
    parsed = parse_float(value)
    if parsed is None:
        return -1
    if parsed in DURATION_SENTINELS:
        return parsed
    return clamp(parsed, low=0)


def process_start(value) -> int | float:
    """Start offset in seconds, never negative. Invalid -> 0."""
    parsed = parse_float(value)
    if parsed is None:
        return 0
    return clamp(parsed, low=0)


# ── Audio ──────────────────────────────────────────────────────────

def process_loop(value) -> int | float:
    """Loop count: True -> -1 (forever), False -> 1 (play once).

    Numbers and integer strings pass through, zero and negatives included.
    Anything unparseable loops forever.
    """
    if isinstance(value, bool):
        return -1 if value else 1
    parsed = parse_int(value)
    return -1 if parsed is None else parsed


def process_volume(value) -> int | float:
    """Volume clamped to [0, 10]; invalid -> 1 (unity)."""
    parsed = parse_float(value)
    if parsed is None:
        return 1
    return clamp(parsed, *VOLUME_RANGE)


# ── Layout ─────────────────────────────────────────────────────────

def process_dimension(value) -> int | float:
    """Width/height in pixels; -1 (auto) passes, other negatives -> 0."""
    parsed = parse_float(value)
    if parsed is None:
        return -1
    if parsed == -1:
        return -1
    return clamp(parsed, low=0)


# ── Fonts ──────────────────────────────────────────────────────────

_FONT_SIZE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(px|pt|em|rem)?\s*$")


class FontSize(NamedTuple):
    """A font size and whether it was parsed to a number.

    parsed=False means value is whatever the caller passed in, e.g. a
    free-form CSS keyword such as "large".
    """
    value: Any
    parsed: bool


def parse_font_size(value) -> FontSize:
    """Parse a font size, keeping unrecognized values as given."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = parse_float(value)
        if number is not None:
            return FontSize(clamp(number, low=1), True)
        return FontSize(value, False)
    if isinstance(value, str):
        match = _FONT_SIZE.match(value)
        if match:
            return FontSize(parse_float(match.group(1)), True)
    return FontSize(value, False)


def process_font_size(value):
    """Numbers clamp to >= 1; "16px"/"12pt"/"1.2em"/"1.5rem" -> magnitude.

    Other values (keywords, dicts, lists, None) are returned unchanged.
    """
    return parse_font_size(value).value


# ── Per-type settings ──────────────────────────────────────────────

def process_wait(value) -> int | float:
    """HTML render wait in seconds, [0, 5]; invalid -> 2."""
    parsed = parse_float(value)
    if parsed is None:
        return 2
    return clamp(parsed, *WAIT_RANGE)


def process_opacity(value) -> int | float:
    """Audiogram opacity, [0, 1]; invalid -> 0.5."""
    parsed = parse_float(value)
    if parsed is None:
        return 0.5
    return clamp(parsed, *OPACITY_RANGE)


def process_amplitude(value) -> int | float:
    """Audiogram amplitude, [0, 10]; invalid -> 5."""
    parsed = parse_float(value)
    if parsed is None:
        return 5
    return clamp(parsed, *AMPLITUDE_RANGE)


def process_color(value: str) -> str:
    """Ensure a hex color carries its leading '#'."""
    value = str(value)
    if not value.startswith("#"):
        return f"#{value}"
    return value


def to_number(value, low=None, high=None) -> int | float | None:
    """Parse and clamp a plain numeric field; None when unparseable."""
    parsed = parse_float(value)
    if parsed is None:
        return None
    return clamp(parsed, low, high)


def to_bool(value) -> bool:
    """Read a form boolean; "false"/"0"/"no"/"off" strings are False."""
    if isinstance(value, str):
        return value.strip().lower() not in {"", "false", "0", "no", "off"}
    return bool(value)
