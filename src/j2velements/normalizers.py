"""Per-type element normalizers.

Each normalizer takes one raw element dict (as authored in a form or in
raw JSON) and returns a new, API-ready dict. The input is never modified.

Processing order, shared by all types:
  1. Plain top-level fields: drop unset values, coerce flat timing/audio
     scalars, convert remaining camelCase keys to kebab-case.
  2. Grouping containers: flatten each into sibling properties. Group
     values win over flat values of the same name.
  3. Type-specific steps (settings object, required fields).
"""

from .casing import convert_camel_to_kebab, kebab_key
from .coercers import (
    process_color,
    process_duration,
    process_loop,
    process_start,
    process_volume,
)
from .common import parse_float, parse_int
from .flatten import (
    GROUP_FLATTENERS,
    GROUPING_KEYS,
    flatten_group,
    flatten_subtitle_settings,
    flatten_text_settings,
)


# ── Flat (ungrouped) fields ────────────────────────────────────────
# Raw JSON input may carry timing and audio fields directly on the
# element. They are coerced only when they hold a usable value;
# anything else is passed on unchanged.


def _flat_duration(value):
    return process_duration(value) if parse_float(value) is not None else value


def _flat_start(value):
    return process_start(value) if parse_float(value) is not None else value


def _flat_volume(value):
    return process_volume(value) if parse_float(value) is not None else value


def _flat_loop(value):
    if isinstance(value, bool) or parse_int(value) is not None:
        return process_loop(value)
    return value


FLAT_COERCERS = {
    "duration": _flat_duration,
    "start": _flat_start,
    "volume": _flat_volume,
    "loop": _flat_loop,
}


def _normalize_common(element: dict) -> dict:
    """Steps 1 and 2 of the processing order (see module docstring)."""
    processed = {}

    for key, value in element.items():
        if key == "crop" and isinstance(value, bool):
            # Legacy boolean crop: cover crops to fill, contain letterboxes.
            processed["resize"] = "cover" if value else "contain"
            continue
        if key in GROUPING_KEYS or value is None:
            continue
        if key in FLAT_COERCERS:
            processed[key] = FLAT_COERCERS[key](value)
        else:
            processed[kebab_key(key)] = convert_camel_to_kebab(value)

    for name in GROUP_FLATTENERS:
        if name in element:
            processed.update(flatten_group(name, element[name]))

    return processed


def _merge_settings(processed: dict, settings: dict) -> None:
    """Merge flattened settings over any top-level settings object."""
    existing = processed.get("settings")
    merged = dict(existing) if isinstance(existing, dict) else {}
    merged.update(settings)
    if merged:
        processed["settings"] = merged
    else:
        processed.pop("settings", None)


# ── Normalizers ────────────────────────────────────────────────────


def process_text_element(element: dict) -> dict:
    """Normalize a text element.

    textSettings becomes a single nested "settings" dict with kebab-case
    keys (fontFamily -> font-family, textColor -> color, ...). fontSize
    is made numeric when it parses and dropped when it does not. When no
    setting survives, the element carries no "settings" key at all.
    """
    processed = _normalize_common(element)
    _merge_settings(processed, flatten_text_settings(element.get("textSettings")))
    return processed


def process_subtitle_element(element: dict) -> dict:
    """Normalize a subtitles element.

    Same as text, from subtitleSettings, with keywords and replace carried
    into settings verbatim when non-empty. captions (a URL or inline
    subtitle text) is passed through untouched.
    """
    processed = _normalize_common(element)
    _merge_settings(
        processed, flatten_subtitle_settings(element.get("subtitleSettings")),
    )
    return processed


def process_basic_element(element: dict) -> dict:
    """Normalize video, audio, image, voice, component, audiogram, html.

    Applies every grouping container present (timing, audioControls,
    positioning, visualEffects, crop, rotate, chromaKey, correction,
    aiGeneration, voiceSettings, componentSettings, htmlSettings,
    audiogramSettings).

    Raises:
        ValueError: Component element without a component ID.
    """
    processed = _normalize_common(element)

    element_type = processed.get("type")
    if element_type == "component" and not processed.get("component"):
        raise ValueError("Component elements require a component ID")

    if element_type == "audiogram" and isinstance(processed.get("color"), str):
        if processed["color"]:
            processed["color"] = process_color(processed["color"])

    return processed
