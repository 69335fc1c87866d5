"""Grouped-settings flattener — unpack UI grouping containers.

Form UIs bundle related fields into nested collections ("timing",
"audioControls", "positioning", ...). The API wants them as sibling
properties on the element itself, in kebab-case:

    {"type": "video", "timing": {"fadeIn": "0.5", "zIndex": 3}}
      -> {"type": "video", "fade-in": 0.5, "z-index": 3}

Each flattener reads only the sub-keys it knows, coerces them, and returns
the properties to merge into the output element. Absent values (None or
blank strings) and unparseable numbers are left out, so a group that
resolves to nothing leaves no residue.

crop, rotate and chromaKey carry their payload one level deeper, in
cropValues / rotationValues / chromaValues. The payload is emitted as a
single structured property ("crop", "rotate", "chroma-key").
"""

import json

from .casing import kebab_key
from .coercers import (
    ZOOM_RANGE,
    Z_INDEX_RANGE,
    parse_font_size,
    process_amplitude,
    process_color,
    process_duration,
    process_loop,
    process_opacity,
    process_start,
    process_volume,
    process_wait,
    to_bool,
    to_number,
)
from .common import parse_float


# ── Value helpers ──────────────────────────────────────────────────


def _present(value) -> bool:
    """False for None and blank strings (unset form fields)."""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def _put(out: dict, key: str, value) -> None:
    if value is not None:
        out[key] = value


def _text(group: dict, key: str):
    value = group.get(key)
    return value if _present(value) else None


def _coerced(group: dict, key: str, coercer):
    """Apply coercer to group[key] when it is present."""
    value = group.get(key)
    return coercer(value) if _present(value) else None


def _flag(group: dict, key: str):
    value = group.get(key)
    return to_bool(value) if value is not None else None


def _json_object(value):
    """Decode a JSON-object field; form inputs send these as strings.

    Non-empty dicts pass through. A string that is not valid JSON is kept
    as given. Empty values yield None.
    """
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            decoded = json.loads(text)
        except json.JSONDecodeError:
            return text
        value = decoded
    if isinstance(value, dict):
        return value or None
    return value if _present(value) else None


def _dimension(value):
    """Width/height: non-positive values collapse to -1 (auto)."""
    parsed = parse_float(value)
    if parsed is None:
        return None
    return -1 if parsed <= 0 else parsed


# ── Simple groups ──────────────────────────────────────────────────


def flatten_timing(group: dict) -> dict:
    """timing -> start, duration, extra-time, fade-in, fade-out, z-index."""
    out = {}
    _put(out, "start", _coerced(group, "start", process_start))
    _put(out, "duration", _coerced(group, "duration", process_duration))
    _put(out, "extra-time", to_number(group.get("extraTime"), low=0))
    _put(out, "fade-in", to_number(group.get("fadeIn"), low=0))
    _put(out, "fade-out", to_number(group.get("fadeOut"), low=0))
    _put(out, "z-index", to_number(group.get("zIndex"), *Z_INDEX_RANGE))
    return out


def flatten_audio_controls(group: dict) -> dict:
    """audioControls -> volume, muted, seek, loop."""
    out = {}
    _put(out, "volume", _coerced(group, "volume", process_volume))
    _put(out, "muted", _flag(group, "muted"))
    _put(out, "seek", to_number(group.get("seek"), low=0))
    _put(out, "loop", _coerced(group, "loop", process_loop))
    return out


def flatten_positioning(group: dict) -> dict:
    """positioning -> position, x, y, width, height, resize."""
    out = {}
    _put(out, "position", _text(group, "position"))
    _put(out, "x", to_number(group.get("x")))
    _put(out, "y", to_number(group.get("y")))
    _put(out, "width", _dimension(group.get("width")))
    _put(out, "height", _dimension(group.get("height")))
    _put(out, "resize", _text(group, "resize"))
    return out


def flatten_visual_effects(group: dict) -> dict:
    """visualEffects -> zoom, flips, mask, pan, pan-distance, pan-crop."""
    out = {}
    _put(out, "resize", _text(group, "resize"))
    _put(out, "zoom", to_number(group.get("zoom"), *ZOOM_RANGE))
    _put(out, "flip-horizontal", _flag(group, "flipHorizontal"))
    _put(out, "flip-vertical", _flag(group, "flipVertical"))
    mask = _text(group, "mask")
    _put(out, "mask", mask.strip() if isinstance(mask, str) else mask)
    _put(out, "pan", _text(group, "pan"))
    _put(out, "pan-distance", to_number(group.get("panDistance")))
    _put(out, "pan-crop", _flag(group, "panCrop"))
    return out


def flatten_ai_generation(group: dict) -> dict:
    """aiGeneration -> prompt, model, aspect-ratio, connection, model-settings."""
    out = {}
    _put(out, "prompt", _text(group, "prompt"))
    _put(out, "model", _text(group, "model"))
    _put(out, "aspect-ratio", _text(group, "aspectRatio"))
    _put(out, "connection", _text(group, "connection"))
    _put(out, "model-settings", _json_object(group.get("modelSettings")))
    return out


def flatten_voice_settings(group: dict) -> dict:
    out = {}
    _put(out, "voice", _text(group, "voice"))
    _put(out, "model", _text(group, "model"))
    _put(out, "connection", _text(group, "connection"))
    return out


def flatten_component_settings(group: dict) -> dict:
    out = {}
    _put(out, "component", _text(group, "component"))
    _put(out, "settings", _json_object(group.get("settings")))
    return out


def flatten_html_settings(group: dict) -> dict:
    """htmlSettings -> html, src, tailwindcss, wait (0-5 s, default 2)."""
    out = {}
    _put(out, "html", _text(group, "html"))
    _put(out, "src", _text(group, "src"))
    _put(out, "tailwindcss", _flag(group, "tailwindcss"))
    _put(out, "wait", _coerced(group, "wait", process_wait))
    return out


def flatten_audiogram_settings(group: dict) -> dict:
    """audiogramSettings -> color (with '#'), opacity, amplitude."""
    out = {}
    _put(out, "color", _coerced(group, "color", process_color))
    _put(out, "opacity", _coerced(group, "opacity", process_opacity))
    _put(out, "amplitude", _coerced(group, "amplitude", process_amplitude))
    return out


# ── Composite groups ───────────────────────────────────────────────
# The payload keeps its own shape; only known fields survive.


def _composite(values, numeric: tuple[str, ...], textual: tuple[str, ...] = ()):
    if not isinstance(values, dict) or not values:
        return None
    payload = {}
    for key in numeric:
        _put(payload, key, to_number(values.get(key)))
    for key in textual:
        _put(payload, key, _text(values, key))
    return payload or None


def flatten_crop(group: dict) -> dict:
    """crop.cropValues -> crop {width, height, x, y}."""
    crop = _composite(group.get("cropValues"), ("width", "height", "x", "y"))
    return {"crop": crop} if crop else {}


def flatten_rotate(group: dict) -> dict:
    """rotate.rotationValues -> rotate {angle, speed}."""
    rotate = _composite(group.get("rotationValues"), ("angle", "speed"))
    return {"rotate": rotate} if rotate else {}


def flatten_chroma_key(group: dict) -> dict:
    """chromaKey.chromaValues -> chroma-key {color, tolerance}."""
    chroma = _composite(
        group.get("chromaValues"), ("tolerance",), textual=("color",),
    )
    return {"chroma-key": chroma} if chroma else {}


def flatten_correction(group: dict) -> dict:
    """correction -> correction {brightness, contrast, gamma, saturation}."""
    correction = _composite(
        group, ("brightness", "contrast", "gamma", "saturation"),
    )
    return {"correction": correction} if correction else {}


# ── Dispatch ───────────────────────────────────────────────────────
# Maps grouping key -> flattener. Order is the order in which groups are
# applied; a later group overwrites properties written by an earlier one.

GROUP_FLATTENERS = {
    "timing": flatten_timing,
    "audioControls": flatten_audio_controls,
    "positioning": flatten_positioning,
    "visualEffects": flatten_visual_effects,
    "crop": flatten_crop,
    "rotate": flatten_rotate,
    "chromaKey": flatten_chroma_key,
    "correction": flatten_correction,
    "aiGeneration": flatten_ai_generation,
    "voiceSettings": flatten_voice_settings,
    "componentSettings": flatten_component_settings,
    "htmlSettings": flatten_html_settings,
    "audiogramSettings": flatten_audiogram_settings,
}

# Settings groups that become a nested "settings" object instead of
# sibling properties. Consumed by the text and subtitle normalizers.
SETTINGS_GROUPS = ("textSettings", "subtitleSettings")

GROUPING_KEYS = frozenset(GROUP_FLATTENERS) | frozenset(SETTINGS_GROUPS)


def flatten_group(name: str, group) -> dict:
    """Flatten one grouping container; non-dict or empty groups yield {}."""
    if not isinstance(group, dict) or not group:
        return {}
    return GROUP_FLATTENERS[name](group)


# ── Text and subtitle settings ─────────────────────────────────────

# Renames that plain camelCase -> kebab-case conversion would get wrong.
SETTING_RENAMES = {
    "textColor": "color",
}


def flatten_text_settings(group) -> dict:
    """textSettings -> a kebab-case settings dict.

    fontSize becomes a number when it parses and is dropped otherwise.
    Every other sub-key is renamed and kept as given.
    """
    if not isinstance(group, dict):
        return {}
    settings = {}
    for key, value in group.items():
        if value is None:
            continue
        name = SETTING_RENAMES.get(key) or kebab_key(key)
        if name == "font-size":
            size = parse_font_size(value)
            if not size.parsed:
                continue
            value = size.value
        settings[name] = value
    return settings


def _keywords(value):
    if isinstance(value, str):
        value = [word.strip() for word in value.split(",")]
    if isinstance(value, list):
        words = [word for word in value if _present(word)]
        return words or None
    return None


def flatten_subtitle_settings(group) -> dict:
    """subtitleSettings -> settings; keeps keywords and replace verbatim.

    keywords may be a list or a comma-separated string. replace is a
    word -> replacement mapping, so its keys are never re-cased.
    """
    if not isinstance(group, dict):
        return {}
    rest = {k: v for k, v in group.items() if k not in ("keywords", "replace")}
    settings = flatten_text_settings(rest)
    _put(settings, "keywords", _keywords(group.get("keywords")))
    replace = _json_object(group.get("replace"))
    if isinstance(replace, dict):
        settings["replace"] = replace
    return settings
