"""Element type registry — maps each type tag to its normalizer.

The tag set is fixed; the mapping is built once at import time and is
read-only.
"""

from types import MappingProxyType
from typing import Callable

from .normalizers import (
    process_basic_element,
    process_subtitle_element,
    process_text_element,
)

Normalizer = Callable[[dict], dict]


ELEMENT_PROCESSORS: MappingProxyType = MappingProxyType({
    "video": process_basic_element,
    "audio": process_basic_element,
    "image": process_basic_element,
    "text": process_text_element,
    "voice": process_basic_element,
    "component": process_basic_element,
    "audiogram": process_basic_element,
    "html": process_basic_element,
    "subtitles": process_subtitle_element,
})


def get_processor(element_type) -> Normalizer | None:
    """Return the normalizer for a type tag, or None if unsupported."""
    if not isinstance(element_type, str):
        return None
    return ELEMENT_PROCESSORS.get(element_type)


def get_supported_element_types() -> list[str]:
    """All supported type tags, in registry order."""
    return list(ELEMENT_PROCESSORS)


def is_element_type_supported(element_type) -> bool:
    return get_processor(element_type) is not None
