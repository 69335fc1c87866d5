"""Placement validation — movie-level vs scene-level elements.

A movie request carries elements in two places: movie-level elements
that span the whole video, and per-scene elements. Each type tag is legal
in one of them or in both:

  subtitles                              movie only
  video, image, component, audiogram,
  html                                   scene only
  text, audio, voice                     both

Unknown tags are treated as scene-only.
"""

from enum import Enum

from .pipeline import NOT_AN_ARRAY_ERROR, iter_processed


class ElementContext(str, Enum):
    MOVIE = "movie"
    SCENE = "scene"
    BOTH = "both"


ELEMENT_CONTEXTS = {
    "subtitles": ElementContext.MOVIE,
    "video": ElementContext.SCENE,
    "image": ElementContext.SCENE,
    "component": ElementContext.SCENE,
    "audiogram": ElementContext.SCENE,
    "html": ElementContext.SCENE,
    "text": ElementContext.BOTH,
    "audio": ElementContext.BOTH,
    "voice": ElementContext.BOTH,
}

SUBTITLES_IN_SCENE_ERROR = (
    "Subtitles can only be added at movie level, not in individual scenes. "
    "Move this element to the movie-level elements."
)


def get_element_context(element_type) -> ElementContext:
    """Where a type tag may be placed; unknown tags are scene-only."""
    if not isinstance(element_type, str):
        return ElementContext.SCENE
    return ELEMENT_CONTEXTS.get(element_type, ElementContext.SCENE)


def validate_element_context(element_type, context) -> bool:
    """True if element_type may be placed in context ("movie" or "scene")."""
    allowed = get_element_context(element_type)
    return allowed is ElementContext.BOTH or allowed == ElementContext(context)


def _placement_error(element_type, context: ElementContext) -> str:
    if element_type == "subtitles" and context is ElementContext.SCENE:
        return SUBTITLES_IN_SCENE_ERROR
    return f"{element_type} is not allowed at {context.value} level"


def _process_for_context(elements, context: ElementContext) -> dict:
    """Normalize a batch and reject elements not legal in context.

    Normalization and placement errors share one list, in input order,
    numbered by the element's position in the input.
    """
    if not isinstance(elements, (list, tuple)):
        return {"processed": [], "errors": [NOT_AN_ARRAY_ERROR]}

    processed = []
    errors = []
    for position, element, error in iter_processed(elements):
        if error is not None:
            errors.append(f"Element {position}: {error}")
            continue
        element_type = element.get("type")
        if not validate_element_context(element_type, context):
            errors.append(
                f"Element {position}: {_placement_error(element_type, context)}"
            )
            continue
        processed.append(element)
    return {"processed": processed, "errors": errors}


def process_movie_elements(elements) -> dict:
    """Normalize movie-level elements; scene-only types are rejected."""
    return _process_for_context(elements, ElementContext.MOVIE)


def process_scene_elements(elements) -> dict:
    """Normalize scene-level elements; subtitles are rejected."""
    return _process_for_context(elements, ElementContext.SCENE)
