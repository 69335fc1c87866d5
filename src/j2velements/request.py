"""Request builder — assemble a movie request document from a manifest.

Output shape:
  {"width": 1920, "height": 1080, "quality": "high",
   "elements": [<movie-level elements>],
   "scenes": [{"elements": [<scene elements>]}, ...]}

Elements are normalized and placement-checked; errors are collected with
their location, never raised. Whether errors are fatal is the caller's
decision.
"""

from .casing import convert_camel_to_kebab
from .placement import process_movie_elements, process_scene_elements


MOVIE_DEFAULTS = {"width": 1920, "height": 1080, "quality": "high"}


def build_movie_request(config: dict) -> dict:
    """Build the API request document from a loaded manifest config.

    Args:
        config: Dict with "movie", "elements" and "scenes" keys, as
            returned by manifest.load_manifest.

    Returns:
        {"request": {...}, "errors": [...], "warnings": [...]}. Errors are
        prefixed "Movie: " or "Scene <n>: ". A scene that is not a
        mapping is reported and left out of the request.
    """
    errors = []
    warnings = []

    request = dict(MOVIE_DEFAULTS)
    request.update(convert_camel_to_kebab(config.get("movie") or {}))

    movie_result = process_movie_elements(config.get("elements") or [])
    errors.extend(f"Movie: {e}" for e in movie_result["errors"])
    if movie_result["processed"]:
        request["elements"] = movie_result["processed"]

    scenes = []
    for n, scene in enumerate(config.get("scenes") or [], start=1):
        if not isinstance(scene, dict):
            errors.append(f"Scene {n}: must be a mapping")
            continue
        scene_result = process_scene_elements(scene.get("elements") or [])
        errors.extend(f"Scene {n}: {e}" for e in scene_result["errors"])

        extra = {k: v for k, v in scene.items() if k != "elements"}
        built = convert_camel_to_kebab(extra)
        built["elements"] = scene_result["processed"]
        if not built["elements"]:
            warnings.append(f"Scene {n} has no elements")
        scenes.append(built)
    request["scenes"] = scenes

    if not scenes:
        warnings.append("Request has no scenes - video will be empty")

    return {"request": request, "errors": errors, "warnings": warnings}


def is_empty_request(request: dict) -> bool:
    """True when neither the movie nor any scene carries an element."""
    if request.get("elements"):
        return False
    return not any(scene.get("elements") for scene in request.get("scenes", []))
