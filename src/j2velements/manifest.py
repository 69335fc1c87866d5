"""Movie manifest loader.

Parses YAML (or JSON) manifests that declare a movie: output settings,
movie-level elements, and scenes with their own elements. Resolves
${path} variables and validates the manifest's structure. Element
contents are not checked here; that is the pipeline's job.

Manifest schema:
  movie:
    width: 1920              # optional, default 1920
    height: 1080             # optional, default 1080
    quality: high            # low | medium | high | very_high
    comment: "Product teaser"
  paths:
    media: "https://cdn.example.com/assets"
  elements:                  # movie-level (subtitles, text, audio, voice)
    - type: subtitles
      captions: "${media}/teaser.srt"
  scenes:
    - comment: Intro
      elements:
        - type: video
          src: "${media}/intro.mp4"
          timing: {duration: 5, fadeIn: 0.5}
"""

from pathlib import Path

import yaml

from .common import resolve_path_vars_deep


VALID_QUALITIES = {"low", "medium", "high", "very_high"}


def load_manifest(manifest_path: str | Path) -> dict:
    """Load and validate a movie manifest.

    Processing pipeline:
      1. Parse YAML.
      2. Validate movie settings (width, height, quality).
      3. Resolve ${path} variables in elements and scenes.
      4. Validate that elements and scenes are lists of mappings.

    Args:
        manifest_path: Path to the YAML or JSON manifest file.

    Returns:
        Config dict with "movie", "elements" and "scenes" keys.

    Raises:
        ValueError: Malformed manifest or unknown path variable.
        FileNotFoundError: Missing manifest file.
    """
    with open(manifest_path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError("Manifest: top level must be a mapping")

    movie = raw.get("movie") or {}
    if not isinstance(movie, dict):
        raise ValueError("Manifest: 'movie' must be a mapping")
    _validate_movie(movie)

    paths = raw.get("paths") or {}
    if not isinstance(paths, dict):
        raise ValueError("Manifest: 'paths' must be a mapping")

    elements = raw.get("elements") or []
    if not isinstance(elements, list):
        raise ValueError("Manifest: 'elements' must be a list")

    scenes = raw.get("scenes") or []
    if not isinstance(scenes, list):
        raise ValueError("Manifest: 'scenes' must be a list")

    resolved_scenes = []
    for i, scene in enumerate(scenes, start=1):
        if not isinstance(scene, dict):
            raise ValueError(f"Scene {i}: must be a mapping")
        scene_elements = scene.get("elements") or []
        if not isinstance(scene_elements, list):
            raise ValueError(f"Scene {i}: 'elements' must be a list")
        resolved = resolve_path_vars_deep(scene, paths)
        resolved["elements"] = resolved.get("elements") or []
        resolved_scenes.append(resolved)

    return {
        "movie": movie,
        "elements": resolve_path_vars_deep(elements, paths),
        "scenes": resolved_scenes,
    }


def _validate_movie(movie: dict) -> None:
    """Validate output settings; absent keys fall back to defaults later."""
    for key in ("width", "height"):
        value = movie.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(
                f"Manifest: movie.{key} must be a positive integer, got {value!r}"
            )

    quality = movie.get("quality")
    if quality is not None and quality not in VALID_QUALITIES:
        raise ValueError(
            f"Manifest: invalid movie.quality '{quality}'. "
            f"Valid: {sorted(VALID_QUALITIES)}"
        )
