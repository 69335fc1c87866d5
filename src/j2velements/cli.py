"""CLI for building a movie request from a manifest.

Reads a YAML manifest, normalizes and placement-checks every element,
and writes the request document as JSON.

Usage:
    # Build and write the request
    python -m j2velements.cli \
        --manifest movie.yaml --output request.json

    # Print the request to stdout, fail on any element error
    python -m j2velements.cli --manifest movie.yaml --strict

    # Validate only (no output document)
    python -m j2velements.cli --manifest movie.yaml --validate
"""

import argparse
import json
import sys
from pathlib import Path

from .manifest import load_manifest
from .request import build_movie_request, is_empty_request


def _report(result: dict) -> None:
    """Print errors and warnings, one per line."""
    for error in result["errors"]:
        print(f"  ERROR  {error}", file=sys.stderr)
    for warning in result["warnings"]:
        print(f"  WARN   {warning}", file=sys.stderr)


def _print_summary(request: dict) -> None:
    movie_elements = request.get("elements", [])
    types = ", ".join(str(e["type"]) for e in movie_elements) or "none"
    print(f"  movie: {len(movie_elements)} element(s) — {types}")
    for n, scene in enumerate(request["scenes"], start=1):
        types = ", ".join(str(e["type"]) for e in scene["elements"]) or "none"
        tag = f" [{scene['comment']}]" if scene.get("comment") else ""
        print(f"  scene {n}{tag}: {len(scene['elements'])} element(s) — {types}")


def build(
    manifest_path: str,
    output_path: str | None = None,
    strict: bool = False,
) -> int:
    """Load manifest, build the request, write it out.

    Args:
        manifest_path: Path to YAML manifest.
        output_path: Where to write the request JSON; stdout if None.
        strict: Return a non-zero status when any element was rejected.

    Returns:
        Process exit status.
    """
    config = load_manifest(manifest_path)
    result = build_movie_request(config)
    _report(result)

    request = result["request"]
    text = json.dumps(request, indent=2)
    if output_path:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        Path(output_path).write_text(text + "\n")
        print(f"Wrote request: {output_path} ({len(request['scenes'])} scenes)")
    else:
        print(text)

    if result["errors"]:
        print(f"{len(result['errors'])} element error(s)", file=sys.stderr)
        if strict:
            return 1
    return 0


# ── CLI entry point ───────────────────────────────────────────────


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Build a movie request document from a YAML manifest.",
    )
    parser.add_argument(
        "--manifest", required=True,
        help="Path to YAML (or JSON) manifest file",
    )
    parser.add_argument(
        "--output",
        help="Output JSON path (default: stdout)",
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Exit with status 1 if any element is rejected",
    )
    parser.add_argument(
        "--validate", action="store_true",
        help="Validate manifest and elements only, don't write the request",
    )
    args = parser.parse_args(args)

    if args.validate:
        config = load_manifest(args.manifest)
        result = build_movie_request(config)
        request = result["request"]
        print(f"Manifest loaded: {len(request['scenes'])} scenes")
        _print_summary(request)
        _report(result)
        if is_empty_request(request):
            print("Request is empty.")
        if result["errors"]:
            sys.exit(1)
        print("All elements valid.")
        return

    status = build(args.manifest, args.output, strict=args.strict)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
