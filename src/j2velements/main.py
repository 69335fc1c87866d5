"""Subcommand dispatcher for j2velements.

Usage:
    j2velements build  --manifest movie.yaml --output request.json
    j2velements types
"""

import argparse
import sys


def _print_types():
    """List supported element types and where each may be placed."""
    from .placement import get_element_context
    from .registry import get_supported_element_types

    for element_type in get_supported_element_types():
        print(f"  {element_type:<10} {get_element_context(element_type).value}")


def main(args=None):
    parser = argparse.ArgumentParser(
        prog="j2velements",
        description="Normalize movie elements and build request documents.",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("build", help="Build a request document from a YAML manifest")
    subparsers.add_parser("types", help="List supported element types and placements")

    # Parse only the subcommand name, pass the rest to the subcommand's parser.
    parsed, remaining = parser.parse_known_args(args)

    if parsed.command is None:
        parser.print_help()
        sys.exit(1)

    if parsed.command == "build":
        from .cli import main as build_main
        build_main(remaining)
    elif parsed.command == "types":
        _print_types()


if __name__ == "__main__":
    main()
