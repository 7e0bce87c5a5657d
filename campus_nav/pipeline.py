"""Command-line entry point for the Campus Navigator.

Usage:
    python -m campus_nav.pipeline "Main Library" "Student Center"
    python -m campus_nav.pipeline library gym --accessible-only

The pipeline wires the default container, asks the route finder for a
walking route and prints either the formatted route or the reason no
route could be found.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import AppConfig, DataConfig, get_config
from .container import Container
from .domain.errors import DataSourceError
from .services import RouteFinderService


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.observability.level.upper(),
        format=config.observability.format,
    )


def solve_route(
    finder: RouteFinderService,
    source: str,
    destination: str,
    accessible_only: bool = False,
) -> tuple[bool, str]:
    """Run the route finder and return (success, message to print)."""
    route, error = finder.find_path_with_reason(source, destination, accessible_only)
    if route is None:
        return False, error or "No route found."
    return True, finder.format_result(route)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="campus-nav",
        description="Walking directions between campus locations.",
    )
    parser.add_argument("source", help="Where you start (name or id)")
    parser.add_argument("destination", help="Where you want to go (name or id)")
    parser.add_argument(
        "--accessible-only",
        action="store_true",
        help="Only use wheelchair-accessible pathways",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding locations.json and pathways.json",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = get_config()
    if args.data_dir is not None:
        config = config.model_copy(update={"data": DataConfig(data_dir=args.data_dir)})

    configure_logging(config)

    finder: RouteFinderService = Container.create_default(config).resolve(
        RouteFinderService
    )
    try:
        ok, message = solve_route(
            finder, args.source, args.destination, args.accessible_only
        )
    except DataSourceError as e:
        logging.getLogger(__name__).error(
            "Campus data unavailable", extra={"file_path": e.file_path}
        )
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(message)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
