"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import asyncio
import functools
import http.server
import logging
import sys
from pathlib import Path

from nature_near import __version__
from nature_near.config import get_settings
from nature_near.datasources import geocoding
from nature_near.errors import LocationNotFound
from nature_near.flows.explore import explore, open_history
from nature_near.history import format_time_ago, render_community_feed


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="nature-near",
        description="Discover earthquakes, wildlife, parks, fossils and heritage sites near a place",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    explore_parser = subparsers.add_parser("explore", help="Explore a ZIP code or place name")
    explore_parser.add_argument("query", nargs="+", help='ZIP code or place, e.g. 87501 or "Santa Fe, NM"')

    locate_parser = subparsers.add_parser("locate", help="Explore around a coordinate")
    locate_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    locate_parser.add_argument("--lon", type=float, required=True, help="Longitude")

    suggest_parser = subparsers.add_parser("suggest", help="Autocomplete a place name")
    suggest_parser.add_argument("query", nargs="+", help="Partial place name")

    history_parser = subparsers.add_parser("history", help="Show recent searches")
    history_parser.add_argument("--clear", action="store_true", help="Erase recent searches")
    history_parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    subparsers.add_parser("info", help="Show application info")

    serve_parser = subparsers.add_parser("serve", help="Serve the dashboard locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: serve_port from settings)",
    )

    return parser


def configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug or get_settings().debug else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _run_explore(**kwargs: object) -> int:
    try:
        result = asyncio.run(explore(**kwargs))  # type: ignore[arg-type]
    except LocationNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Open {result['output']} to see the map for {result['label']}.")
    return 0


def cmd_explore(args: argparse.Namespace) -> int:
    """Handle the 'explore' command."""
    return _run_explore(query=" ".join(args.query))


def cmd_locate(args: argparse.Namespace) -> int:
    """Handle the 'locate' command: the device-location path."""
    return _run_explore(lat=args.lat, lon=args.lon)


def cmd_suggest(args: argparse.Namespace) -> int:
    """Handle the 'suggest' command."""
    suggestions = geocoding.suggest(" ".join(args.query))
    if not suggestions:
        print("No suggestions.")
        return 0
    for s in suggestions:
        print(f"{s.name}  ({s.coordinate.latitude:.4f}, {s.coordinate.longitude:.4f})")
    return 0


def cmd_history(args: argparse.Namespace) -> int:
    """Handle the 'history' command."""
    history = open_history()

    if args.clear:
        if not args.yes:
            answer = input("Clear all recent searches? [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                print("Cancelled.")
                return 0
        history.clear()
        print("Recent searches cleared.")
        return 0

    searches = history.searches()
    if not searches:
        print("No recent searches yet. Start exploring!")
    for record in searches:
        print(f"{record.display_name}  ({format_time_ago(record.timestamp)})")

    print("\nWhat other explorers are finding:")
    for entry in render_community_feed():
        print(f"  {entry.display_name} - {entry.activity}, {entry.ago} ago")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Storage: {settings.storage_dir}")
    print(f"Site: {settings.site_dir}")
    print(f"eBird key configured: {bool(settings.ebird_api_key)}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built dashboard locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.serve_port
    site_dir = Path(settings.site_dir)

    if not site_dir.exists():
        print("No site directory found. Run 'nature-near explore' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug)

    commands = {
        "explore": cmd_explore,
        "locate": cmd_locate,
        "suggest": cmd_suggest,
        "history": cmd_history,
        "info": cmd_info,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
