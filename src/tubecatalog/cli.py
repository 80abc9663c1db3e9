"""Command-line interface for catalog operations."""

import argparse
import logging
import sys

from . import commands
from .catalog import Catalog
from .config import DEFAULT_PAGE_FILE
from .errors import CatalogError, GenreNotFoundError
from .genre import Genre
from .logging_config import configure_logging


logger = logging.getLogger(__name__)


def genre_type(label: str) -> Genre:
    """Argparse type converting a genre label to a Genre."""
    try:
        return Genre.from_label(label)
    except GenreNotFoundError as e:
        choices = ", ".join(genre.label for genre in Genre)
        raise argparse.ArgumentTypeError(f"{e} (choose from {choices})") from None


def add_search_arguments(parser: argparse.ArgumentParser) -> None:
    """Add search filter arguments to parser.

    Args:
        parser: Argument parser to add arguments to
    """
    parser.add_argument("--title", help="Exact title to match")
    parser.add_argument(
        "--max-duration", type=int, default=-1, help="Longest duration in minutes"
    )
    parser.add_argument("--genre", type=genre_type, help="Genre label to match")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(description="Video catalog and playlist tool")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Show catalog statistics")
    stats_parser.add_argument("data_file", help="Video record file to load")
    stats_parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    # Search command
    search_parser = subparsers.add_parser("search", help="List videos matching filters")
    search_parser.add_argument("data_file", help="Video record file to load")
    search_parser.add_argument("--name", help="Name for the result playlist")
    add_search_arguments(search_parser)
    search_parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    # Page command
    page_parser = subparsers.add_parser("page", help="Write an HTML page for a playlist")
    page_parser.add_argument("data_file", help="Video record file to load")
    page_parser.add_argument("playlist", help="Playlist name")
    page_parser.add_argument(
        "-o", "--output", default=DEFAULT_PAGE_FILE, help="Output HTML file"
    )
    add_search_arguments(page_parser)
    page_parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    return parser


def build_command(args: argparse.Namespace, catalog: Catalog) -> commands.CatalogCommand:
    """Create the command object for parsed arguments.

    Raises:
        ValueError: If the command is unknown
    """
    if args.command == "stats":
        return commands.StatsCommand(catalog, args.data_file, verbose=args.verbose)
    if args.command == "search":
        return commands.SearchCommand(
            catalog,
            args.data_file,
            title=args.title,
            max_duration=args.max_duration,
            genre=args.genre,
            name=args.name,
            verbose=args.verbose,
        )
    if args.command == "page":
        return commands.PageCommand(
            catalog,
            args.data_file,
            output_file=args.output,
            playlist=args.playlist,
            title=args.title,
            max_duration=args.max_duration,
            genre=args.genre,
            verbose=args.verbose,
        )
    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None) -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    parser = create_parser()
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parser.parse_args(args=argv if argv else ["--help"])
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    configure_logging(debug=args.debug)

    if not args.command:
        parser.print_help()
        return 1

    try:
        command = build_command(args, Catalog())
        command.validate()
        if not command.run():
            logger.error("Command failed to run successfully")
            return 1
        return 0
    except (CatalogError, ValueError) as e:
        logger.error("Command failed: %s", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
