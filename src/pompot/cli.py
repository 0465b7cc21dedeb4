"""
pompot.cli - Command-line interface.

Main entry point for the pompot CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pompot import __version__
from pompot.commands import report, serve
from pompot.config import load_config


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pompot",
        description="Find values repeated across Maven pom.xml files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pompot report                 # Report repeated values under the cwd
  pompot report ~/work/platform # Report repeated values under a directory
  pompot report . --json        # Output repeated values as JSON
  pompot serve ~/work/platform  # Scan once and serve /api/pom

Configuration:
  .pompot.toml in the current directory (or a parent), or --config PATH.
  Environment overrides: POMPOT_<SECTION>_<KEY>, e.g. POMPOT_SERVER_PORT=8080

For detailed command help: pompot <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"pompot {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages and show tracebacks",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors (report output is still printed)",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # report command
    report_parser = subparsers.add_parser(
        "report",
        help="Print values repeated across pom.xml files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Only properties, dependency versions, and managed dependency versions
are compared. A leading ~ in DIRECTORY is expanded to your home.

Exit status is 1 only when DIRECTORY is not a readable directory.
""",
    )
    report_parser.add_argument(
        "directory",
        nargs="?",
        help="Directory to scan (default: scan.root from config, else cwd)",
        metavar="DIRECTORY",
    )
    report_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output repeated values as JSON",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Scan a directory and serve the result over HTTP (requires server extra)",
    )
    serve_parser.add_argument(
        "directory",
        nargs="?",
        help="Directory to scan (default: scan.root from config, else cwd)",
        metavar="DIRECTORY",
    )
    serve_parser.add_argument(
        "--host",
        help="Host to bind (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        help="Port to listen on (default: 9754)",
    )

    # version command
    subparsers.add_parser(
        "version",
        help="Show version",
    )

    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Send log records to stderr at a level matching the flags."""
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        config = load_config(args.config)

        # Dispatch to command handlers
        if args.command == "report":
            return report.run(args, config)
        elif args.command == "serve":
            return serve.run(args, config)
        elif args.command == "version":
            return version_command(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


def version_command(args: argparse.Namespace) -> int:
    """Handle version command."""
    print(f"pompot {__version__}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
