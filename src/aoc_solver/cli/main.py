"""Main CLI entry point for aoc-solver."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging, verbosity_to_level


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='aoc-solver',
        description='Advent of Code solver harness - check, run and time daily puzzle solutions',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  aoc-solver run 15                             # Test and solve day 15
  aoc-solver run 9 --input-dir data --skip-tests
  aoc-solver list                               # List available days
  aoc-solver config show                        # Show current configuration
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        action='append',
        help='Configuration override, may be repeated (e.g., harness.input_dir=data)'
    )

    parser.add_argument(
        '--config-dir',
        type=str,
        help='Directory containing config.yaml (default: the conf/ directory bundled with aoc_solver)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for results (JSON format)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Run command
    run_parser = subparsers.add_parser(
        'run',
        help='Run a day\'s solution',
        description='Check a day\'s solution against its test input, then solve and time the real input'
    )

    run_parser.add_argument(
        'day',
        type=int,
        nargs='?',
        help='Day number (default: harness.default_day from configuration)'
    )

    run_parser.add_argument(
        '--input-dir', '-i',
        type=str,
        help='Directory containing dayN-input.txt and dayN-test-input.txt'
    )

    run_parser.add_argument(
        '--skip-tests',
        action='store_true',
        help='Skip checking against the test input'
    )

    # List command
    subparsers.add_parser(
        'list',
        help='List days with registered solutions'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Inspect solver configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    setup_logging(verbosity_to_level(parsed_args.verbose, parsed_args.quiet))
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'run':
            return commands.run_command(parsed_args)
        if parsed_args.command == 'list':
            return commands.list_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
