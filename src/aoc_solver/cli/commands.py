"""CLI command implementations."""

import logging
import time
from typing import List

from omegaconf import OmegaConf

from aoc_solver.config import ConfigValidationError, load_config, validate_config
from aoc_solver.days import available_days, get_solution
from aoc_solver.harness import PartStatus, format_duration, format_outcome, solve_day

from .utils import save_results

logger = logging.getLogger(__name__)


def _config_overrides(args) -> List[str]:
    overrides = list(getattr(args, 'config', None) or [])
    if getattr(args, 'skip_tests', False):
        overrides.append("harness.run_tests=false")
    return overrides


def _load_config(args, validate: bool = True):
    config = load_config(
        overrides=_config_overrides(args),
        config_dir=getattr(args, 'config_dir', None),
        validate=False,
    )
    # Set after composing so paths need no override-grammar quoting
    input_dir = getattr(args, 'input_dir', None)
    if input_dir:
        OmegaConf.update(config, 'harness.input_dir', input_dir)
    if validate:
        validate_config(config)
    return config


def run_command(args) -> int:
    """Handle run command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        config = _load_config(args)
        if not args.verbose and not args.quiet:
            logging.getLogger().setLevel(config.logging.level.upper())

        day = args.day if args.day is not None else config.harness.default_day
        solution = get_solution(day)

        logger.info(f"Running day {day} with inputs from {config.harness.input_dir}")
        start_time = time.perf_counter()
        outcomes = solve_day(
            day,
            solution.solve_part1,
            solution.solve_part2,
            input_dir=config.harness.input_dir,
            run_tests=config.harness.run_tests,
        )
        total_time = time.perf_counter() - start_time

        for i, outcome in enumerate(outcomes):
            if i:
                print()
            for line in format_outcome(outcome):
                print(line)

        if args.output:
            save_results({
                'day': day,
                'parts': outcomes,
                'total_time': total_time,
                'timestamp': time.time(),
            }, args.output)
            logger.info(f"Results saved to {args.output}")

        logger.info(f"Total time: {format_duration(total_time)}")

        failed = any(o.status == PartStatus.FAILED_TEST for o in outcomes)
        return 1 if failed else 0

    except Exception as e:
        logger.error(f"Run command failed: {e}")
        return 1


def list_command(args) -> int:
    """Handle list command."""
    for day in available_days():
        print(f"Day {day}")
    return 0


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        if args.config_action == 'show':
            config = _load_config(args, validate=False)
            print("Current Configuration:")
            print("=" * 50)
            print(OmegaConf.to_yaml(config, resolve=True))
            return 0

        elif args.config_action == 'validate':
            try:
                config = _load_config(args, validate=False)
                validate_config(config)
                print("✅ Configuration is valid")
                return 0
            except ConfigValidationError as e:
                print(f"❌ Configuration validation failed: {e}")
                return 1

        else:
            print("Unknown config action")
            return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1
