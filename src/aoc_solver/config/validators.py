"""Configuration validation for aoc-solver."""

import logging

from omegaconf import DictConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_harness_config(config.get('harness', {}))
        validate_logging_config(config.get('logging', {}))
    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}") from e

    logger.debug("Configuration validation passed")


def validate_harness_config(harness_config: DictConfig) -> None:
    """Validate harness configuration section.

    Args:
        harness_config: Harness configuration section
    """
    if not harness_config:
        return

    input_dir = harness_config.get('input_dir', 'input')
    if not isinstance(input_dir, str) or not input_dir.strip():
        raise ConfigValidationError(
            f"harness.input_dir must be a non-empty path, got {input_dir!r}"
        )

    run_tests = harness_config.get('run_tests', True)
    if not isinstance(run_tests, bool):
        raise ConfigValidationError(
            f"harness.run_tests must be a boolean, got {run_tests!r}"
        )

    default_day = harness_config.get('default_day', 1)
    if not isinstance(default_day, int) or isinstance(default_day, bool) or not 1 <= default_day <= 25:
        raise ConfigValidationError(
            f"harness.default_day must be integer between 1 and 25, got {default_day!r}"
        )


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section.

    Args:
        logging_config: Logging configuration section
    """
    if not logging_config:
        return

    level = logging_config.get('level', 'WARNING')
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )
