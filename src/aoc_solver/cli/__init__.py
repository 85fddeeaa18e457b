"""Command-line interface for aoc-solver.

This module provides CLI commands for running daily solutions and
inspecting configuration.
"""

from .main import main_cli
from .commands import run_command, list_command, config_command
from .utils import setup_logging, save_results

__all__ = [
    'main_cli',
    'run_command',
    'list_command',
    'config_command',
    'setup_logging',
    'save_results'
]
