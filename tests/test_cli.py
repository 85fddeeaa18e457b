"""Tests for CLI interface."""

import json
import logging
from unittest.mock import patch

import pytest

from aoc_solver.cli.main import create_parser, main_cli
from aoc_solver.cli.utils import save_results, setup_logging, verbosity_to_level
from aoc_solver.harness import PartStatus, solve_part

DAY1_INPUT = "1\n2\n3\n2\n"
DAY1_TEST_INPUT = "Part 1 expected: 7\nPart 2 expected: 5\n\n199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"


@pytest.fixture
def config_dir(tmp_path):
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text(
        "harness:\n"
        "  input_dir: input\n"
        "  run_tests: true\n"
        "  default_day: 1\n"
        "logging:\n"
        "  level: WARNING\n"
    )
    return config_dir


@pytest.fixture
def input_dir(tmp_path):
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    (input_dir / "day1-input.txt").write_text(DAY1_INPUT)
    (input_dir / "day1-test-input.txt").write_text(DAY1_TEST_INPUT)
    return input_dir


class TestCLIParser:
    """Test CLI argument parsing."""

    def test_create_parser(self):
        parser = create_parser()
        assert parser.prog == 'aoc-solver'

    def test_run_command_parsing(self):
        parser = create_parser()

        args = parser.parse_args(['run', '15'])
        assert args.command == 'run'
        assert args.day == 15
        assert args.input_dir is None
        assert args.skip_tests is False

        args = parser.parse_args(['run', '--input-dir', 'data', '--skip-tests'])
        assert args.day is None
        assert args.input_dir == 'data'
        assert args.skip_tests is True

    def test_config_command_parsing(self):
        parser = create_parser()
        args = parser.parse_args(['config', 'show'])
        assert args.command == 'config'
        assert args.config_action == 'show'

        args = parser.parse_args(['config', 'validate'])
        assert args.config_action == 'validate'

    def test_global_options(self):
        parser = create_parser()

        args = parser.parse_args(['-v', 'list'])
        assert args.verbose == 1

        args = parser.parse_args(['-vv', 'list'])
        assert args.verbose == 2

        args = parser.parse_args(['--quiet', 'list'])
        assert args.quiet is True

        args = parser.parse_args([
            '--config', 'harness.default_day=9',
            '--config', 'logging.level=INFO',
            '--output', 'results.json',
            'run'
        ])
        assert args.config == ['harness.default_day=9', 'logging.level=INFO']
        assert args.output == 'results.json'


class TestCLIUtils:
    """Test CLI utility functions."""

    def test_verbosity_to_level(self):
        assert verbosity_to_level(0, quiet=True) == logging.ERROR
        assert verbosity_to_level(0, quiet=False) == logging.WARNING
        assert verbosity_to_level(1, quiet=False) == logging.INFO
        assert verbosity_to_level(3, quiet=False) == logging.DEBUG

    def test_setup_logging(self):
        with patch('logging.basicConfig') as basic_config:
            setup_logging(logging.DEBUG)
        kwargs = basic_config.call_args.kwargs
        assert kwargs['level'] == logging.DEBUG
        assert '%(name)s' in kwargs['format']

    def test_save_results(self, tmp_path):
        outcome = solve_part(1, lambda raw: 42, "x")
        output = tmp_path / "nested" / "results.json"
        save_results({'day': 1, 'parts': [outcome]}, output)

        data = json.loads(output.read_text())
        assert data['day'] == 1
        assert data['parts'][0]['output'] == "42"
        assert data['parts'][0]['status'] == "solved"


class TestMainCLI:
    """Test CLI entry point end to end."""

    def test_no_command(self, capsys):
        assert main_cli([]) == 1
        assert 'usage' in capsys.readouterr().out

    def test_list(self, capsys):
        assert main_cli(['list']) == 0
        out = capsys.readouterr().out
        assert 'Day 1' in out
        assert 'Day 15' in out

    def test_run_day(self, config_dir, input_dir, tmp_path, capsys):
        output = tmp_path / "results.json"
        exit_code = main_cli([
            '--config-dir', str(config_dir),
            '--output', str(output),
            'run', '1', '--input-dir', str(input_dir),
        ])
        assert exit_code == 0

        out = capsys.readouterr().out
        assert "Part 1 test output: 7 ✅" in out
        assert "Part 1 output: 2" in out
        assert "Part 2 test output: 5 ✅" in out
        assert "Part 2 output: 1" in out

        data = json.loads(output.read_text())
        assert [part['status'] for part in data['parts']] == ['passed', 'passed']

    def test_run_default_day_skip_tests(self, config_dir, input_dir, capsys):
        exit_code = main_cli([
            '--config-dir', str(config_dir),
            'run', '--input-dir', str(input_dir), '--skip-tests',
        ])
        assert exit_code == 0
        out = capsys.readouterr().out
        assert "test output" not in out
        assert "Part 1 output: 2" in out

    def test_run_failed_test(self, config_dir, input_dir, capsys):
        (input_dir / "day1-test-input.txt").write_text(
            "Part 1 expected: 100\nPart 2 expected:\n\n1\n2\n"
        )
        exit_code = main_cli([
            '--config-dir', str(config_dir),
            'run', '1', '--input-dir', str(input_dir),
        ])
        assert exit_code == 1
        out = capsys.readouterr().out
        assert "Part 1 test output: 1 ❌" in out
        assert "Expected: 100" in out

    def test_run_input_dir_with_quote(self, config_dir, input_dir, tmp_path, capsys):
        quoted_dir = tmp_path / "it's input"
        input_dir.rename(quoted_dir)
        exit_code = main_cli([
            '--config-dir', str(config_dir),
            'run', '1', '--input-dir', str(quoted_dir),
        ])
        assert exit_code == 0
        assert "Part 1 output: 2" in capsys.readouterr().out

    def test_run_unknown_day(self, config_dir, input_dir):
        assert main_cli(['--config-dir', str(config_dir), 'run', '2',
                         '--input-dir', str(input_dir)]) == 1

    def test_run_missing_input(self, config_dir, tmp_path):
        assert main_cli(['--config-dir', str(config_dir), 'run', '1',
                         '--input-dir', str(tmp_path / "nowhere")]) == 1

    def test_config_show(self, config_dir, capsys):
        assert main_cli(['--config-dir', str(config_dir), 'config', 'show']) == 0
        out = capsys.readouterr().out
        assert 'default_day: 1' in out

    def test_config_validate(self, config_dir, capsys):
        assert main_cli(['--config-dir', str(config_dir), 'config', 'validate']) == 0
        assert main_cli(['--config-dir', str(config_dir),
                         '--config', 'logging.level=LOUD', 'config', 'validate']) == 1
        assert 'validation failed' in capsys.readouterr().out

    def test_keyboard_interrupt(self):
        with patch('aoc_solver.cli.commands.list_command', side_effect=KeyboardInterrupt):
            assert main_cli(['list']) == 130

    def test_part_status_in_outcome(self):
        outcome = solve_part(1, lambda raw: 1, "x", "y", expected="1")
        assert outcome.status == PartStatus.PASSED
