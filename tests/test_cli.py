"""Tests for the Click CLI interface.

These tests verify that:
1. CLI arguments are parsed into a Config
2. Repeated and space-delimited patterns are flattened
3. Fatal errors exit non-zero without writing a report
4. Help and version options work
"""

import json
import unittest
from importlib import import_module
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from deps_report.cli.main import DEPS_REPORT_VERSION, build_config, cli, split_patterns
from deps_report.exceptions import ConfigurationError
from deps_report.orchestrator import ReportSummary, SheetStats

# deps_report.cli re-exports the `main` function, so import the module
# object explicitly to patch its attributes.
cli_main_module = import_module("deps_report.cli.main")


def _summary(output="deps_report.xlsx"):
    return ReportSummary(output_file=output, sheets=[SheetStats("Web", 1, 1), SheetStats("Backend", 0)])


class TestCLIHelp(unittest.TestCase):
    """Test CLI help and version options."""

    def setUp(self):
        self.runner = CliRunner()

    def test_help_option(self):
        result = self.runner.invoke(cli, ["--help"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("DIRECTORY", result.output)
        self.assertIn("--exclude", result.output)
        self.assertIn("--skip", result.output)

    def test_short_help_option(self):
        result = self.runner.invoke(cli, ["-h"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("--output", result.output)

    def test_version_option(self):
        result = self.runner.invoke(cli, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("deps-report", result.output)
        self.assertIn(DEPS_REPORT_VERSION, result.output)

    def test_directory_is_required(self):
        result = self.runner.invoke(cli, [])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("DIRECTORY", result.output)


class TestCLIArgumentParsing(unittest.TestCase):
    """Test CLI argument parsing."""

    def setUp(self):
        self.runner = CliRunner()

    @patch.object(cli_main_module, "run_report")
    def test_patterns_are_collected(self, mock_run):
        mock_run.return_value = _summary()
        with self.runner.isolated_filesystem():
            Path("src").mkdir()
            result = self.runner.invoke(
                cli,
                ["src", "-e", "node_modules vendor", "--exclude", "dist", "-s", "^@acme/", "--skip", "^react$"],
            )

        self.assertEqual(result.exit_code, 0, result.output)
        config = mock_run.call_args[0][0]
        self.assertEqual(config.directory, "src")
        self.assertEqual(config.exclude, ["node_modules", "vendor", "dist"])
        self.assertEqual(config.skip, ["^@acme/", "^react$"])
        self.assertEqual(config.output_file, "deps_report.xlsx")

    @patch.object(cli_main_module, "run_report")
    def test_output_timeout_and_log_level(self, mock_run):
        mock_run.return_value = _summary("out.xlsx")
        result = self.runner.invoke(cli, [".", "-o", "out.xlsx", "--timeout", "2.5", "--log-level", "debug"])

        self.assertEqual(result.exit_code, 0, result.output)
        config = mock_run.call_args[0][0]
        self.assertEqual(config.output_file, "out.xlsx")
        self.assertEqual(config.timeout, 2.5)
        self.assertEqual(config.log_level, "DEBUG")

    def test_non_positive_timeout_is_rejected(self):
        result = self.runner.invoke(cli, [".", "--timeout", "0"])
        self.assertNotEqual(result.exit_code, 0)

    @patch.object(cli_main_module, "run_report")
    def test_success_prints_summary(self, mock_run):
        mock_run.return_value = _summary()
        result = self.runner.invoke(cli, ["."])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("Report Summary", result.output)
        self.assertIn("SUCCESS", result.output)


class TestCLIFailures(unittest.TestCase):
    """Fatal errors exit with status 1 and leave no report behind."""

    def setUp(self):
        self.runner = CliRunner()

    def test_invalid_directory(self):
        with self.runner.isolated_filesystem():
            result = self.runner.invoke(cli, ["does-not-exist"])
            self.assertEqual(result.exit_code, 1)
            self.assertIn("does-not-exist", result.output)
            self.assertFalse(Path("deps_report.xlsx").exists())

    def test_invalid_pattern(self):
        with self.runner.isolated_filesystem():
            Path("src").mkdir()
            result = self.runner.invoke(cli, ["src", "--skip", "(unclosed"])
            self.assertEqual(result.exit_code, 1)
            self.assertIn("(unclosed", result.output)
            self.assertFalse(Path("deps_report.xlsx").exists())

    def test_malformed_manifest(self):
        with self.runner.isolated_filesystem():
            Path("src").mkdir()
            Path("src/package.json").write_text(json.dumps({"dependencies": ["react"]}))
            result = self.runner.invoke(cli, ["src"])
            self.assertEqual(result.exit_code, 1)
            self.assertIn("package.json", result.output)
            self.assertFalse(Path("deps_report.xlsx").exists())


class TestBuildConfig(unittest.TestCase):
    """Test build_config and split_patterns helpers."""

    def test_split_patterns(self):
        self.assertEqual(split_patterns(["a b", "  c  ", ""]), ["a", "b", "c"])
        self.assertEqual(split_patterns(()), [])

    def test_build_config_defaults(self):
        config = build_config(".")
        self.assertEqual(config.exclude, [])
        self.assertEqual(config.skip, [])
        self.assertEqual(config.log_level, "INFO")

    def test_build_config_validates(self):
        with self.assertRaises(ConfigurationError):
            build_config(".", output="   ")


if __name__ == "__main__":
    unittest.main()
