"""Click entry point for deps-report."""

import sys
from typing import Iterable, List

import click

from .. import __version__
from ..config import Config
from ..console import print_final_failure, print_final_success, print_report_summary
from ..exceptions import DepsReportError
from ..http_client import DEFAULT_TIMEOUT
from ..logging_config import LOG_LEVELS, logger, set_log_level
from ..orchestrator import run_report

DEPS_REPORT_VERSION = __version__


def split_patterns(values: Iterable[str]) -> List[str]:
    """
    Flatten repeated option values, splitting each on whitespace.

    ``-e "vendor node_modules" -e dist`` yields three patterns.

    Args:
        values: Raw option values as collected by click

    Returns:
        Flat list of non-empty patterns
    """
    patterns: List[str] = []
    for value in values:
        patterns.extend(value.split())
    return patterns


def build_config(
    directory: str,
    exclude: Iterable[str] = (),
    skip: Iterable[str] = (),
    output: str = "deps_report.xlsx",
    timeout: float = DEFAULT_TIMEOUT,
    log_level: str = "INFO",
) -> Config:
    """
    Build and validate a Config from CLI values.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    config = Config(
        directory=directory,
        exclude=split_patterns(exclude),
        skip=split_patterns(skip),
        output_file=output,
        timeout=timeout,
        log_level=log_level.upper(),
    )
    config.validate()
    return config


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("directory")
@click.option(
    "-e",
    "--exclude",
    multiple=True,
    metavar="PATTERN",
    help="Regular expression tested against full file paths; matching manifests are ignored. Repeatable.",
)
@click.option(
    "-s",
    "--skip",
    multiple=True,
    metavar="PATTERN",
    help="Regular expression tested against npm dependency names; matching dependencies are skipped. Repeatable.",
)
@click.option(
    "-o",
    "--output",
    default="deps_report.xlsx",
    show_default=True,
    help="Path of the .xlsx report to write.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Timeout in seconds for each HTTP request.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Logging verbosity.",
)
@click.version_option(DEPS_REPORT_VERSION, prog_name="deps-report")
def cli(directory, exclude, skip, output, timeout, log_level) -> None:
    """Scan DIRECTORY for go.mod and package.json files and write a dependency license report."""
    try:
        config = build_config(directory, exclude, skip, output, timeout, log_level)
        set_log_level(config.log_level)
        summary = run_report(config)
    except DepsReportError as e:
        logger.error(str(e))
        print_final_failure(str(e))
        sys.exit(1)

    print_report_summary(summary)
    print_final_success()


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
