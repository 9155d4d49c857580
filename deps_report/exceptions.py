"""Custom exceptions for deps-report."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ._report.row import ReportRow


class DepsReportError(Exception):
    """Base exception for all deps-report operations."""


class ConfigurationError(DepsReportError):
    """Raised when configuration validation fails."""


class InvalidPatternError(DepsReportError):
    """Raised when a user-supplied pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Failed to compile regex pattern '{pattern}': {reason}")
        self.pattern = pattern


class InvalidDirectoryError(DepsReportError):
    """Raised when the directory to scan cannot be resolved."""


class ManifestParseError(DepsReportError):
    """Raised when a manifest file cannot be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path


class InvalidRepoUrlError(DepsReportError):
    """Raised when a registry repository URL does not have the expected shape."""

    def __init__(self, url: str, dependency: Optional[str] = None) -> None:
        message = f"Invalid repository URL format: '{url}'"
        if dependency:
            message = f"{message} (dependency: {dependency})"
        super().__init__(message)
        self.url = url
        self.dependency = dependency


class EnrichmentError(DepsReportError):
    """
    Raised when enriching a single dependency fails.

    Carries the row built before the failure, if any, so the caller
    can still write the cells that are known.
    """

    def __init__(self, dependency: str, cause: Exception, row: Optional["ReportRow"] = None) -> None:
        super().__init__(f"Failed to process dependency {dependency}: {cause}")
        self.dependency = dependency
        self.cause = cause
        self.row = row


class ReportWriteError(DepsReportError):
    """Raised when the workbook cannot be written."""
