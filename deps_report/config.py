"""Run configuration for deps-report."""

from dataclasses import dataclass, field
from typing import List

from ._report.builder import DEFAULT_OUTPUT_FILE
from .exceptions import ConfigurationError
from .http_client import DEFAULT_TIMEOUT
from .logging_config import LOG_LEVELS


@dataclass
class Config:
    """Configuration settings for a report run."""

    directory: str
    exclude: List[str] = field(default_factory=list)
    skip: List[str] = field(default_factory=list)
    output_file: str = DEFAULT_OUTPUT_FILE
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    def validate(self) -> None:
        """
        Validate configuration settings.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.directory:
            raise ConfigurationError("Directory to scan is not defined")
        if not self.output_file or not self.output_file.strip():
            raise ConfigurationError("Output file name cannot be empty")
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level '{self.log_level}'. Expected one of: {', '.join(LOG_LEVELS)}"
            )
