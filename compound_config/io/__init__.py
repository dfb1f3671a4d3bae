"""I/O utilities for compound-config.

Provides file logging for the package logger and YAML validation reports.
"""

from .logging import (
    PACKAGE_LOGGER,
    append_report,
    log_to_file,
    validation_record,
)

__all__ = [
    "PACKAGE_LOGGER",
    "append_report",
    "log_to_file",
    "validation_record",
]
