"""Test fixtures for compound-config.

Provides sample option builders and YAML file writers.
"""

from .sample_configs import (
    COMMAND_CONFIG,
    COMMAND_SCHEMA,
    create_binding_option,
    create_command_option,
    write_yaml,
)

__all__ = [
    "COMMAND_CONFIG",
    "COMMAND_SCHEMA",
    "create_binding_option",
    "create_command_option",
    "write_yaml",
]
