"""Command-line interface for compound-config.

Example Usage
-------------
    # From command line:
    compound-config --help
    compound-config show --schema schema.yaml --config config.yaml
    compound-config validate --schema schema.yaml --config config.yaml
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
