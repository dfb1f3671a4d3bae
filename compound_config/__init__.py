"""compound-config: Typed list options over flat key/value config files.

A compound option turns groups of flat config keys that share an
identifier into an ordered list of typed tuples:

    binding_terminal = <super> KEY_ENTER
    command_terminal = kitty

becomes ``[("terminal", ActivatorBinding(...), "kitty")]``.

This package provides:
- Value types (int, float, bool, str, color, key/button/activator bindings)
- Column descriptors and the compound option itself
- Grouping of flat config sections into rows
- YAML schema and config loading, and a small CLI

Example usage:
    >>> from compound_config import CompoundOption, CompoundOptionEntry
    >>>
    >>> option = CompoundOption("command", [
    ...     CompoundOptionEntry("activator", "binding_", "binding"),
    ...     CompoundOptionEntry(str, "command_", "command"),
    ... ])
    >>> option.set_value_untyped([["terminal", "<super> KEY_ENTER", "kitty"]])
    True
    >>> option.get_value_simple()[0][1]
    'kitty'
"""

__version__ = "0.1.0"

from .errors import (
    ArityMismatchError,
    CompoundOptionError,
    CorruptValueError,
    UnknownTypeError,
)
from .types import OptionType, OptionTypeRegistry
from .core import CompoundOption, CompoundOptionEntry, OptionBase

__all__ = [
    "__version__",
    # Errors
    "CompoundOptionError",
    "ArityMismatchError",
    "CorruptValueError",
    "UnknownTypeError",
    # Types
    "OptionType",
    "OptionTypeRegistry",
    # Options
    "OptionBase",
    "CompoundOptionEntry",
    "CompoundOption",
]
