"""Core option classes.

Provides:
- OptionBase: Generic option contract with change notification
- CompoundOptionEntry: Column descriptor (prefix, name, value type)
- CompoundOption: List of typed tuples stored as text rows
"""

from .option import OptionBase
from .entry import CompoundOptionEntry
from .compound import TYPE_HINTS, CompoundOption, dump_grid, parse_grid, scalar_text

__all__ = [
    "OptionBase",
    "CompoundOptionEntry",
    "CompoundOption",
    "TYPE_HINTS",
    "dump_grid",
    "parse_grid",
    "scalar_text",
]
