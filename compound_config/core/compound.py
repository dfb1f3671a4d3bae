"""Compound options: lists of typed tuples stored as text.

A compound option is built from several flat config entries sharing a row
identifier. With prefixes ``binding_`` and ``command_`` the keys::

    binding_terminal = <super> KEY_ENTER
    command_terminal = kitty
    binding_launcher = <super> KEY_D
    command_launcher = wofi

form the rows ``(terminal, <super> KEY_ENTER, kitty)`` and
``(launcher, <super> KEY_D, wofi)``. The option keeps each row as a list of
strings and converts cells to typed values on demand.

Example
-------
>>> from compound_config import CompoundOption, CompoundOptionEntry
>>> option = CompoundOption("bindings", [
...     CompoundOptionEntry(int, "key_"),
...     CompoundOptionEntry(str, "cmd_"),
... ])
>>> option.set_value_untyped([["binding1", "5", "run-app"]])
True
>>> option.get_value(int, str)
[('binding1', 5, 'run-app')]
"""

import logging
import re
from collections import abc
from typing import Any, List, Optional, Sequence, Tuple

import yaml
from yaml.reader import Reader

from ..errors import ArityMismatchError, CorruptValueError
from ..types import OptionType, OptionTypeRegistry
from ..types.registry import TypeLike
from .entry import CompoundOptionEntry
from .option import OptionBase

logger = logging.getLogger(__name__)

TYPE_HINTS = ("plain", "dict", "tuple")

Grid = List[List[str]]


def _copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def scalar_text(cell: Any) -> Optional[str]:
    """Convert a YAML scalar to cell text; None for non-scalars."""
    if cell is None or isinstance(cell, (list, dict)):
        return None
    if isinstance(cell, bool):
        return "true" if cell else "false"
    return str(cell)


# Characters YAML folds or strips unless they are escaped
_NEEDS_ESCAPE = re.compile("[\t\r\n\x85\u2028\u2029]")


class _GridDumper(yaml.SafeDumper):
    pass


def _represent_cell(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    style = None
    if _NEEDS_ESCAPE.search(data) or Reader.NON_PRINTABLE.search(data):
        style = '"'
    return dumper.represent_scalar("tag:yaml.org,2002:str", data, style=style)


_GridDumper.add_representer(str, _represent_cell)


def dump_grid(grid: Grid) -> str:
    """Serialize a grid as a single-line YAML flow sequence."""
    text = yaml.dump(
        grid,
        Dumper=_GridDumper,
        default_flow_style=True,
        allow_unicode=True,
        width=float("inf"),
    )
    return text.strip()


def parse_grid(text: str) -> Optional[Grid]:
    """Parse the YAML text form of a grid.

    Returns None if text is not a sequence of sequences of scalars.
    Row lengths and cell types are not checked here.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.debug(f"Malformed compound option text: {e}")
        return None

    if data is None:
        return []
    if not isinstance(data, list):
        return None

    grid = []
    for row in data:
        if not isinstance(row, list):
            return None
        cells = [scalar_text(cell) for cell in row]
        if any(cell is None for cell in cells):
            return None
        grid.append(cells)
    return grid


class CompoundOption(OptionBase):
    """An option holding an ordered list of string-tagged tuples.

    Parameters
    ----------
    name : str
        Option name
    entries : Sequence[CompoundOptionEntry]
        Column descriptors; their number is the option's arity
    type_hint : str
        How rows should be presented by config writers: ``plain``,
        ``dict`` or ``tuple`` (default). Has no effect on parsing.

    Raises
    ------
    ValueError
        If entries is empty or type_hint is not recognized
    """

    def __init__(
        self,
        name: str,
        entries: Sequence[CompoundOptionEntry],
        type_hint: str = "tuple",
    ):
        super().__init__(name)
        if type_hint not in TYPE_HINTS:
            raise ValueError(
                f"Invalid type hint '{type_hint}' for option '{name}'. "
                f"Expected one of {list(TYPE_HINTS)}"
            )
        if not entries:
            raise ValueError(f"Compound option '{name}' needs at least one entry")

        self._entries: Tuple[CompoundOptionEntry, ...] = tuple(entries)
        self._type_hint = type_hint
        self._value: Grid = []
        self._default_value: Grid = []

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    def get_entries(self) -> Tuple[CompoundOptionEntry, ...]:
        """Return the column descriptors in schema order."""
        return self._entries

    def get_type_hint(self) -> str:
        return self._type_hint

    @property
    def arity(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------
    # Untyped access
    # ------------------------------------------------------------------

    def _check_grid(self, grid: Any) -> Optional[Grid]:
        """Validate every row and cell of grid.

        Returns
        -------
        Grid or None
            A private copy of grid, or None if any row or cell is invalid
        """
        if isinstance(grid, (str, bytes)) or not isinstance(grid, abc.Sequence):
            logger.debug(f"Option '{self.name}': value is not a sequence of rows")
            return None

        checked = []
        for row_index, row in enumerate(grid):
            if isinstance(row, (str, bytes)) or not isinstance(row, abc.Sequence):
                logger.debug(f"Option '{self.name}': row {row_index} is not a sequence")
                return None
            if len(row) != self.arity + 1:
                logger.debug(
                    f"Option '{self.name}': row {row_index} has "
                    f"{len(row)} cells, expected {self.arity + 1}"
                )
                return None
            if not all(isinstance(cell, str) for cell in row):
                logger.debug(f"Option '{self.name}': row {row_index} has non-text cells")
                return None

            # Cell 0 is the row identifier and is free text
            for column, entry in enumerate(self._entries, start=1):
                if not entry.validate(row[column]):
                    logger.debug(
                        f"Option '{self.name}': row {row_index} ({row[0]!r}) "
                        f"column {entry.prefix!r}: {row[column]!r} is not a "
                        f"valid {entry.value_type.type_id}"
                    )
                    return None
            checked.append(list(row))
        return checked

    def get_value_untyped(self) -> Grid:
        """Return a copy of the stored rows.

        Each row is ``[identifier, cell_1, ..., cell_N]``.
        """
        return _copy_grid(self._value)

    def set_value_untyped(self, value: Sequence[Sequence[str]]) -> bool:
        """Replace all rows, if every cell is valid for its column.

        Parameters
        ----------
        value : Sequence[Sequence[str]]
            Rows of ``arity + 1`` strings

        Returns
        -------
        bool
            True if the value was stored. On False the option is unchanged.
        """
        checked = self._check_grid(value)
        if checked is None:
            return False

        self._value = checked
        self.notify_updated()
        return True

    # ------------------------------------------------------------------
    # Typed access
    # ------------------------------------------------------------------

    def _resolve_types(self, types: Sequence[TypeLike]) -> List[OptionType]:
        if not types:
            return [entry.value_type for entry in self._entries]
        if len(types) != self.arity:
            raise ArityMismatchError(
                f"Option '{self.name}' has {self.arity} entries, "
                f"got {len(types)} types"
            )
        return [OptionTypeRegistry.resolve(t) for t in types]

    def get_value(self, *types: TypeLike) -> List[tuple]:
        """Parse the stored rows into ``(identifier, field_1, ...)`` tuples.

        Parameters
        ----------
        *types : str, type or OptionType
            One type per entry, in schema order. If omitted, the entries'
            own types are used.

        Returns
        -------
        List[tuple]
            One tuple per row, in stored order

        Raises
        ------
        ArityMismatchError
            If the number of types differs from the number of entries
        CorruptValueError
            If a stored cell cannot be converted to the requested type
        """
        value_types = self._resolve_types(types)

        result = []
        for row_index, row in enumerate(self._value):
            fields: List[Any] = [row[0]]
            for column, value_type in enumerate(value_types, start=1):
                parsed = value_type.from_string(row[column])
                if parsed is None:
                    raise CorruptValueError(
                        f"Option '{self.name}': row {row_index} ({row[0]!r}) "
                        f"column {column} holds {row[column]!r}, which is not "
                        f"a valid {value_type.type_id}"
                    )
                fields.append(parsed)
            result.append(tuple(fields))
        return result

    def set_value(self, value: Sequence[Sequence[Any]], *types: TypeLike) -> None:
        """Replace all rows with ``(identifier, field_1, ...)`` tuples.

        Parameters
        ----------
        value : Sequence[Sequence[Any]]
            Typed rows; the first field of each is the row identifier
        *types : str, type or OptionType
            One type per entry, in schema order. If omitted, the entries'
            own types are used.

        Raises
        ------
        ArityMismatchError
            If the number of types or the length of a row is wrong
        TypeError
            If an identifier is not a string or a field has the wrong type
        ValueError
            If a field cannot be written as text its column accepts
        """
        value_types = self._resolve_types(types)

        grid = []
        for row in value:
            if len(row) != len(value_types) + 1:
                raise ArityMismatchError(
                    f"Option '{self.name}' expects rows of {len(value_types) + 1} "
                    f"fields, got {len(row)}"
                )
            identifier = row[0]
            if not isinstance(identifier, str):
                raise TypeError(f"Row identifier must be str, got {identifier!r}")
            cells = [t.to_string(field) for t, field in zip(value_types, row[1:])]
            for entry, cell in zip(self._entries, cells):
                if not entry.validate(cell):
                    raise ValueError(
                        f"Option '{self.name}': row {identifier!r} column "
                        f"{entry.prefix!r} would store {cell!r}, which is not a "
                        f"valid {entry.value_type.type_id}"
                    )
            grid.append([identifier] + cells)

        self._value = grid
        self.notify_updated()

    def get_value_simple(self, *types: TypeLike) -> List[tuple]:
        """Like :meth:`get_value`, without the row identifiers."""
        return [row[1:] for row in self.get_value(*types)]

    def set_value_simple(self, value: Sequence[Sequence[Any]], *types: TypeLike) -> None:
        """Like :meth:`set_value`; rows are identified by their index."""
        rows = [(str(i),) + tuple(row) for i, row in enumerate(value)]
        self.set_value(rows, *types)

    # ------------------------------------------------------------------
    # OptionBase
    # ------------------------------------------------------------------

    def clone_option(self) -> "CompoundOption":
        clone = CompoundOption(
            self.name,
            [entry.clone() for entry in self._entries],
            self._type_hint,
        )
        clone._value = _copy_grid(self._value)
        clone._default_value = _copy_grid(self._default_value)
        return clone

    def set_value_str(self, text: str) -> bool:
        grid = parse_grid(text)
        if grid is None:
            return False
        return self.set_value_untyped(grid)

    def get_value_str(self) -> str:
        return dump_grid(self._value)

    def set_default_value_str(self, text: str) -> bool:
        grid = parse_grid(text)
        checked = None if grid is None else self._check_grid(grid)
        if checked is None:
            return False
        self._default_value = checked
        return True

    def get_default_value_str(self) -> str:
        return dump_grid(self._default_value)

    def reset_to_default(self) -> None:
        self._value = _copy_grid(self._default_value)
        self.notify_updated()

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def to_frame(self):
        """Return the stored rows as a pandas DataFrame.

        Columns are labelled by entry name (or prefix when unnamed) and
        indexed by row identifier. Cells are left as text.

        Returns
        -------
        pd.DataFrame
            Table view of the current value
        """
        # Import here to avoid slow startup
        import pandas as pd

        columns = [entry.name or entry.prefix for entry in self._entries]
        index = pd.Index([row[0] for row in self._value], name="id", dtype=object)
        return pd.DataFrame(
            [row[1:] for row in self._value],
            columns=columns,
            index=index,
            dtype=object,
        )

    def __len__(self) -> int:
        return len(self._value)

    def __repr__(self) -> str:
        return (
            f"CompoundOption({self.name!r}, arity={self.arity}, "
            f"type_hint={self._type_hint!r}, rows={len(self._value)})"
        )
