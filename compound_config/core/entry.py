"""Column descriptors for compound options."""

from typing import Any

from ..types import OptionType, OptionTypeRegistry
from ..types.registry import TypeLike


class CompoundOptionEntry:
    """Describes one column of a compound option.

    Parameters
    ----------
    value_type : str, type or OptionType
        Semantic type of the column, e.g. ``int``, ``"activator"``
    prefix : str
        Prefix used to derive flat config keys (``prefix + row_id``)
    name : str
        Optional human-readable label

    Raises
    ------
    ValueError
        If prefix is empty
    UnknownTypeError
        If value_type is not registered

    Example
    -------
    >>> entry = CompoundOptionEntry(int, "key_", "keycode")
    >>> entry.validate("42")
    True
    >>> entry.validate("forty-two")
    False
    """

    __slots__ = ("_value_type", "_prefix", "_name")

    def __init__(self, value_type: TypeLike, prefix: str, name: str = ""):
        if not prefix:
            raise ValueError("Compound option entry prefix must not be empty")
        self._value_type = OptionTypeRegistry.resolve(value_type)
        self._prefix = prefix
        self._name = name

    @property
    def value_type(self) -> OptionType:
        return self._value_type

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def name(self) -> str:
        return self._name

    def get_prefix(self) -> str:
        return self._prefix

    def get_name(self) -> str:
        return self._name

    def validate(self, raw: str) -> bool:
        """Return True if raw text parses as this column's type."""
        return self._value_type.is_parsable(raw)

    def clone(self) -> "CompoundOptionEntry":
        """Return an independent copy with the same type, prefix and name."""
        return CompoundOptionEntry(self._value_type, self._prefix, self._name)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CompoundOptionEntry):
            return NotImplemented
        return (
            self._value_type.type_id == other._value_type.type_id
            and self._prefix == other._prefix
            and self._name == other._name
        )

    def __hash__(self) -> int:
        return hash((self._value_type.type_id, self._prefix, self._name))

    def __repr__(self) -> str:
        return (
            f"CompoundOptionEntry({self._value_type.type_id!r}, "
            f"prefix={self._prefix!r}, name={self._name!r})"
        )
