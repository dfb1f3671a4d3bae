"""Scalar value types: int, float, bool and str."""

import math
import re
from typing import Any, Optional

from .base import OptionType
from .registry import OptionTypeRegistry

_INT_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")

_TRUE_WORDS = ("true", "1")
_FALSE_WORDS = ("false", "0")


@OptionTypeRegistry.register
class IntType(OptionType):
    """Signed decimal integers."""

    type_id = "int"
    py_type = int
    description = "Signed decimal integer"

    def from_string(self, text: str) -> Optional[int]:
        if not _INT_PATTERN.match(text):
            return None
        return int(text)

    def to_string(self, value: Any) -> str:
        if isinstance(value, bool):
            raise TypeError(f"Expected int for 'int', got bool: {value!r}")
        self.check_value(value)
        return str(value)


@OptionTypeRegistry.register
class FloatType(OptionType):
    """Finite floating point numbers."""

    type_id = "float"
    py_type = float
    description = "Finite floating point number"

    def from_string(self, text: str) -> Optional[float]:
        try:
            value = float(text)
        except ValueError:
            return None
        if not math.isfinite(value):
            return None
        return value

    def to_string(self, value: Any) -> str:
        # Integers are accepted and widened
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Expected float for 'float', got {type(value).__name__}: {value!r}")
        return repr(float(value))


@OptionTypeRegistry.register
class BoolType(OptionType):
    """Booleans written as true/false or 1/0."""

    type_id = "bool"
    py_type = bool
    description = "Boolean (true/false, 1/0)"

    def from_string(self, text: str) -> Optional[bool]:
        word = text.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        return None

    def to_string(self, value: Any) -> str:
        self.check_value(value)
        return "true" if value else "false"


@OptionTypeRegistry.register
class StrType(OptionType):
    """Free text; every string is valid."""

    type_id = "str"
    py_type = str
    description = "Free text"

    def from_string(self, text: str) -> Optional[str]:
        return text

    def to_string(self, value: Any) -> str:
        self.check_value(value)
        return value
