"""Base class for option value types.

Provides:
- OptionType: Abstract text <-> value conversion for one semantic type
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class OptionType(ABC):
    """Abstract base class for option value types.

    All value types must implement:
    - type_id: Unique tag used in schema files
    - py_type: Python class of parsed values
    - from_string(): Lenient parse returning None on failure
    - to_string(): Canonical text form

    Attributes
    ----------
    type_id : str
        Unique identifier for this type
    py_type : type
        Python class produced by from_string
    description : str
        Human-readable description
    """

    type_id: str = "base"
    py_type: type = object
    description: str = "Base value type"

    @abstractmethod
    def from_string(self, text: str) -> Optional[Any]:
        """Parse text into a value.

        Parameters
        ----------
        text : str
            Raw text from the config file

        Returns
        -------
        Any or None
            Parsed value, or None if the text is not valid for this type
        """
        pass

    @abstractmethod
    def to_string(self, value: Any) -> str:
        """Serialize a value to its canonical text form.

        Parameters
        ----------
        value : Any
            Value of type ``py_type``

        Returns
        -------
        str
            Text that ``from_string`` parses back to an equal value

        Raises
        ------
        TypeError
            If value is not an instance of ``py_type``
        """
        pass

    def is_parsable(self, text: str) -> bool:
        """Check whether text parses as this type."""
        if not isinstance(text, str):
            return False
        return self.from_string(text) is not None

    def check_value(self, value: Any) -> None:
        """Raise TypeError if value is not an instance of ``py_type``."""
        if not isinstance(value, self.py_type):
            raise TypeError(
                f"Expected {self.py_type.__name__} for '{self.type_id}', "
                f"got {type(value).__name__}: {value!r}"
            )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self.type_id}'>"
