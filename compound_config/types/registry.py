"""Value type registry for lookup by tag or Python class.

Provides decorator-based registration of value type classes.
"""

from typing import Dict, Type, Union

from ..errors import UnknownTypeError
from .base import OptionType

TypeLike = Union[str, type, OptionType]


class OptionTypeRegistry:
    """Registry for option value types.

    Provides:
    - Decorator-based registration: @OptionTypeRegistry.register
    - Lookup by type_id or by Python class
    """

    _types: Dict[str, OptionType] = {}
    _by_class: Dict[type, OptionType] = {}

    @classmethod
    def register(cls, type_class: Type[OptionType]) -> Type[OptionType]:
        """Register a value type class.

        Use as decorator:
            @OptionTypeRegistry.register
            class MyType(OptionType):
                type_id = "my_type"
                ...

        Parameters
        ----------
        type_class : Type[OptionType]
            Value type class to register

        Returns
        -------
        Type[OptionType]
            The registered class (unchanged)
        """
        instance = type_class()
        cls._types[type_class.type_id] = instance
        cls._by_class[type_class.py_type] = instance
        return type_class

    @classmethod
    def resolve(cls, value_type: TypeLike) -> OptionType:
        """Resolve a tag, Python class or OptionType to an OptionType.

        Parameters
        ----------
        value_type : str, type or OptionType
            Type tag (e.g. "int", "activator"), Python class, or instance

        Returns
        -------
        OptionType
            Registered value type

        Raises
        ------
        UnknownTypeError
            If value_type is not registered
        """
        if isinstance(value_type, OptionType):
            return value_type
        if isinstance(value_type, str):
            found = cls._types.get(value_type)
        else:
            found = cls._by_class.get(value_type)
        if found is None:
            raise UnknownTypeError(
                f"Unknown value type: {value_type!r}. "
                f"Available: {sorted(cls._types)}"
            )
        return found

    @classmethod
    def get_all_types(cls) -> Dict[str, OptionType]:
        """Get all registered value types.

        Returns
        -------
        Dict[str, OptionType]
            Map of type_id to value type
        """
        return cls._types.copy()
