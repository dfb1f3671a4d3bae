"""Generic option contract shared by all option kinds.

Provides:
- OptionBase: Abstract base with default-value slots, string round-trip,
  cloning and change notification
"""

from abc import ABC, abstractmethod
from typing import Callable, List

UpdatedHandler = Callable[[], None]


class OptionBase(ABC):
    """Abstract base class for config options.

    Subclasses implement the string accessors, default handling and
    cloning. Change notification is provided here: handlers registered
    with :meth:`add_updated_handler` are called synchronously, in
    registration order, each time :meth:`notify_updated` runs.

    Parameters
    ----------
    name : str
        Option name, fixed for the lifetime of the option
    """

    def __init__(self, name: str):
        self._name = name
        self._updated_handlers: List[UpdatedHandler] = []

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        """Return the option name."""
        return self._name

    def add_updated_handler(self, handler: UpdatedHandler) -> None:
        """Register a callback fired after each successful value change.

        Registering the same handler twice has no effect.
        """
        if handler not in self._updated_handlers:
            self._updated_handlers.append(handler)

    def rm_updated_handler(self, handler: UpdatedHandler) -> None:
        """Unregister a callback. Unknown handlers are ignored."""
        if handler in self._updated_handlers:
            self._updated_handlers.remove(handler)

    def notify_updated(self) -> None:
        """Call every registered handler once."""
        # Copy so handlers may unregister themselves
        for handler in list(self._updated_handlers):
            handler()

    @abstractmethod
    def clone_option(self) -> "OptionBase":
        """Return an independent deep copy. Handlers are not copied."""
        pass

    @abstractmethod
    def set_value_str(self, text: str) -> bool:
        """Parse text and set the value. Returns False if text is invalid."""
        pass

    @abstractmethod
    def get_value_str(self) -> str:
        """Serialize the current value."""
        pass

    @abstractmethod
    def set_default_value_str(self, text: str) -> bool:
        """Parse text and set the default value. Returns False if invalid."""
        pass

    @abstractmethod
    def get_default_value_str(self) -> str:
        """Serialize the default value."""
        pass

    @abstractmethod
    def reset_to_default(self) -> None:
        """Replace the current value with the default value."""
        pass
