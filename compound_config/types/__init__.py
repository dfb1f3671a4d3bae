"""Option value types.

Each type converts between config-file text and a Python value:
- scalar: int, float, bool, str
- color: RGBA colors
- bindings: key, button and activator bindings
"""

from .base import OptionType
from .registry import OptionTypeRegistry

# Import type modules to trigger registration
from . import scalar
from . import color
from . import bindings

from .bindings import (
    MODIFIERS,
    ActivatorBinding,
    ButtonBinding,
    KeyBinding,
    parse_button_binding,
    parse_key_binding,
)
from .color import Color

__all__ = [
    "OptionType",
    "OptionTypeRegistry",
    "Color",
    "KeyBinding",
    "ButtonBinding",
    "ActivatorBinding",
    "MODIFIERS",
    "parse_key_binding",
    "parse_button_binding",
]
