"""Key, button and activator binding value types.

Binding syntax follows the compositor config format::

    <super> <shift> KEY_E
    <alt> BTN_LEFT
    <super> KEY_ENTER | BTN_EXTRA
"""

import re
from dataclasses import dataclass
from typing import Any, FrozenSet, Optional, Tuple, Union

from .base import OptionType
from .registry import OptionTypeRegistry

# Canonical modifier order
MODIFIERS = ("ctrl", "alt", "shift", "super")

_KEY_PATTERN = re.compile(r"^KEY_[A-Z0-9_]+$")
_BUTTON_PATTERN = re.compile(r"^BTN_[A-Z0-9_]+$")


def _split_modifiers(text: str) -> Optional[Tuple[FrozenSet[str], str]]:
    """Split leading ``<mod>`` tokens from the rest of a binding."""
    rest = text.strip()
    modifiers = set()
    while rest.startswith("<"):
        end = rest.find(">")
        if end < 0:
            return None
        modifier = rest[1:end].strip().lower()
        if modifier not in MODIFIERS:
            return None
        modifiers.add(modifier)
        rest = rest[end + 1:].lstrip()
    return frozenset(modifiers), rest


def _format_binding(modifiers: FrozenSet[str], name: str) -> str:
    tokens = [f"<{m}>" for m in MODIFIERS if m in modifiers]
    if name:
        tokens.append(name)
    return " ".join(tokens)


def _format_checked(binding: Any) -> str:
    """Format a key or button binding, refusing ones the parser cannot read back."""
    if isinstance(binding, KeyBinding):
        text = _format_binding(binding.modifiers, binding.key)
        parsed = parse_key_binding(text)
    elif isinstance(binding, ButtonBinding):
        text = _format_binding(binding.modifiers, binding.button)
        parsed = parse_button_binding(text)
    else:
        raise TypeError(f"Expected KeyBinding or ButtonBinding, got {binding!r}")
    if parsed != binding:
        raise ValueError(f"Binding cannot be written as text: {binding!r}")
    return text


@dataclass(frozen=True)
class KeyBinding:
    """A keyboard binding; ``key`` is empty for modifier-only bindings."""

    modifiers: FrozenSet[str] = frozenset()
    key: str = ""


@dataclass(frozen=True)
class ButtonBinding:
    """A pointer button binding."""

    modifiers: FrozenSet[str]
    button: str


@dataclass(frozen=True)
class ActivatorBinding:
    """A set of alternative key or button bindings triggering one action."""

    bindings: Tuple[Union[KeyBinding, ButtonBinding], ...] = ()


def parse_key_binding(text: str) -> Optional[KeyBinding]:
    split = _split_modifiers(text)
    if split is None:
        return None
    modifiers, rest = split
    if not rest:
        if not modifiers:
            return None
        return KeyBinding(modifiers, "")
    if not _KEY_PATTERN.match(rest):
        return None
    return KeyBinding(modifiers, rest)


def parse_button_binding(text: str) -> Optional[ButtonBinding]:
    split = _split_modifiers(text)
    if split is None:
        return None
    modifiers, rest = split
    if not _BUTTON_PATTERN.match(rest):
        return None
    return ButtonBinding(modifiers, rest)


@OptionTypeRegistry.register
class KeyBindingType(OptionType):
    type_id = "key"
    py_type = KeyBinding
    description = "Keyboard binding"

    def from_string(self, text: str) -> Optional[KeyBinding]:
        return parse_key_binding(text)

    def to_string(self, value: Any) -> str:
        self.check_value(value)
        return _format_checked(value)


@OptionTypeRegistry.register
class ButtonBindingType(OptionType):
    type_id = "button"
    py_type = ButtonBinding
    description = "Pointer button binding"

    def from_string(self, text: str) -> Optional[ButtonBinding]:
        return parse_button_binding(text)

    def to_string(self, value: Any) -> str:
        self.check_value(value)
        return _format_checked(value)


@OptionTypeRegistry.register
class ActivatorBindingType(OptionType):
    """Alternatives separated by ``|``; empty text or ``none`` disables."""

    type_id = "activator"
    py_type = ActivatorBinding
    description = "Key or button bindings"

    def from_string(self, text: str) -> Optional[ActivatorBinding]:
        text = text.strip()
        if not text or text.lower() == "none":
            return ActivatorBinding(())

        bindings = []
        for part in text.split("|"):
            binding = parse_key_binding(part) or parse_button_binding(part)
            if binding is None:
                return None
            bindings.append(binding)
        return ActivatorBinding(tuple(bindings))

    def to_string(self, value: Any) -> str:
        self.check_value(value)
        if not value.bindings:
            return "none"
        return " | ".join(_format_checked(binding) for binding in value.bindings)
